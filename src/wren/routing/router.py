"""Ordered route registry with first-registered-wins matching.

Routes are tried in the order they were added and the first full match
wins. There is no "most specific" ranking: register literal routes
before the placeholder or ``<path:...>`` routes that would also match
them. ``wren check`` reports routes that can never be reached.
"""

import logging
import threading

from wren.routing.route import Route, RouteMatch
from wren.url.split import split_url

logger = logging.getLogger("wren.routing")


class Router:
    """Ordered route registry.

    Usage::

        router = Router()
        router.add(Route(compile_pattern("myapp://user/<int:id>"), Factory(make_user)))
        match = router.match("myapp://user/42")

    Thread safety:
        Writes build a new tuple under a lock and publish it with a single
        assignment; ``match`` reads whichever tuple is current, so a lookup
        never observes a half-applied registration.
    """

    __slots__ = ("_lock", "_routes")

    def __init__(self) -> None:
        self._routes: tuple[Route, ...] = ()
        self._lock = threading.Lock()

    def add(self, route: Route) -> None:
        """Append a route after every route already registered."""
        with self._lock:
            self._routes = (*self._routes, route)
        logger.debug("Registered %s (%s)", route.pattern.source, route.kind)

    def clear(self) -> None:
        """Remove every route."""
        with self._lock:
            self._routes = ()

    @property
    def routes(self) -> tuple[Route, ...]:
        """Return all registered routes in registration order."""
        return self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def match(self, url: str, default_scheme: str = "") -> RouteMatch | None:
        """Match *url* against registered routes.

        Returns a ``RouteMatch`` for the first route that matches, or
        ``None``. A placeholder that fails to convert only rules out its
        own route; later routes are still tried.
        """
        split = split_url(url, default_scheme)
        for route in self._routes:
            pattern = route.pattern
            if not pattern.accepts_scheme(split.scheme):
                continue
            params = pattern.match_segments(split.segments)
            if params is not None:
                return RouteMatch(route=route, url=url, path_params=params, query=split.query)
        return None
