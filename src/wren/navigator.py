"""Navigator — the dispatch layer over a Router.

Owns the default scheme and the route registry, and invokes the
registered factory or open-handler for a matched URL. What a factory
builds (a view, a page, a command) is opaque here.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from wren.config import NavigatorConfig
from wren.routing.pattern import compile_pattern
from wren.routing.route import (
    Action,
    Factory,
    FactoryFunc,
    OpenFunc,
    OpenHandler,
    Route,
    RouteMatch,
)
from wren.routing.router import Router
from wren.url.scheme import normalize_scheme

logger = logging.getLogger("wren.navigator")


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of a factory dispatch.

    Distinguishes "no route matched" (``match is None``), "a route matched
    but its factory declined" (``declined``), and "the matched route is an
    open-handler" (``is_factory`` is False).
    """

    match: RouteMatch | None = None
    result: Any = None

    @property
    def matched(self) -> bool:
        return self.match is not None

    @property
    def is_factory(self) -> bool:
        return self.match is not None and isinstance(self.match.route.action, Factory)

    @property
    def declined(self) -> bool:
        return self.is_factory and self.result is None


class Navigator:
    """Maps URL patterns to factories and open-handlers.

    Usage::

        nav = Navigator(NavigatorConfig(scheme="myapp"))

        @nav.factory("/user/<int:id>")
        def user(url, values, context):
            return UserScreen(values["id"])

        @nav.handler("/ping")
        def ping(url, values):
            return True

        nav.resolve("/user/42")   # -> UserScreen(42)
        nav.open("myapp://ping")  # -> True

    Scheme-less patterns are bound to the scheme that is current when
    they are registered; scheme-less URLs take the scheme current at
    lookup time.
    """

    __slots__ = ("_router", "_scheme", "config")

    def __init__(self, config: NavigatorConfig | None = None) -> None:
        self.config: NavigatorConfig = config or NavigatorConfig()
        self._scheme: str = normalize_scheme(self.config.scheme)
        self._router = Router()

    # -- Scheme --

    @property
    def scheme(self) -> str:
        """The default scheme, always in canonical form."""
        return self._scheme

    @scheme.setter
    def scheme(self, raw: str) -> None:
        self._scheme = normalize_scheme(raw)

    @property
    def router(self) -> Router:
        return self._router

    # -- Registration --

    def register(self, pattern: str, action: Action, *, name: str | None = None) -> Route:
        """Compile *pattern* and append it to the registry.

        Raises ``DuplicateCapture`` or ``MisplacedPathCapture`` without
        touching the registry.
        """
        route = Route(compile_pattern(pattern, self._scheme), action, name)
        self._router.add(route)
        return route

    def factory(
        self, pattern: str, *, name: str | None = None
    ) -> Callable[[FactoryFunc], FactoryFunc]:
        """Register a factory via decorator."""

        def decorator(func: FactoryFunc) -> FactoryFunc:
            self.register(pattern, Factory(func), name=name)
            return func

        return decorator

    def handler(self, pattern: str, *, name: str | None = None) -> Callable[[OpenFunc], OpenFunc]:
        """Register an open-handler via decorator."""

        def decorator(func: OpenFunc) -> OpenFunc:
            self.register(pattern, OpenHandler(func), name=name)
            return func

        return decorator

    # -- Lookup --

    def match(self, url: str) -> RouteMatch | None:
        """Return the first matching route for *url*, or ``None``."""
        found = self._router.match(url, self._scheme)
        if found is None:
            self._log("No route matches %r", url)
        return found

    def open(self, url: str) -> bool:
        """Dispatch *url* to an open-handler.

        Returns ``False`` when nothing matches, when the matched route is a
        factory, or when the handler reports it did not handle the URL.
        """
        found = self.match(url)
        if found is None:
            return False
        match found.route.action:
            case OpenHandler(func=func):
                return bool(func(url, found.values))
            case _:
                self._log("Route %s for %r is not an open-handler", found.route.pattern, url)
                return False

    def dispatch(self, url: str, context: Mapping[Any, Any] | None = None) -> Resolution:
        """Dispatch *url* to a factory and report how it went.

        *context* is passed through to the factory untouched.
        """
        found = self.match(url)
        if found is None:
            return Resolution()
        match found.route.action:
            case Factory(func=func):
                result = func(url, found.values, context)
                if result is None:
                    self._log("Factory for %s declined %r", found.route.pattern, url)
                return Resolution(found, result)
            case _:
                self._log("Route %s for %r is not a factory", found.route.pattern, url)
                return Resolution(found)

    def resolve(self, url: str, context: Mapping[Any, Any] | None = None) -> Any:
        """Return what the matching factory builds for *url*, or ``None``."""
        return self.dispatch(url, context).result

    def _log(self, msg: str, *args: object) -> None:
        level = logging.INFO if self.config.debug else logging.DEBUG
        logger.log(level, msg, *args)


# -- Process-wide default --

_default: Navigator | None = None
_default_lock = threading.Lock()


def init_default(config: NavigatorConfig | None = None) -> Navigator:
    """Create the process-wide default navigator.

    Raises ``RuntimeError`` if one already exists; call ``reset_default()``
    first to replace it.
    """
    global _default
    with _default_lock:
        if _default is not None:
            msg = "The default navigator is already initialized. Call reset_default() first."
            raise RuntimeError(msg)
        _default = Navigator(config)
        return _default


def default_navigator() -> Navigator:
    """Return the process-wide default navigator.

    Raises ``RuntimeError`` if ``init_default()`` has not been called.
    """
    nav = _default
    if nav is None:
        msg = "No default navigator. Call wren.init_default() during startup."
        raise RuntimeError(msg)
    return nav


def reset_default() -> None:
    """Drop the process-wide default navigator."""
    global _default
    with _default_lock:
        _default = None
