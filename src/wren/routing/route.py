"""Route, RouteMatch, and the action frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from wren.routing.pattern import Pattern, Values
from wren.url.query import QueryParams

FactoryFunc: TypeAlias = Callable[[str, Mapping[str, Any], Mapping[Any, Any] | None], Any]
OpenFunc: TypeAlias = Callable[[str, Mapping[str, Any]], bool]


@dataclass(frozen=True, slots=True)
class Factory:
    """Builds an object from a match.

    Called as ``func(url, values, context)``. Returning ``None`` declines
    the match even though the pattern matched.
    """

    func: FactoryFunc


@dataclass(frozen=True, slots=True)
class OpenHandler:
    """Handles a URL outright. Called as ``func(url, values)``.

    The returned truthiness is the definitive "handled" signal.
    """

    func: OpenFunc


Action: TypeAlias = Factory | OpenHandler


@dataclass(frozen=True, slots=True)
class Route:
    """A registry entry: a compiled pattern and what to do on a match."""

    pattern: Pattern
    action: Action
    name: str | None = None

    @property
    def kind(self) -> str:
        return "factory" if isinstance(self.action, Factory) else "open"

    @property
    def handler_name(self) -> str:
        func = self.action.func
        return getattr(func, "__qualname__", None) or repr(func)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``values`` is ``query`` overlaid with ``path_params``; captured path
    values win when a query key has the same name.
    """

    route: Route
    url: str
    path_params: Values
    query: QueryParams = field(default_factory=QueryParams)
    values: dict[str, Any] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", {**self.query, **self.path_params})
