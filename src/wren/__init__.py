"""Wren — URL pattern routing.

Registers patterns with typed placeholders, matches URLs against them in
registration order, and hands the extracted values to a factory or an
open-handler.

Basic usage::

    from wren import Navigator, NavigatorConfig

    nav = Navigator(NavigatorConfig(scheme="myapp"))

    @nav.factory("/user/<int:id>")
    def user(url, values, context):
        return UserScreen(values["id"])

    @nav.handler("http://<path:_>")
    def web(url, values):
        return browser.open(url)

    nav.resolve("myapp://user/42")
    nav.open("http://example.com/docs")

The first registered pattern that matches wins, so register specific
patterns before general ones.
"""

__version__ = "0.1.0"
__all__ = [
    "CheckResult",
    "ConfigurationError",
    "DuplicateCapture",
    "Factory",
    "MisplacedPathCapture",
    "Navigator",
    "NavigatorConfig",
    "OpenHandler",
    "Pattern",
    "PatternError",
    "QueryParams",
    "Resolution",
    "Route",
    "RouteMatch",
    "Router",
    "SplitURL",
    "WrenError",
    "check_routes",
    "compile_pattern",
    "default_navigator",
    "init_default",
    "normalize_scheme",
    "reset_default",
    "split_url",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "CheckResult": "wren.checks",
    "check_routes": "wren.checks",
    "NavigatorConfig": "wren.config",
    "ConfigurationError": "wren.errors",
    "DuplicateCapture": "wren.errors",
    "MisplacedPathCapture": "wren.errors",
    "PatternError": "wren.errors",
    "WrenError": "wren.errors",
    "Navigator": "wren.navigator",
    "Resolution": "wren.navigator",
    "default_navigator": "wren.navigator",
    "init_default": "wren.navigator",
    "reset_default": "wren.navigator",
    "Pattern": "wren.routing.pattern",
    "compile_pattern": "wren.routing.pattern",
    "Factory": "wren.routing.route",
    "OpenHandler": "wren.routing.route",
    "Route": "wren.routing.route",
    "RouteMatch": "wren.routing.route",
    "Router": "wren.routing.router",
    "QueryParams": "wren.url.query",
    "normalize_scheme": "wren.url.scheme",
    "SplitURL": "wren.url.split",
    "split_url": "wren.url.split",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
