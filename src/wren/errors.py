"""Wren exception hierarchy.

Shared across the pattern compiler, Router, and Navigator so every module
raises and catches the same types. Lookup misses and declined factories
are return values, not exceptions.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when routes or navigator settings are invalid.

    Typically raised at registration time, before any URL is matched.
    """


class PatternError(ConfigurationError):
    """A route pattern was rejected by the compiler.

    The route is never added to the registry when this is raised.
    """

    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid route pattern {pattern!r}: {detail}")


class DuplicateCapture(PatternError):  # noqa: N818
    """Two placeholders in one pattern share a capture name."""

    def __init__(self, pattern: str, name: str) -> None:
        self.name = name
        super().__init__(pattern, f"capture name {name!r} is used more than once")


class MisplacedPathCapture(PatternError):  # noqa: N818
    """A ``<path:name>`` placeholder appears before the last segment."""

    def __init__(self, pattern: str, name: str) -> None:
        self.name = name
        super().__init__(
            pattern,
            f"path capture <path:{name}> must be the last segment",
        )
