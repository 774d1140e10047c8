"""Static route checks — find registrations that can never be selected.

Matching is first-registered-wins, so a general pattern registered early
silently hides every more specific pattern registered after it::

    nav.register("http://<path:url>", web)
    nav.register("http://example.com/help", help)   # never reached

``check_routes`` walks the registry and reports such routes without
matching any URL.

Usage::

    result = check_routes(nav.router)
    if not result.ok:
        print(result.summary())

    # Or via CLI:
    #   wren check myapp:navigator
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from wren.routing.params import convert_param
from wren.routing.pattern import Literal, PathCapture, Pattern, Segment, TypedCapture

if TYPE_CHECKING:
    from wren.routing.router import Router

# ---------------------------------------------------------------------------
# Issue types
# ---------------------------------------------------------------------------


class Severity(Enum):
    """Severity of a route check issue."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class RouteIssue:
    """A single problem found while checking routes."""

    severity: Severity
    category: str
    message: str
    route: str | None = None
    details: str | None = None


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------


def _is_int(text: str) -> bool:
    try:
        convert_param(text, "int")
    except ValueError:
        return False
    return True


def _segment_covers(general: Segment, specific: Segment) -> bool:
    """True if every path segment *specific* accepts is also accepted by *general*."""
    match general:
        case Literal(text=text):
            return specific == Literal(text)
        case TypedCapture(kind="int"):
            match specific:
                case TypedCapture(kind="int"):
                    return True
                case Literal(text=text):
                    return _is_int(text)
            return False
        case TypedCapture():
            match specific:
                case TypedCapture():
                    return True
                case Literal(text=text):
                    return text != ""
            return False
    return False


def covers(earlier: Pattern, later: Pattern) -> bool:
    """True if *earlier* matches every URL that *later* matches.

    When that holds and *earlier* was registered first, *later* is dead.
    """
    if earlier.scheme is not None and earlier.scheme != later.scheme:
        return False
    specific = later.segments
    for index, segment in enumerate(earlier.segments):
        if isinstance(segment, PathCapture):
            return True
        if index >= len(specific) or not _segment_covers(segment, specific[index]):
            return False
    return len(earlier.segments) == len(specific)


# ---------------------------------------------------------------------------
# Checker
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class CheckResult:
    """Result of a route check."""

    issues: list[RouteIssue] = field(default_factory=list)
    routes_checked: int = 0

    @property
    def errors(self) -> list[RouteIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[RouteIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [f"Checked {self.routes_checked} routes."]
        if self.ok and not self.warnings:
            lines.append("No issues found.")
        elif self.ok:
            lines.append(f"No errors. {len(self.warnings)} warning(s).")
        else:
            lines.append(f"{len(self.errors)} error(s), {len(self.warnings)} warning(s).")
        for issue in self.issues:
            prefix = issue.severity.value.upper()
            lines.append(f"  [{prefix}] {issue.message}")
            if issue.details:
                lines.append(f"           {issue.details}")
        return "\n".join(lines)


def check_routes(router: Router) -> CheckResult:
    """Check a router's registry for unreachable and suspicious routes.

    Checks:
    1. **Shadowed routes**: a route covered by an earlier route can never
       be selected (error).
    2. **Unknown converters**: a literal segment shaped like ``<kind:name>``
       is almost always a typo for a placeholder (warning).
    """
    routes = router.routes
    result = CheckResult(routes_checked=len(routes))

    for index, route in enumerate(routes):
        pattern = route.pattern
        for earlier in routes[:index]:
            if covers(earlier.pattern, pattern):
                result.issues.append(
                    RouteIssue(
                        severity=Severity.ERROR,
                        category="shadowed",
                        message=(
                            f"Route {pattern.source!r} is unreachable: "
                            f"{earlier.pattern.source!r} is registered first and matches "
                            "every URL it would match"
                        ),
                        route=pattern.source,
                        details="Register the more specific pattern before the general one.",
                    )
                )
                break

        for segment in pattern.segments:
            if (
                isinstance(segment, Literal)
                and segment.text.startswith("<")
                and segment.text.endswith(">")
            ):
                result.issues.append(
                    RouteIssue(
                        severity=Severity.WARNING,
                        category="converter",
                        message=(
                            f"Segment {segment.text!r} in {pattern.source!r} "
                            "is matched literally"
                        ),
                        route=pattern.source,
                        details="Supported placeholders: <name>, <str:name>, <int:name>, <path:name>.",
                    )
                )

    return result
