"""Pattern compiler — route strings into segment matchers.

Grammar::

    pattern  := [scheme "://"] path
    path     := segment ("/" segment)*
    segment  := literal | "<" ["int:" | "str:" | "path:"] name ">"

Examples::

    "myapp://user/<int:id>" -> Pattern(scheme="myapp",
                                       segments=(Literal("user"), TypedCapture("id", "int")))
    "/post/<title>"         -> Pattern(scheme=None,
                                       segments=(Literal("post"), TypedCapture("title", "str")))
    "http://<path:_>"       -> Pattern(scheme="http", segments=(PathCapture("_"),))
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

from wren.errors import DuplicateCapture, MisplacedPathCapture
from wren.routing.params import CONVERTERS, convert_param
from wren.url.split import split_path, split_scheme

logger = logging.getLogger("wren.routing")

_PLACEHOLDER = re.compile(r"<(?:(?P<kind>[^<>:/]*):)?(?P<name>[^<>:/]+)>")


@dataclass(frozen=True, slots=True)
class Literal:
    """Matches one path segment by exact, case-sensitive equality."""

    text: str


@dataclass(frozen=True, slots=True)
class TypedCapture:
    """Captures one non-empty path segment converted to *kind*."""

    name: str
    kind: str = "str"


@dataclass(frozen=True, slots=True)
class PathCapture:
    """Captures every remaining path segment, joined with ``/``.

    Matches zero segments too, capturing ``""``.
    """

    name: str


Segment: TypeAlias = Literal | TypedCapture | PathCapture
Values: TypeAlias = dict[str, str | int]


@dataclass(frozen=True, slots=True)
class Pattern:
    """A compiled route pattern.

    ``scheme`` is ``None`` when the pattern accepts any scheme.
    """

    source: str
    scheme: str | None
    segments: tuple[Segment, ...]

    def __str__(self) -> str:
        return self.source

    @property
    def captures(self) -> tuple[str, ...]:
        """Capture names in pattern order."""
        return tuple(
            seg.name for seg in self.segments if isinstance(seg, TypedCapture | PathCapture)
        )

    def accepts_scheme(self, scheme: str) -> bool:
        return self.scheme is None or self.scheme == scheme

    def match_segments(self, parts: Sequence[str]) -> Values | None:
        """Match URL path segments pairwise; return captured values or ``None``."""
        values: Values = {}
        for index, segment in enumerate(self.segments):
            match segment:
                case PathCapture(name=name):
                    values[name] = "/".join(parts[index:])
                    return values
                case Literal(text=text):
                    if index >= len(parts) or parts[index] != text:
                        return None
                case TypedCapture(name=name, kind=kind):
                    if index >= len(parts):
                        return None
                    try:
                        values[name] = convert_param(parts[index], kind)
                    except ValueError:
                        return None
        if len(parts) != len(self.segments):
            return None
        return values


def parse_segment(token: str) -> Segment:
    """Classify one path token as a literal or a placeholder.

    A token shaped like a placeholder with an unknown converter
    (``<float:price>``) stays a literal and logs a warning.
    """
    found = _PLACEHOLDER.fullmatch(token)
    if found is None:
        return Literal(token)

    kind, name = found.group("kind"), found.group("name")
    if kind is None or kind == "str":
        return TypedCapture(name, "str")
    if kind == "int":
        return TypedCapture(name, "int")
    if kind == "path":
        return PathCapture(name)

    logger.warning(
        "Unknown converter %r in %r; treating it as a literal segment. Known converters: %s",
        kind,
        token,
        ", ".join(sorted(CONVERTERS)),
    )
    return Literal(token)


def compile_pattern(text: str, default_scheme: str | None = None) -> Pattern:
    """Compile a route pattern string.

    Patterns without ``scheme://`` take *default_scheme* when it is
    non-empty, otherwise they accept any scheme.

    Raises ``MisplacedPathCapture`` if ``<path:...>`` is not last.
    Raises ``DuplicateCapture`` if a capture name repeats.
    """
    scheme, path = split_scheme(text)
    if scheme is None:
        scheme = default_scheme or None

    segments = tuple(parse_segment(token) for token in split_path(path))

    seen: set[str] = set()
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        if isinstance(segment, Literal):
            continue
        if isinstance(segment, PathCapture) and index != last:
            raise MisplacedPathCapture(text, segment.name)
        if segment.name in seen:
            raise DuplicateCapture(text, segment.name)
        seen.add(segment.name)

    return Pattern(source=text, scheme=scheme, segments=segments)
