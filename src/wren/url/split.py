"""Split raw URL strings into scheme, path segments, and query parameters.

Examples::

    split_url("myapp://user/1?tab=posts")
        -> SplitURL(scheme="myapp", segments=("user", "1"), query={"tab": "posts"})
    split_url("/user/1", default_scheme="myapp")
        -> SplitURL(scheme="myapp", segments=("user", "1"), query={})
    split_url("http://google.com/search/?q=x")
        -> SplitURL(scheme="http", segments=("google.com", "search"), query={"q": "x"})
"""

from dataclasses import dataclass, field

from wren.url.query import QueryParams
from wren.url.scheme import SCHEME_SEPARATOR


@dataclass(frozen=True, slots=True)
class SplitURL:
    """A URL broken into the parts the router matches against."""

    scheme: str
    segments: tuple[str, ...]
    query: QueryParams = field(default_factory=QueryParams)
    fragment: str = ""


def split_path(path: str) -> tuple[str, ...]:
    """Split a path on ``/``, discarding empties from leading/trailing slashes.

    Interior empty segments (``"a//b"``) are kept so they can fail a
    capture instead of silently collapsing.
    """
    path = path.strip("/")
    if not path:
        return ()
    return tuple(path.split("/"))


def split_scheme(url: str) -> tuple[str | None, str]:
    """Return ``(scheme, remainder)``; scheme is ``None`` for relative URLs.

    A ``://`` only introduces a scheme when no ``/``, ``?`` or ``#`` comes
    before it, so ``"/go?next=http://x"`` stays scheme-relative.
    """
    index = url.find(SCHEME_SEPARATOR)
    if index == -1:
        return None, url
    head = url[:index]
    if any(ch in head for ch in "/?#"):
        return None, url
    return head, url[index + len(SCHEME_SEPARATOR) :]


def split_url(url: str, default_scheme: str = "") -> SplitURL:
    """Split *url* into its scheme, path segments, query, and fragment.

    URLs without a scheme take *default_scheme*. Never raises.
    """
    url, _, fragment = url.partition("#")
    scheme, rest = split_scheme(url)
    path, _, query_string = rest.partition("?")
    return SplitURL(
        scheme=default_scheme if scheme is None else scheme,
        segments=split_path(path),
        query=QueryParams(query_string),
        fragment=fragment,
    )
