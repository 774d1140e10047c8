"""Immutable query string parameters.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.

Parsing rules differ from ``urllib.parse.parse_qs``: a piece without ``=``
is dropped rather than mapped to ``""``, and ``__getitem__`` returns the
*last* value for a repeated key.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import unquote

from wren.routing.params import convert_param


def parse_query(query_string: str) -> dict[str, list[str]]:
    """Parse a raw query string into field name -> list of values.

    ``"query="`` yields ``{"query": [""]}``; ``"query"`` and ``""`` yield
    ``{}``. Keys and values are percent-decoded; ``+`` is left alone.
    """
    data: dict[str, list[str]] = {}
    if not query_string:
        return data
    for piece in query_string.split("&"):
        key, sep, value = piece.partition("=")
        if not sep:
            continue
        data.setdefault(unquote(key), []).append(unquote(value))
    return data


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.
        _raw: Raw query string.

    ``__getitem__`` returns the last value for a key.
    ``get_list`` returns all values for a key, in order.
    """

    _data: dict[str, list[str]]
    _raw: str

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: str = "") -> None:
        object.__setattr__(self, "_raw", query_string)
        object.__setattr__(self, "_data", parse_query(query_string))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "QueryParams is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key][-1]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    @property
    def raw(self) -> str:
        """The query string as it appeared in the URL, without the ``?``."""
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the last value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[-1]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Return value as int, or *default* if missing or not an integer.

        Accepts exactly what the ``<int:...>`` placeholder accepts.
        """
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(convert_param(value, "int"))
        except ValueError:
            return default
