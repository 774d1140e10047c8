"""Tests for wren.url.query — QueryParams and query string parsing."""

import pytest

from wren.url.query import QueryParams, parse_query


class TestParseQuery:
    def test_empty_value_kept(self) -> None:
        assert parse_query("query=") == {"query": [""]}

    def test_key_without_equals_dropped(self) -> None:
        assert parse_query("query") == {}

    def test_empty_string(self) -> None:
        assert parse_query("") == {}

    def test_mixed_pieces(self) -> None:
        assert parse_query("a=1&flag&b=") == {"a": ["1"], "b": [""]}

    def test_splits_on_first_equals(self) -> None:
        assert parse_query("next=a=b") == {"next": ["a=b"]}

    def test_percent_decoding(self) -> None:
        assert parse_query("q=hello%20world&k%26=v") == {"q": ["hello world"], "k&": ["v"]}

    def test_plus_is_literal(self) -> None:
        assert parse_query("q=a+b") == {"q": ["a+b"]}

    def test_repeated_keys_keep_order(self) -> None:
        assert parse_query("t=1&t=2&t=3") == {"t": ["1", "2", "3"]}


class TestQueryParams:
    def test_last_value_wins(self) -> None:
        q = QueryParams("t=1&t=2")
        assert q["t"] == "2"
        assert q.get("t") == "2"

    def test_get_list(self) -> None:
        q = QueryParams("t=1&t=2")
        assert q.get_list("t") == ["1", "2"]
        assert q.get_list("missing") == []

    def test_mapping_protocol(self) -> None:
        q = QueryParams("a=1&b=2")
        assert len(q) == 2
        assert list(q) == ["a", "b"]
        assert "a" in q
        assert "z" not in q
        assert dict(q) == {"a": "1", "b": "2"}

    def test_equals_plain_dict(self) -> None:
        assert QueryParams("query=") == {"query": ""}

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            QueryParams("")["missing"]

    def test_get_default(self) -> None:
        assert QueryParams("").get("missing", "x") == "x"

    def test_get_int(self) -> None:
        q = QueryParams("page=3&bad=abc")
        assert q.get_int("page") == 3
        assert q.get_int("bad", 1) == 1
        assert q.get_int("missing") is None

    @pytest.mark.parametrize("value", [" 3 ", "3_0", "3.0", "٣"])
    def test_get_int_agrees_with_int_placeholder(self, value: str) -> None:
        assert QueryParams(f"page={value}").get_int("page", -1) == -1

    def test_get_int_signed(self) -> None:
        assert QueryParams("offset=-5").get_int("offset") == -5

    def test_raw(self) -> None:
        assert QueryParams("a=1&flag").raw == "a=1&flag"

    def test_immutable(self) -> None:
        q = QueryParams("a=1")
        with pytest.raises(AttributeError):
            q._data = {}  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(QueryParams("a=1")) == "QueryParams({'a': '1'})"
