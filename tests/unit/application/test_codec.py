"""Unit tests for QueryCodec – FilterState <-> query string."""

from __future__ import annotations

import pytest

from mp_filterstate.application.filtering import QueryCodec


@pytest.fixture()
def codec() -> QueryCodec:
    return QueryCodec()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


class TestScalars:
    def test_encode_value(self, codec: QueryCodec) -> None:
        assert codec.encode_value(None) == "%5Bnull%5D"
        assert codec.encode_value(True) == "true"
        assert codec.encode_value(12) == "12"
        assert codec.encode_value(1.25) == "1.25"
        assert codec.encode_value("a b,c:d") == "a%20b%2Cc%3Ad"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("false", False),
            ("%5Bnull%5D", None),
            ("42", 42),
            ("-3", -3),
            ("1.5", 1.5),
            ("books", "books"),
            ("red+shoes", "red shoes"),
            ("", ""),
        ],
    )
    def test_infer_type(self, codec: QueryCodec, raw: str, expected: object) -> None:
        result = codec.infer_type(raw)
        assert result == expected
        assert type(result) is type(expected)

    def test_look_alike_strings_are_lossy(self, codec: QueryCodec) -> None:
        query = codec.encode({"filters": {"code": "true", "zip": "007", "label": "[null]"}})
        assert codec.decode(query)["filters"] == {"code": True, "zip": 7, "label": None}


# ---------------------------------------------------------------------------
# Compounds
# ---------------------------------------------------------------------------


class TestCompounds:
    def test_array(self, codec: QueryCodec) -> None:
        assert codec.encode_array([1, "a,b", None]) == "1,a%2Cb,%5Bnull%5D"
        assert codec.decode_array("1,a%2Cb,%5Bnull%5D") == [1, "a,b", None]

    def test_object(self, codec: QueryCodec) -> None:
        assert codec.encode_object({"min": 1, "max": 10}) == "min:1,max:10"
        assert codec.decode_object("min:1,max:10") == {"min": 1, "max": 10}

    def test_object_drops_entries_without_key_or_value(self, codec: QueryCodec) -> None:
        assert codec.decode_object("min:1,:3,max:,flag") == {"min": 1}

    def test_sorts_preserve_order(self, codec: QueryCodec) -> None:
        sorts = [{"field": "price", "order": "desc"}, {"field": "id", "order": "asc"}]
        assert codec.encode_sorts(sorts) == "price:desc,id:asc"
        assert codec.decode_sorts("price:desc,id:asc") == sorts

    def test_sorts_keep_duplicates(self, codec: QueryCodec) -> None:
        assert codec.decode_sorts("a:asc,a:desc") == [
            {"field": "a", "order": "asc"},
            {"field": "a", "order": "desc"},
        ]

    def test_malformed_sorts_dropped(self, codec: QueryCodec) -> None:
        assert codec.decode_sorts("price:up,:asc,id:desc,broken,,") == [{"field": "id", "order": "desc"}]

    def test_encode_sorts_skips_malformed(self, codec: QueryCodec) -> None:
        assert codec.encode_sorts([{"field": "", "order": "asc"}, {"field": "id", "order": "asc"}]) == "id:asc"


# ---------------------------------------------------------------------------
# encode / decode
# ---------------------------------------------------------------------------


class TestEncode:
    def test_full_state(self, codec: QueryCodec) -> None:
        state = {
            "page": 2,
            "limit": 10,
            "search": "red shoes",
            "sorts": [{"field": "price", "order": "desc"}],
            "filters": {"size": [40, 41], "brand": {"a": "x"}, "sale": True, "tag": None},
        }
        assert codec.encode(state) == (
            "page=2&limit=10&search=red%20shoes&sorts=price:desc"
            "&size=40,41&brand=a:x&sale=true&tag=%5Bnull%5D"
        )

    def test_omits_defaults_and_invalid(self, codec: QueryCodec) -> None:
        state = {"page": 0, "limit": -1, "search": "", "sorts": [], "filters": {}}
        assert codec.encode(state) == ""

    def test_filter_keys_are_escaped(self, codec: QueryCodec) -> None:
        assert codec.encode({"filters": {"a&b=c": 1}}) == "a%26b%3Dc=1"


class TestDecode:
    def test_concrete_query(self, codec: QueryCodec) -> None:
        decoded = codec.decode(
            "page=3&limit=5&search=foo&sorts=price:desc,id:asc&category=books,ebooks&available=true"
        )
        assert decoded == {
            "page": 3,
            "limit": 5,
            "search": "foo",
            "sorts": [{"field": "price", "order": "desc"}, {"field": "id", "order": "asc"}],
            "filters": {"category": ["books", "ebooks"], "available": True},
        }

    @pytest.mark.parametrize("query", ["page=0&limit=-2", "page=abc&limit=", "page=2.5&limit=true"])
    def test_invalid_page_and_limit_omitted(self, codec: QueryCodec, query: str) -> None:
        decoded = codec.decode(query)
        assert "page" not in decoded
        assert "limit" not in decoded
        assert decoded["filters"] == {}

    def test_sorts_and_filters_always_present(self, codec: QueryCodec) -> None:
        assert codec.decode("") == {"sorts": [], "filters": {}}

    def test_search_present_only_with_key(self, codec: QueryCodec) -> None:
        assert "search" not in codec.decode("page=1")
        assert codec.decode("search=")["search"] == ""
        assert codec.decode("search=red+shoes")["search"] == "red shoes"

    def test_classification(self, codec: QueryCodec) -> None:
        filters = codec.decode("a=1,2&b=x:1&c=x:1,y:2&d=plain&e=%5Bnull%5D&f=a%2Cb")["filters"]
        assert filters == {
            "a": [1, 2],
            "b": {"x": 1},
            "c": {"x": 1, "y": 2},
            "d": "plain",
            "e": None,
            "f": "a,b",
        }

    def test_comma_and_colon_reads_as_map(self, codec: QueryCodec) -> None:
        assert codec.decode("t=a,b:c")["filters"] == {"t": {"b": "c"}}

    def test_single_item_list_reads_as_scalar(self, codec: QueryCodec) -> None:
        query = codec.encode({"filters": {"tags": ["solo"]}})
        assert codec.decode(query)["filters"] == {"tags": "solo"}

    def test_leading_question_mark_and_empty_keys(self, codec: QueryCodec) -> None:
        assert codec.decode("?=5&&a=1")["filters"] == {"a": 1}

    def test_duplicate_keys_last_wins(self, codec: QueryCodec) -> None:
        assert codec.decode("a=1&a=2")["filters"] == {"a": 2}

    def test_reserved_keys_never_become_filters(self, codec: QueryCodec) -> None:
        decoded = codec.decode("page=x&limit=y&sorts=bad&search=q")
        assert decoded["filters"] == {}
        assert decoded["sorts"] == []

    def test_filters_helpers(self, codec: QueryCodec) -> None:
        encoded = codec.encode_filters({"tags": ["a", "b"], "open": False})
        assert encoded == "tags=a,b&open=false"
        assert codec.decode_filters(encoded + "&page=4") == {"tags": ["a", "b"], "open": False}

    def test_round_trip(self, codec: QueryCodec) -> None:
        state = {
            "page": 4,
            "limit": 25,
            "search": "über & more",
            "sorts": [{"field": "created at", "order": "desc"}, {"field": "id", "order": "asc"}],
            "filters": {
                "status": ["open", "pending"],
                "range": {"min": 1.5, "max": 9},
                "note": "10:30, sharp",
                "owner": None,
                "vip": False,
            },
        }
        assert codec.decode(codec.encode(state)) == state
