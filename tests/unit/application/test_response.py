"""Unit tests for ResponseExtractor."""

from __future__ import annotations

import pytest

from mp_filterstate.application.filtering import ResponseExtractor


@pytest.fixture()
def extractor() -> ResponseExtractor:
    return ResponseExtractor()


def _payload() -> dict[str, object]:
    return {
        "page": 2,
        "limit": "25",
        "search": "shoes",
        "sorts": [{"field": "price", "order": "desc"}, {"field": "", "order": "asc"}, "junk"],
        "filters": {"brand": ["a", "b"], "empty": [], "size": 42},
        "data": [{"id": 1}, {"id": 2}],
        "meta": {"took": 3},
        "total": 120,
        "from": 26,
        "to": 50,
        "pages": 5,
    }


class TestParse:
    def test_extracts_filter_fields(self, extractor: ResponseExtractor) -> None:
        assert extractor.parse(_payload()) == {
            "page": 2,
            "limit": 25,
            "search": "shoes",
            "sorts": [{"field": "price", "order": "desc"}],
            "filters": {"brand": ["a", "b"], "size": 42},
        }

    def test_omits_missing_and_invalid_fields(self, extractor: ResponseExtractor) -> None:
        assert extractor.parse({"page": 0, "limit": "abc", "search": "", "sorts": [], "filters": "x"}) == {}

    def test_encoded_sorts_string(self, extractor: ResponseExtractor) -> None:
        assert extractor.parse({"sorts": "name:asc,age:desc"})["sorts"] == [
            {"field": "name", "order": "asc"},
            {"field": "age", "order": "desc"},
        ]

    def test_metadata(self, extractor: ResponseExtractor) -> None:
        extractor.parse(_payload())
        assert extractor.total == 120
        assert extractor.from_ == 26
        assert extractor.to == 50
        assert extractor.pages == 5
        assert extractor.meta == {"took": 3}
        assert extractor.records == [{"id": 1}, {"id": 2}]
        assert extractor.is_empty is False

    def test_shallow_merge_keeps_previous_fields(self, extractor: ResponseExtractor) -> None:
        extractor.parse(_payload())
        assert extractor.parse({"page": 3}) == {
            "page": 3,
            "limit": 25,
            "search": "shoes",
            "sorts": [{"field": "price", "order": "desc"}],
            "filters": {"brand": ["a", "b"], "size": 42},
        }
        assert extractor.total == 120

    @pytest.mark.parametrize("raw", [None, "text", [1, 2], 42])
    def test_non_mapping_resets(self, extractor: ResponseExtractor, raw: object) -> None:
        extractor.parse(_payload())
        assert extractor.parse(raw) == {}
        assert extractor.snapshot == {}
        assert extractor.total == 0
        assert extractor.records == []
        assert extractor.is_empty is True

    def test_defaults_when_absent(self, extractor: ResponseExtractor) -> None:
        extractor.parse({"total": -4, "meta": "x", "data": "rows"})
        assert extractor.total == 0
        assert extractor.from_ == 0
        assert extractor.pages == 0
        assert extractor.meta == {}
        assert extractor.records == []
