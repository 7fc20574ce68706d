"""Tests for search value objects (SortSpec, PageRequest, SearchCriteria) and sort enums."""

import pytest

from bizdirectory.core.constants import MAX_CRITERION_LENGTH
from bizdirectory.domain.enums import SortDirection, SortField
from bizdirectory.domain.value_objects.search import (
    DEFAULT_RANKED_SORT_SPEC,
    DEFAULT_SEARCH_SORT_SPEC,
    PageRequest,
    SearchCriteria,
    SortSpec,
)


class TestSortField:
    @pytest.mark.parametrize("raw", ["rating", " RATING ", "Rating"])
    def test_from_str_case_insensitive(self, raw: str) -> None:
        assert SortField.from_str(raw) is SortField.RATING

    @pytest.mark.parametrize("raw", [None, "", "name; DROP TABLE business", "price"])
    def test_from_str_unknown_is_none(self, raw: str | None) -> None:
        assert SortField.from_str(raw) is None


class TestSortDirection:
    @pytest.mark.parametrize("raw", ["desc", "DESC", " Desc "])
    def test_desc(self, raw: str) -> None:
        assert SortDirection.from_str(raw) is SortDirection.DESC

    @pytest.mark.parametrize("raw", [None, "", "asc", "descending", "down"])
    def test_anything_else_is_asc(self, raw: str | None) -> None:
        assert SortDirection.from_str(raw) is SortDirection.ASC


class TestSortSpec:
    def test_parse_field_and_direction(self) -> None:
        sort = SortSpec.parse("rating,desc", DEFAULT_SEARCH_SORT_SPEC)
        assert sort == SortSpec(SortField.RATING, SortDirection.DESC)
        assert sort.descending

    def test_parse_field_only_is_ascending(self) -> None:
        sort = SortSpec.parse("reviews", DEFAULT_SEARCH_SORT_SPEC)
        assert sort == SortSpec(SortField.REVIEWS, SortDirection.ASC)

    @pytest.mark.parametrize("raw", [None, "", "   ", "unknown,desc", "1=1,asc"])
    def test_blank_or_unknown_falls_back_to_default(self, raw: str | None) -> None:
        assert SortSpec.parse(raw, DEFAULT_SEARCH_SORT_SPEC) == DEFAULT_SEARCH_SORT_SPEC
        assert SortSpec.parse(raw, DEFAULT_RANKED_SORT_SPEC) == DEFAULT_RANKED_SORT_SPEC

    def test_defaults(self) -> None:
        assert str(DEFAULT_SEARCH_SORT_SPEC) == "name,asc"
        assert str(DEFAULT_RANKED_SORT_SPEC) == "rating,desc"


class TestPageRequest:
    def test_defaults(self) -> None:
        page = PageRequest.of(None, None)
        assert page == PageRequest(page=0, size=20)
        assert page.offset == 0

    def test_negative_page_becomes_zero(self) -> None:
        assert PageRequest.of(-3, 10).page == 0

    @pytest.mark.parametrize(
        ("size", "expected"), [(0, 1), (-5, 1), (1, 1), (50, 50), (51, 50), (1000, 50)]
    )
    def test_size_clamped(self, size: int, expected: int) -> None:
        assert PageRequest.of(0, size).size == expected

    def test_custom_bounds(self) -> None:
        assert PageRequest.of(0, None, default_size=5, max_size=10).size == 5
        assert PageRequest.of(0, 99, default_size=5, max_size=10).size == 10

    def test_offset(self) -> None:
        assert PageRequest.of(3, 7).offset == 21


class TestSearchCriteria:
    def test_text_and_area_trimmed(self) -> None:
        criteria = SearchCriteria.build(text="  tacos ", area=" Coyoacán ")
        assert criteria.text == "tacos"
        assert criteria.area == "Coyoacán"

    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_blank_text_and_area_absent(self, blank: str | None) -> None:
        criteria = SearchCriteria.build(text=blank, area=blank, categories=None)
        assert criteria.text is None
        assert criteria.area is None
        assert criteria.categories is None

    def test_categories_normalized(self) -> None:
        criteria = SearchCriteria.build(
            categories=[" Tacos", "BEBIDAS", "", None, "tacos", "  "]
        )
        assert criteria.categories == ("tacos", "bebidas")

    @pytest.mark.parametrize("labels", [None, [], ["", "  "], [None]])
    def test_empty_categories_absent(self, labels: list | None) -> None:
        assert SearchCriteria.build(categories=labels).categories is None

    def test_default_sort_and_page(self) -> None:
        criteria = SearchCriteria.build()
        assert criteria.sort == DEFAULT_SEARCH_SORT_SPEC
        assert criteria.page == PageRequest(page=0, size=20)

    def test_malformed_optional_input_never_raises(self) -> None:
        criteria = SearchCriteria.build(page=-1, size=10_000, sort=",,,")
        assert criteria.page == PageRequest(page=0, size=50)
        assert criteria.sort == DEFAULT_SEARCH_SORT_SPEC

    def test_long_text_and_area_truncated_after_trimming(self) -> None:
        criteria = SearchCriteria.build(text="taco" + " " * 300, area="x" * 250)
        assert criteria.text == "taco"
        assert criteria.area == "x" * MAX_CRITERION_LENGTH

    def test_whitespace_only_long_area_is_absent(self) -> None:
        assert SearchCriteria.build(area=" " * 150).area is None

    def test_truncation_does_not_leave_trailing_space(self) -> None:
        raw = "a" * (MAX_CRITERION_LENGTH - 1) + " b"
        assert SearchCriteria.build(text=raw).text == "a" * (MAX_CRITERION_LENGTH - 1)
