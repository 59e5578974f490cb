"""Tests for PageOptions and Page."""

import pytest

from utils.pagination import Page, PageOptions


class TestPageOptions:

    def test_defaults(self):
        options = PageOptions()

        assert options.page_number == 1
        assert options.page_size == 10
        assert options.sort_by == "id"
        assert options.sort_direction == "ASC"
        assert options.offset == 0

    def test_offset_is_zero_based(self):
        assert PageOptions(page_number=4, page_size=25).offset == 75

    def test_direction_normalised(self):
        assert PageOptions(sort_direction="desc").sort_direction == "DESC"

    @pytest.mark.parametrize("kwargs", [
        {"page_number": 0},
        {"page_number": -1},
        {"page_size": 0},
        {"sort_direction": "sideways"},
    ])
    def test_invalid_options_rejected(self, kwargs):
        with pytest.raises(ValueError):
            PageOptions(**kwargs)


class TestPage:

    def test_build_rounds_total_pages_up(self):
        page = Page.build(["a", "b"], total_elements=21, options=PageOptions(page_size=10))

        assert page.total_pages == 3
        assert page.total_elements == 21
        assert page.items == ["a", "b"]

    def test_exact_multiple(self):
        assert Page.build([], 20, PageOptions(page_size=10)).total_pages == 2

    def test_no_elements_means_no_pages(self):
        page = Page.build([], 0, PageOptions())

        assert page.total_pages == 0
        assert not page.has_next
        assert not page.has_previous

    def test_navigation_flags(self):
        middle = Page.build(["x"], 30, PageOptions(page_number=2, page_size=10))

        assert middle.has_next
        assert middle.has_previous
