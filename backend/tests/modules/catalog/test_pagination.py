"""Tests for modules/catalog/pagination.py."""

from unittest.mock import MagicMock

import pytest

from modules.catalog.exceptions import InvalidPageError, PageNavigationError
from modules.catalog.pagination import Paginator, compute_window, should_render


class TestComputeWindowSmall:
    @pytest.mark.parametrize("total_pages", range(1, 8))
    def test_shows_every_page(self, total_pages):
        """Seven pages or fewer should be listed in full for every position."""
        for current_page in range(1, total_pages + 1):
            assert compute_window(current_page, total_pages) == list(range(1, total_pages + 1))

    def test_empty_catalog(self):
        """Zero pages should give an empty window."""
        assert compute_window(1, 0) == []

    def test_no_ellipsis_at_seven(self):
        """Exactly seven pages should have no ellipsis."""
        assert ... not in compute_window(4, 7)


class TestComputeWindowLarge:
    @pytest.mark.parametrize("total_pages", [8, 9, 20, 100])
    @pytest.mark.parametrize("current_page", [1, 2, 3])
    def test_near_start(self, current_page, total_pages):
        """The first three pages should show 1-4 then the last page."""
        assert compute_window(current_page, total_pages) == [1, 2, 3, 4, ..., total_pages]

    @pytest.mark.parametrize("total_pages", [8, 9, 20, 100])
    def test_near_end(self, total_pages):
        """The last three pages should show the first page then the last four."""
        expected = [1, ..., total_pages - 3, total_pages - 2, total_pages - 1, total_pages]
        for current_page in range(total_pages - 2, total_pages + 1):
            assert compute_window(current_page, total_pages) == expected

    @pytest.mark.parametrize("total_pages", [8, 9, 20, 100])
    def test_middle(self, total_pages):
        """Middle pages should show neighbours between two ellipses."""
        for current_page in range(4, total_pages - 2):
            assert compute_window(current_page, total_pages) == [
                1, ..., current_page - 1, current_page, current_page + 1, ..., total_pages,
            ]

    def test_concrete_middle_case(self):
        """Page 10 of 20 should show 9, 10 and 11."""
        assert compute_window(10, 20) == [1, ..., 9, 10, 11, ..., 20]

    def test_eight_pages_edges(self):
        """Pages 3 and 6 of 8 should use the start and end layouts."""
        assert compute_window(3, 8) == [1, 2, 3, 4, ..., 8]
        assert compute_window(6, 8) == [1, ..., 5, 6, 7, 8]

    def test_eight_pages_page_four(self):
        """Page 4 of 8 is neither near start nor near end."""
        assert compute_window(4, 8) == [1, ..., 3, 4, 5, ..., 8]

    @pytest.mark.parametrize("current_page", [1, 5, 10, 48, 50])
    def test_boundaries_always_present(self, current_page):
        """First and last markers should be pages 1 and total."""
        window = compute_window(current_page, 50)
        assert window[0] == 1
        assert window[-1] == 50


class TestComputeWindowPreconditions:
    @pytest.mark.parametrize(
        "current_page,total_pages",
        [(0, 5), (-1, 5), (6, 5), (21, 20), (2, 0), (1, -1)],
    )
    def test_out_of_range_rejected(self, current_page, total_pages):
        """Pages outside 1..total should raise rather than be clamped."""
        with pytest.raises(InvalidPageError) as exc_info:
            compute_window(current_page, total_pages)
        assert exc_info.value.details == {
            "current_page": current_page,
            "total_pages": total_pages,
        }


class TestShouldRender:
    @pytest.mark.parametrize("total_pages,expected", [(0, False), (1, False), (2, True), (50, True)])
    def test_hidden_for_single_page(self, total_pages, expected):
        """The paginator should be hidden for zero or one page."""
        assert should_render(total_pages) is expected


class TestPaginator:
    def test_initial_state(self):
        """A paginator should expose its position and window."""
        paginator = Paginator(10, 20)
        assert paginator.current_page == 10
        assert paginator.total_pages == 20
        assert paginator.window == [1, ..., 9, 10, 11, ..., 20]
        assert paginator.visible is True

    def test_rejects_invalid_start(self):
        """Starting outside the page range should raise."""
        with pytest.raises(InvalidPageError):
            Paginator(5, 3)

    def test_hidden_for_single_page(self):
        """A single page should not render a paginator."""
        assert Paginator(1, 1).visible is False

    def test_previous_disabled_on_first_page(self):
        """Previous should be disabled on page 1."""
        paginator = Paginator(1, 5)
        assert paginator.can_go_previous is False
        with pytest.raises(PageNavigationError):
            paginator.previous()

    def test_next_disabled_on_last_page(self):
        """Next should be disabled on the last page."""
        paginator = Paginator(5, 5)
        assert paginator.can_go_next is False
        with pytest.raises(PageNavigationError):
            paginator.next()

    def test_next_and_previous(self):
        """Next and previous should move one page and report it."""
        on_change = MagicMock()
        paginator = Paginator(2, 5, on_change)

        paginator.next()
        paginator.previous()

        assert paginator.current_page == 2
        assert [c.args[0] for c in on_change.call_args_list] == [3, 2]

    def test_go_to_page_marker(self):
        """Activating a page marker should change page and notify."""
        on_change = MagicMock()
        paginator = Paginator(1, 20, on_change)

        paginator.go_to(20)

        on_change.assert_called_once_with(20)
        assert paginator.window == [1, ..., 17, 18, 19, 20]

    @pytest.mark.parametrize("page", [0, 21])
    def test_go_to_out_of_range(self, page):
        """Unreachable pages should be rejected without notifying."""
        on_change = MagicMock()
        paginator = Paginator(1, 20, on_change)

        with pytest.raises(PageNavigationError):
            paginator.go_to(page)

        on_change.assert_not_called()
        assert paginator.current_page == 1

    def test_without_callback(self):
        """Navigation should work without a change callback."""
        paginator = Paginator(1, 3)
        paginator.next()
        assert paginator.current_page == 2


class TestCursorPaginator:
    def test_visible_on_first_page_with_more(self):
        """A first page with a successor should still show the paginator."""
        paginator = Paginator(1, 1, has_next_page=True)
        assert paginator.visible is True
        assert paginator.can_go_next is True
        assert paginator.window == [1]

    def test_hidden_on_only_page(self):
        """A first page with no successor should hide the paginator."""
        assert Paginator(1, 1, has_next_page=False).visible is False

    def test_has_next_overrides_total(self):
        """has_next_page should decide next even when the total says otherwise."""
        paginator = Paginator(3, 10, has_next_page=False)
        assert paginator.can_go_next is False

    def test_next_extends_known_pages(self):
        """Moving past the furthest page seen should extend the window."""
        on_change = MagicMock()
        paginator = Paginator(1, 1, on_change, has_next_page=True)

        paginator.next()

        on_change.assert_called_once_with(2)
        assert paginator.total_pages == 2
        assert paginator.window == [1, 2]
        assert paginator.can_go_next is False

    def test_report_has_next_page(self):
        """Reporting a successor should re-enable next."""
        paginator = Paginator(1, 1, has_next_page=True)
        paginator.next()

        paginator.set_has_next_page(True)
        paginator.next()

        assert paginator.current_page == 3

    def test_going_back_enables_next(self):
        """Pages before the furthest one seen always have a successor."""
        paginator = Paginator(1, 1, has_next_page=True)
        paginator.next()
        paginator.previous()

        assert paginator.can_go_next is True
