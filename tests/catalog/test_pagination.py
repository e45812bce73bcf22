"""Tests for the visible result window."""

from storefront.catalog.pagination import paginate


class TestPaginate:
    """Tests for paginate."""

    def test_prefix(self) -> None:
        """The window is a prefix of the results."""
        window = paginate(list(range(30)), 12)
        assert window.items == list(range(12))
        assert window.total == 30
        assert window.has_more

    def test_window_larger_than_results(self) -> None:
        """A window past the end shows everything."""
        window = paginate(list(range(5)), 12)
        assert window.items == list(range(5))
        assert not window.has_more

    def test_exact_fit(self) -> None:
        """No more items when the window equals the total."""
        window = paginate(list(range(12)), 12)
        assert len(window.items) == 12
        assert not window.has_more

    def test_empty(self) -> None:
        """Empty results give an empty window."""
        window = paginate([], 12)
        assert window.items == []
        assert window.total == 0
        assert not window.has_more

    def test_zero_window(self) -> None:
        """A zero-size window shows nothing but reports more."""
        window = paginate([1, 2], 0)
        assert window.items == []
        assert window.has_more
