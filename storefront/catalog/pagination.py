"""Visible result window."""

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ResultWindow(Generic[T]):
    """Visible prefix of a result list.

    Attributes:
        items: Visible items.
        total: Size of the full result list.
        visible_count: Requested window size.
    """

    items: list[T]
    total: int
    visible_count: int

    @property
    def has_more(self) -> bool:
        """Check if "load more" would reveal further items."""
        return self.visible_count < self.total


def paginate(items: Sequence[T], visible_count: int) -> ResultWindow[T]:
    """Cut the visible prefix out of a result list.

    Args:
        items: Sorted, filtered results.
        visible_count: Window size.

    Returns:
        Window of ``min(visible_count, len(items))`` items.
    """
    return ResultWindow(
        items=list(items[:visible_count]),
        total=len(items),
        visible_count=visible_count,
    )
