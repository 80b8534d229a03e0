"""Pagination index math."""

from typing import List, Tuple

def page_to_range(page: int, size: int) -> Tuple[int, int]:
    """Convert a 1-based page number to a zero-based ``[start, end)`` range.

    >>> page_to_range(2, 10)
    (10, 20)
    """
    return (page - 1) * size, page * size

def total_pages(total: int, size: int) -> int:
    """Number of pages needed for ``total`` records, rounding up.

    >>> total_pages(10, 3)
    4
    """
    if size <= 0:
        raise ValueError(f"page size must be positive, got {size}")
    return (total + size - 1) // size

def page_rainbow(page_no: int, total_page: int, display_count: int) -> List[int]:
    """Page numbers to show in a pager around the current page.

    The window holds ``display_count`` pages and never runs past the first
    or last page. When fewer pages exist than fit in the window, every page
    is listed. For an even window the current page sits left of centre.

    Args:
        page_no: Current page (1-based)
        total_page: Total number of pages
        display_count: Window size

    Returns:
        Ascending list of page numbers

    Example:
        >>> page_rainbow(5, 20, 6)
        [3, 4, 5, 6, 7, 8]
    """
    if total_page < display_count:
        return list(range(1, total_page + 1))

    is_even = display_count % 2 == 0
    left = display_count // 2
    right = left + 1 if is_even else left

    if page_no <= left:
        first = 1
    elif page_no > total_page - right:
        first = total_page - display_count + 1
    else:
        first = page_no - left + (1 if is_even else 0)

    return list(range(first, first + display_count))
