"""Derivation of total pages and next/previous flags."""

from .schemas import PaginationMeta


def calculate_total_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed for total_count items.

    0 for an empty list, and for a page_size below 1.
    """
    if total_count <= 0 or page_size < 1:
        return 0
    return (total_count + page_size - 1) // page_size


def calculate_pagination(
    total_count: int, current_page: int, page_size: int
) -> PaginationMeta:
    """
    Calculate pagination metadata.

    current_page is reported as given, even past the last page; in that case
    has_next_page is False. Normalize first to get a repaired page.
    A page_size below 1 reports 0 pages instead of raising.

    Args:
        total_count: Total number of items across all pages
        current_page: Current page number (1-based)
        page_size: Number of items per page

    Returns:
        PaginationMeta instance
    """
    total_count = max(0, total_count)
    total_pages = calculate_total_pages(total_count, page_size)

    start_index = min(max(0, (current_page - 1) * page_size), total_count)
    end_index = max(start_index, min(current_page * page_size, total_count))

    return PaginationMeta(
        current_page=current_page,
        total_pages=total_pages,
        page_size=page_size,
        total_count=total_count,
        has_next_page=current_page < total_pages,
        has_prev_page=current_page > 1,
        start_index=start_index,
        end_index=end_index,
    )
