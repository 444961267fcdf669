"""
Conversion between page-based and offset-based addressing.

Both functions expect normalized input and do not re-validate it.
"""

from .schemas import OffsetParams, PagePosition


def page_to_offset(page: int, page_size: int) -> OffsetParams:
    """
    Convert a 1-based page number to limit/offset.

    Args:
        page: Page number (1-based)
        page_size: Number of items per page

    Returns:
        OffsetParams with limit = page_size and offset = (page - 1) * page_size
    """
    return OffsetParams.model_construct(limit=page_size, offset=(page - 1) * page_size)


def offset_to_page(offset: int, limit: int) -> PagePosition:
    """
    Convert limit/offset to the page containing that offset.

    Offsets that are not a multiple of limit are floored to the enclosing
    page, so only aligned offsets round-trip through page_to_offset.

    Args:
        offset: Number of items skipped (>= 0)
        limit: Number of items per page (>= 1)

    Returns:
        PagePosition with page = offset // limit + 1 and page_size = limit
    """
    return PagePosition.model_construct(page=offset // limit + 1, page_size=limit)

