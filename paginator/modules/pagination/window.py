"""Sliding window of page numbers for pagination controls."""

from paginator.core.logging import get_logger

from .constants import DEFAULT_WINDOW_SIZE

logger = get_logger(__name__)


def generate_page_numbers(
    current_page: int, total_pages: int, window_size: int = DEFAULT_WINDOW_SIZE
) -> list[int]:
    """
    Generate the page numbers to display around the current page.

    The window is centred on current_page where possible and shifted to stay
    inside [1, total_pages]. Its length is min(window_size, total_pages).
    A window_size below 1 is clamped to 1.

    Args:
        current_page: Current page number
        total_pages: Total number of pages
        window_size: Maximum number of page numbers to show

    Returns:
        Contiguous increasing list of page numbers
    """
    if window_size < 1:
        logger.debug(
            "Clamping page window size", extra={"window_size": window_size}
        )
        window_size = 1
    total_pages = max(0, total_pages)

    half = window_size // 2
    start = current_page - half
    end = start + window_size - 1

    if start < 1:
        start = 1
        end = min(total_pages, window_size)
    if end > total_pages:
        end = total_pages
        start = max(1, end - window_size + 1)

    return list(range(start, end + 1))
