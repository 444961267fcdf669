"""Pagination reconciliation between page, offset and response envelopes."""

from .adapter import (
    QueryAdapter,
    extract_meta,
    extract_result,
    to_query_variables,
)
from .constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_WINDOW_SIZE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
)
from .converter import offset_to_page, page_to_offset
from .meta import calculate_pagination, calculate_total_pages
from .normalizer import PaginationNormalizer, normalize_pagination_params
from .query_string import (
    build_page_query,
    build_page_url,
    build_pagination_links,
    parse_page_query,
)
from .schemas import (
    OffsetParams,
    PageParams,
    PagePosition,
    PaginatedResult,
    PaginationInfo,
    PaginationLinks,
    PaginationMeta,
)
from .window import generate_page_numbers

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_WINDOW_SIZE",
    "MAX_PAGE_SIZE",
    "MIN_PAGE_SIZE",
    "OffsetParams",
    "PageParams",
    "PagePosition",
    "PaginatedResult",
    "PaginationInfo",
    "PaginationLinks",
    "PaginationMeta",
    "PaginationNormalizer",
    "QueryAdapter",
    "build_page_query",
    "build_page_url",
    "build_pagination_links",
    "calculate_pagination",
    "calculate_total_pages",
    "extract_meta",
    "extract_result",
    "generate_page_numbers",
    "normalize_pagination_params",
    "offset_to_page",
    "page_to_offset",
    "parse_page_query",
    "to_query_variables",
]
