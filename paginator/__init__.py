"""Paginator - reconciles page/page_size, limit/offset and paginated responses."""

from .core.exceptions import ConfigurationError, PaginatorException
from .modules.pagination import (
    OffsetParams,
    PageParams,
    PagePosition,
    PaginatedResult,
    PaginationInfo,
    PaginationLinks,
    PaginationMeta,
    PaginationNormalizer,
    QueryAdapter,
    build_page_query,
    build_page_url,
    build_pagination_links,
    calculate_pagination,
    extract_meta,
    extract_result,
    generate_page_numbers,
    normalize_pagination_params,
    offset_to_page,
    page_to_offset,
    parse_page_query,
    to_query_variables,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "OffsetParams",
    "PageParams",
    "PagePosition",
    "PaginatedResult",
    "PaginationInfo",
    "PaginationLinks",
    "PaginationMeta",
    "PaginationNormalizer",
    "PaginatorException",
    "QueryAdapter",
    "build_page_query",
    "build_page_url",
    "build_pagination_links",
    "calculate_pagination",
    "extract_meta",
    "extract_result",
    "generate_page_numbers",
    "normalize_pagination_params",
    "offset_to_page",
    "page_to_offset",
    "parse_page_query",
    "to_query_variables",
]
