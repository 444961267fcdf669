"""
URL query helpers for keeping the selected page in the address bar.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

from paginator.core.utils import coerce_int

from .normalizer import PaginationNormalizer, default_normalizer
from .schemas import PageParams, PaginationLinks, PaginationMeta

PAGE_PARAM = "page"
PAGE_SIZE_PARAM = "page_size"


def _single(value: Any) -> Any:
    """First value of a parse_qs style list, or the value itself."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _positive(value: Any) -> int | None:
    number = coerce_int(_single(value))
    if number is None or number < 1:
        return None
    return number


def parse_page_query(
    query: Mapping[str, Any],
    page_param: str = PAGE_PARAM,
    page_size_param: str = PAGE_SIZE_PARAM,
    normalizer: PaginationNormalizer | None = None,
) -> PageParams:
    """
    Read page and page size from URL query parameters.

    Missing, unparsable or non-positive values fall back to the defaults.
    """
    normalizer = normalizer or default_normalizer
    return normalizer.normalize(
        page=_positive(query.get(page_param)),
        page_size=_positive(query.get(page_size_param)),
    )


def build_page_query(
    page: int,
    page_size: int,
    query: Mapping[str, Any] | None = None,
    page_param: str = PAGE_PARAM,
    page_size_param: str = PAGE_SIZE_PARAM,
    default_page_size: int | None = None,
) -> dict[str, Any]:
    """
    Return a copy of query with the page selection applied.

    The page is always set. The page size is only kept when it differs from
    the default page size, so default-sized pages get shorter URLs.
    """
    if default_page_size is None:
        default_page_size = default_normalizer.default_page_size

    params = dict(query or {})
    params[page_param] = page
    if page_size != default_page_size:
        params[page_size_param] = page_size
    else:
        params.pop(page_size_param, None)
    return params


def build_page_url(
    base_url: str,
    page: int,
    page_size: int,
    query: Mapping[str, Any] | None = None,
    page_param: str = PAGE_PARAM,
    page_size_param: str = PAGE_SIZE_PARAM,
    default_page_size: int | None = None,
) -> str:
    """Build the URL of a page, replacing any query string on base_url."""
    params = build_page_query(
        page,
        page_size,
        query=query,
        page_param=page_param,
        page_size_param=page_size_param,
        default_page_size=default_page_size,
    )
    scheme, netloc, path, _, fragment = urlsplit(base_url)
    return urlunsplit((scheme, netloc, path, urlencode(params, doseq=True), fragment))


def build_pagination_links(
    base_url: str,
    meta: PaginationMeta,
    query: Mapping[str, Any] | None = None,
    page_param: str = PAGE_PARAM,
    page_size_param: str = PAGE_SIZE_PARAM,
    default_page_size: int | None = None,
) -> PaginationLinks:
    """Previous/next page URLs for meta; a link is None when there is no such page."""
    options = {
        "query": query,
        "page_param": page_param,
        "page_size_param": page_size_param,
        "default_page_size": default_page_size,
    }

    prev_url = None
    if meta.has_prev_page:
        prev_url = build_page_url(
            base_url, meta.current_page - 1, meta.page_size, **options
        )

    next_url = None
    if meta.has_next_page:
        next_url = build_page_url(
            base_url, meta.current_page + 1, meta.page_size, **options
        )

    return PaginationLinks(prev_url=prev_url, next_url=next_url)
