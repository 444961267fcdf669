"""
Mapping between normalized params, transport query variables and response
envelopes.

The transport layer sends envelopes shaped as
``{key: {"entities": [...], "pagination": {"total_count", "limit", "offset"}}}``.
"""

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from paginator.core.logging import get_logger

from .constants import PAGINATION_KEYS
from .converter import offset_to_page, page_to_offset
from .meta import calculate_pagination
from .normalizer import PaginationNormalizer, default_normalizer
from .schemas import EntityPage, PageParams, PaginatedResult, PaginationInfo, PaginationMeta

logger = get_logger(__name__)


class QueryAdapter:
    """Builds query variables and reads paginated response envelopes."""

    def __init__(self, normalizer: PaginationNormalizer | None = None):
        self.normalizer = normalizer or default_normalizer

    @classmethod
    def from_settings(cls, settings) -> "QueryAdapter":
        return cls(PaginationNormalizer.from_settings(settings))

    def to_query_variables(
        self, params: Mapping[str, Any] | PageParams | None = None
    ) -> dict[str, Any]:
        """
        Build transport variables from page-based params.

        Pagination keys are replaced by limit/offset; every other key is
        copied unchanged (deep-copied, so later changes to params do not
        leak into the result).

        Args:
            params: Page params plus any filter or sort fields

        Returns:
            Dict with limit, offset and the passthrough fields
        """
        if isinstance(params, PageParams):
            params = params.model_dump()
        params = params or {}

        normalized = self.normalizer.normalize(params)
        addressing = page_to_offset(normalized.page, normalized.page_size)

        variables = {
            key: copy.deepcopy(value)
            for key, value in params.items()
            if key not in PAGINATION_KEYS
        }
        variables["limit"] = addressing.limit
        variables["offset"] = addressing.offset
        return variables

    def extract_result(self, envelope: Any, key: str) -> PaginatedResult:
        """
        Extract entities and pagination info for key from a response envelope.

        A missing envelope or key, or an entry that doesn't parse, yields an
        empty result instead of raising.

        Args:
            envelope: Transport response data
            key: Entity key, e.g. "posts"

        Returns:
            PaginatedResult with total_count translated to total
        """
        if not isinstance(envelope, Mapping) or envelope.get(key) is None:
            logger.debug("No paginated entry in response", extra={"entity_key": key})
            return PaginatedResult.empty()

        try:
            entry = EntityPage.model_validate(envelope[key])
        except ValidationError as e:
            logger.warning(
                "Malformed paginated entry in response",
                extra={"entity_key": key, "error_count": e.error_count()},
            )
            return PaginatedResult.empty()

        pagination = None
        if entry.pagination is not None:
            pagination = PaginationInfo(
                total=entry.pagination.total_count,
                limit=entry.pagination.limit,
                offset=entry.pagination.offset,
            )

        return PaginatedResult(
            data=copy.deepcopy(entry.entities), pagination=pagination
        )

    def extract_meta(self, envelope: Any, key: str) -> PaginationMeta | None:
        """
        Derive full page metadata from a response envelope.

        Returns None when the entry carries no pagination block. A limit
        below 1 falls back to the default page size.
        """
        pagination = self.extract_result(envelope, key).pagination
        if pagination is None:
            return None

        if pagination.limit >= 1:
            position = offset_to_page(max(0, pagination.offset), pagination.limit)
            page, page_size = position.page, position.page_size
        else:
            page, page_size = 1, self.normalizer.default_page_size

        return calculate_pagination(pagination.total, page, page_size)


default_adapter = QueryAdapter()


def to_query_variables(
    params: Mapping[str, Any] | PageParams | None = None,
) -> dict[str, Any]:
    """Build query variables with the default bounds."""
    return default_adapter.to_query_variables(params)


def extract_result(envelope: Any, key: str) -> PaginatedResult:
    """Extract a PaginatedResult for key from a response envelope."""
    return default_adapter.extract_result(envelope, key)


def extract_meta(envelope: Any, key: str) -> PaginationMeta | None:
    """Derive PaginationMeta for key from a response envelope."""
    return default_adapter.extract_meta(envelope, key)
