"""
Parameter normalization.

Repairs loosely shaped page/page_size/total_count input into a valid
PageParams instead of rejecting it. Every downstream component assumes its
input went through here.
"""

from collections.abc import Mapping
from typing import Any

from paginator.core.exceptions import ConfigurationError
from paginator.core.logging import get_logger
from paginator.core.utils import clamp, coerce_int

from .constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
    PAGE_KEYS,
    PAGE_SIZE_KEYS,
    TOTAL_COUNT_KEYS,
)
from .schemas import PageParams

logger = get_logger(__name__)


def _first_present(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


class PaginationNormalizer:
    """Clamp raw pagination input into [min_page_size, max_page_size] bounds."""

    def __init__(
        self,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        min_page_size: int = MIN_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        if min_page_size < 1:
            raise ConfigurationError(
                "must be >= 1", setting="min_page_size", value=min_page_size
            )
        if max_page_size < min_page_size:
            raise ConfigurationError(
                f"must be >= min_page_size ({min_page_size})",
                setting="max_page_size",
                value=max_page_size,
            )
        if not min_page_size <= default_page_size <= max_page_size:
            raise ConfigurationError(
                f"must be within [{min_page_size}, {max_page_size}]",
                setting="default_page_size",
                value=default_page_size,
            )

        self.default_page_size = default_page_size
        self.min_page_size = min_page_size
        self.max_page_size = max_page_size

    @classmethod
    def from_settings(cls, settings) -> "PaginationNormalizer":
        """Build a normalizer from a Settings instance."""
        return cls(
            default_page_size=settings.default_page_size,
            min_page_size=settings.min_page_size,
            max_page_size=settings.max_page_size,
        )

    def normalize(
        self, raw: Mapping[str, Any] | PageParams | None = None, **fields: Any
    ) -> PageParams:
        """
        Repair pagination parameters.

        Args:
            raw: Mapping (snake_case or camelCase keys), PageParams or None
            **fields: Individual fields overriding those in raw

        Returns:
            PageParams with page >= 1, page_size within the configured bounds
            and total_count >= 0
        """
        if isinstance(raw, PageParams):
            source: dict[str, Any] = raw.model_dump()
        elif isinstance(raw, Mapping):
            source = dict(raw)
        else:
            source = {}
        source.update(fields)

        raw_page = _first_present(source, PAGE_KEYS)
        raw_page_size = _first_present(source, PAGE_SIZE_KEYS)
        raw_total_count = _first_present(source, TOTAL_COUNT_KEYS)

        page = coerce_int(raw_page)
        page = DEFAULT_PAGE if page is None else max(1, page)

        page_size = coerce_int(raw_page_size)
        if page_size is None:
            page_size = self.default_page_size
        page_size = clamp(page_size, self.min_page_size, self.max_page_size)

        total_count = coerce_int(raw_total_count)
        total_count = 0 if total_count is None else max(0, total_count)

        params = PageParams(page=page, page_size=page_size, total_count=total_count)

        repaired = {
            name: (value, getattr(params, name))
            for name, value in (
                ("page", raw_page),
                ("page_size", raw_page_size),
                ("total_count", raw_total_count),
            )
            if value is not None and value != getattr(params, name)
        }
        if repaired:
            logger.debug(
                "Repaired pagination parameters",
                extra={"repaired": {k: [repr(v[0]), v[1]] for k, v in repaired.items()}},
            )

        return params

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(default_page_size={self.default_page_size}, "
            f"min_page_size={self.min_page_size}, max_page_size={self.max_page_size})"
        )


default_normalizer = PaginationNormalizer()


def normalize_pagination_params(
    raw: Mapping[str, Any] | PageParams | None = None, **fields: Any
) -> PageParams:
    """Normalize with the default bounds (page size 20, clamped to [1, 100])."""
    return default_normalizer.normalize(raw, **fields)
