"""Default pagination bounds."""

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 20
DEFAULT_PAGE = 1
DEFAULT_WINDOW_SIZE = 5

# Keys consumed by the normalizer; everything else on a params object is passthrough.
PAGE_KEYS = ("page",)
PAGE_SIZE_KEYS = ("page_size", "pageSize")
TOTAL_COUNT_KEYS = ("total_count", "totalCount")
PAGINATION_KEYS = frozenset(PAGE_KEYS + PAGE_SIZE_KEYS + TOTAL_COUNT_KEYS)
