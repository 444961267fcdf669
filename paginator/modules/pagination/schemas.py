"""Pagination value types shared by the pagination components."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class FrozenSchema(BaseModel):
    """Immutable value type serialized with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PageParams(FrozenSchema):
    """UI-facing pagination intent, always produced by the normalizer."""

    page: int = Field(default=1, ge=1, description="Page number (1-based)")
    page_size: int = Field(default=20, ge=1, description="Items per page")
    total_count: int = Field(default=0, ge=0, description="Total number of items")


class OffsetParams(FrozenSchema):
    """Query-facing addressing."""

    limit: int = Field(ge=1, description="Maximum number of items to return")
    offset: int = Field(ge=0, description="Number of items to skip")


class PagePosition(FrozenSchema):
    """A page number and page size derived from limit/offset."""

    page: int = Field(ge=1, description="Page number (1-based)")
    page_size: int = Field(ge=1, description="Items per page")


class PaginationMeta(FrozenSchema):
    """
    Read-only pagination summary for the rendering layer.

    Built by calculate_pagination; start_index/end_index describe the
    half-open item range [start_index, end_index) shown on the current page.
    """

    current_page: int
    total_pages: int
    page_size: int
    total_count: int
    has_next_page: bool
    has_prev_page: bool
    start_index: int = 0
    end_index: int = 0


class PaginationInfo(FrozenSchema):
    """Pagination block of a PaginatedResult."""

    total: int
    limit: int
    offset: int


class PaginatedResult(FrozenSchema, Generic[T]):
    """Uniform shape handed to the rendering layer."""

    data: list[T] = Field(default_factory=list)
    pagination: PaginationInfo | None = None

    @classmethod
    def empty(cls) -> "PaginatedResult[T]":
        return cls(data=[], pagination=None)


class PaginationLinks(FrozenSchema):
    """Previous/next page URLs for pagination controls."""

    prev_url: str | None = None
    next_url: str | None = None


class WirePagination(BaseModel):
    """Pagination block as sent by the transport layer."""

    model_config = ConfigDict(extra="ignore")

    total_count: int
    limit: int
    offset: int


class EntityPage(BaseModel):
    """One keyed entry of a response envelope."""

    model_config = ConfigDict(extra="ignore")

    entities: list[Any] = Field(default_factory=list)
    pagination: WirePagination | None = None
