"""Search options and paginated search results."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .items import ListableObject


@dataclass(frozen=True, slots=True)
class PaginationOptions:
    id: str
    current_page: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        if self.current_page < 1:
            raise ValueError("current_page is 1-based and must be at least 1")
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1")

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size


@dataclass(frozen=True, slots=True)
class PaginatedSearchOptions:
    query: str
    pagination: PaginationOptions
    configuration: str | None = None
    fixed_filter: str | None = None
    dso_type: str | None = None


@dataclass(frozen=True, slots=True)
class SearchResult[T: ListableObject]:
    """A hit wrapping the object it matched."""

    indexable_object: T
    hit_highlights: Mapping[str, tuple[str, ...]] = field(
        default_factory=dict[str, tuple[str, ...]]
    )

    @property
    def id(self) -> str:
        return self.indexable_object.id


@dataclass(frozen=True, slots=True)
class PaginatedList[T]:
    page: tuple[T, ...]
    total_elements: int
    current_page: int = 1
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        if self.total_elements <= 0:
            return 0
        return math.ceil(self.total_elements / self.page_size)

    def __len__(self) -> int:
        return len(self.page)
