"""Domain model for resolving external source entries."""

from __future__ import annotations

from .entries import ExternalSourceEntry, MetadataValue
from .enums import ImportType, RemoteDataState
from .items import Authority, Item, ListableObject
from .relationship import RelationshipOptions, parse_fixed_filter
from .remote_data import (
    CandidateCollection,
    Failed,
    Pending,
    Ready,
    RemoteData,
    RemoteDataObserver,
    Subscription,
)
from .search import PaginatedList, PaginatedSearchOptions, PaginationOptions, SearchResult

__all__ = [
    "Authority",
    "CandidateCollection",
    "ExternalSourceEntry",
    "Failed",
    "ImportType",
    "Item",
    "ListableObject",
    "MetadataValue",
    "PaginatedList",
    "PaginatedSearchOptions",
    "PaginationOptions",
    "Pending",
    "Ready",
    "RemoteData",
    "RemoteDataObserver",
    "RemoteDataState",
    "SearchResult",
    "Subscription",
    "parse_fixed_filter",
]
