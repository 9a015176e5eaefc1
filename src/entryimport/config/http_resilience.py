"""Settings for the resilient HTTP client used by REST adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

ShouldCacheHook = Callable[[object], bool]


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Retry settings handed to ``httpx_retries``.

    Only idempotent methods are retried by default: a repeated ``POST`` could
    create the same item twice.
    """

    total: int = 3
    backoff_factor: float = 0.5
    max_backoff_wait: float = 30.0
    respect_retry_after_header: bool = True
    allowed_methods: frozenset[str] = frozenset({"GET", "HEAD", "OPTIONS"})
    status_forcelist: frozenset[int] = frozenset({429, 500, 502, 503, 504})
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.TimeoutException,
        httpx.NetworkError,
        httpx.RemoteProtocolError,
    )
    backoff_jitter: float = 1.0


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class CacheConfig:
    """Response cache for read requests.

    ``should_cache`` receives the decoded JSON body; responses it rejects are
    never stored.
    """

    enabled: bool = True
    backend: Literal["sqlite", "memory"] = "sqlite"
    sqlite_path: str | None = None
    ttl_seconds: float | None = None
    should_cache: ShouldCacheHook | None = None


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    cache: CacheConfig | None = None
    default_headers: Mapping[str, str] | None = None
