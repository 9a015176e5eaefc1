"""Async HTTP client with retries, rate limiting and an optional response cache."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage, FilterPolicy
from hishel import Response as HishelCacheResponse
from hishel._policies import BaseFilter
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

from entryimport.config.storage import get_storage_config

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import HeaderTypes, QueryParamTypes, RequestContent

    from entryimport.config.http_resilience import (
        CacheConfig,
        ResilienceConfig,
        RetryPolicy,
        ShouldCacheHook,
    )

log = getLogger(__name__)


class RequestOptions(TypedDict, total=False):
    params: QueryParamTypes
    headers: HeaderTypes
    content: RequestContent
    json: object


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=tuple(policy.allowed_methods),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
        backoff_jitter=policy.backoff_jitter,
    )


class ResilientClient:
    """HTTP client applying the retry, rate-limit and cache settings of one API.

    ``transport`` replaces the network layer underneath the retry transport,
    which lets tests plug in ``httpx.MockTransport``.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit is not None
            else None
        )
        self._client = _build_client(config, transport)

    @property
    def name(self) -> str:
        return self.config.name

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Unpack[RequestOptions]) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Unpack[RequestOptions]) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def request(
        self,
        method: str,
        url: str,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        if self._limiter is None:
            response = await self._client.request(method, url, **kwargs)
        else:
            async with self._limiter:
                response = await self._client.request(method, url, **kwargs)
        log.debug(
            "%s: %s %s -> %s",
            self.name,
            method,
            response.request.url,
            response.status_code,
        )
        return response


def _build_client(
    config: ResilienceConfig,
    transport: httpx.AsyncBaseTransport | None,
) -> httpx.AsyncClient:
    retry_transport = RetryTransport(transport=transport, retry=build_retry(config.retry))
    headers = dict(config.default_headers or {})
    base_url = config.base_url or ""

    storage = _build_cache_storage(config.cache)
    if storage is None or config.cache is None:
        return httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=config.timeout_seconds,
            transport=retry_transport,
        )
    return AsyncCacheClient(
        base_url=base_url,
        headers=headers,
        timeout=config.timeout_seconds,
        transport=retry_transport,
        storage=storage,
        policy=_build_cache_policy(config.cache.should_cache),
    )


def _build_cache_storage(config: CacheConfig | None) -> AsyncSqliteStorage | None:
    if config is None or not config.enabled:
        return None
    if config.backend == "memory":
        database_path = ":memory:"
    elif config.backend == "sqlite":
        database_path = config.sqlite_path or str(get_storage_config().http_cache_path())
    else:
        raise ValueError(f"Unsupported cache backend: {config.backend}")
    return AsyncSqliteStorage(database_path=database_path, default_ttl=config.ttl_seconds)


def _build_cache_policy(predicate: ShouldCacheHook | None) -> FilterPolicy | None:
    if predicate is None:
        return None
    return FilterPolicy(response_filters=[_JsonPayloadFilter(predicate)])


class _JsonPayloadFilter(BaseFilter[HishelCacheResponse]):
    """Hishel response filter asking ``predicate`` about the decoded JSON body."""

    def __init__(self, predicate: ShouldCacheHook) -> None:
        self._predicate = predicate

    def needs_body(self) -> bool:
        return True

    def apply(self, item: HishelCacheResponse, body: bytes | None) -> bool:  # noqa: ARG002
        if body is None:
            return False
        try:
            payload = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            return False
        return bool(self._predicate(payload))
