"""DSpace REST API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig

DSPACE_TIMEOUT_SECONDS = 15.0
DISCOVERY_CACHE_TTL = 300.0


def _is_discovery_payload(payload: object) -> bool:
    return isinstance(payload, dict) and "_embedded" in payload


@dataclass(frozen=True, slots=True)
class DSpaceConfig:
    """Holds DSpace REST API configuration values."""

    resilience: ResilienceConfig


def get_dspace_config(*, resilience: ResilienceConfig | None = None) -> DSpaceConfig:
    if resilience is not None:
        return DSpaceConfig(resilience=resilience)

    base_url = require_env_var("DSPACE_API_URL").rstrip("/") + "/"
    headers = {"Accept": "application/json"}
    token = optional_env_var("DSPACE_AUTH_TOKEN")
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"

    return DSpaceConfig(
        resilience=ResilienceConfig(
            name="dspace",
            base_url=base_url,
            timeout_seconds=DSPACE_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            cache=CacheConfig(ttl_seconds=DISCOVERY_CACHE_TTL, should_cache=_is_discovery_payload),
            default_headers=headers,
        )
    )
