"""DSpace REST API client."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from entryimport.adapters.http_resilience import ResilientClient
from entryimport.domain.model import parse_fixed_filter

from .schema import DSpaceDiscoverResponse, DSpaceItem

if TYPE_CHECKING:
    from collections.abc import Callable

    from entryimport.config.dspace import DSpaceConfig
    from entryimport.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

SEARCH_OBJECTS_PATH = "discover/search/objects"
ITEMS_PATH = "core/items"
URI_LIST_CONTENT_TYPE = "text/uri-list"


class DSpaceAPIError(RuntimeError):
    """Raised when the DSpace API returns an unexpected response."""


class DSpaceClient:
    """Low-level async HTTP client for the DSpace REST API."""

    def __init__(
        self,
        *,
        config: DSpaceConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    async def search_objects(  # noqa: PLR0913
        self,
        *,
        query: str,
        configuration: str | None = None,
        fixed_filter: str | None = None,
        dso_type: str | None = None,
        page: int = 0,
        size: int = 10,
    ) -> DSpaceDiscoverResponse:
        params: list[tuple[str, str]] = [
            ("query", query),
            ("page", str(page)),
            ("size", str(size)),
        ]
        if configuration:
            params.append(("configuration", configuration))
        if dso_type:
            params.append(("dsoType", dso_type))
        params.extend(parse_fixed_filter(fixed_filter))

        async with self._client_factory(self._resilience) as client:
            response = await client.get(SEARCH_OBJECTS_PATH, params=params)
        payload = self._json_payload(response)
        return DSpaceDiscoverResponse.model_validate(payload)

    async def import_external_source_entry(
        self,
        *,
        entry_link: str,
        collection_id: str,
    ) -> DSpaceItem:
        """Create an item in ``collection_id`` from the external entry at ``entry_link``."""

        async with self._client_factory(self._resilience) as client:
            response = await client.post(
                ITEMS_PATH,
                params={"owningCollection": collection_id},
                content=entry_link,
                headers={"Content-Type": URI_LIST_CONTENT_TYPE},
            )
        payload = self._json_payload(response)
        item = DSpaceItem.model_validate(payload)
        log.info("DSpace created item %s in collection %s", item.id, collection_id)
        return item

    def _json_payload(self, response: httpx.Response) -> dict[str, object]:
        if self._resilience.base_url is None:
            raise DSpaceAPIError("Missing DSpace base_url in resilience configuration")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            request = response.request
            raise DSpaceAPIError(
                f"DSpace {request.method} {request.url.path} failed "
                f"with status {response.status_code}"
            ) from exc

        payload = response.json()
        if not isinstance(payload, dict):
            raise DSpaceAPIError("Unexpected DSpace response payload")
        return payload
