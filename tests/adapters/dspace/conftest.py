"""Shared fixtures for DSpace adapter tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from entryimport.adapters.dspace import DSpaceClient
from entryimport.adapters.http_resilience import ResilientClient
from entryimport.config import DSpaceConfig, ResilienceConfig
from tests.helpers.dspace import BASE_URL, DSpacePayload, RecordingHandler, load_fixture

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def dspace_config() -> DSpaceConfig:
    return DSpaceConfig(
        resilience=ResilienceConfig(
            name="dspace-test",
            base_url=BASE_URL,
            cache=None,
            default_headers={"Accept": "application/json"},
        )
    )


@pytest.fixture
def make_dspace_client(
    dspace_config: DSpaceConfig,
) -> Callable[[RecordingHandler], DSpaceClient]:
    def factory(handler: RecordingHandler) -> DSpaceClient:
        return DSpaceClient(
            config=dspace_config,
            client_factory=lambda config: ResilientClient(
                config,
                transport=httpx.MockTransport(handler),
            ),
        )

    return factory


@pytest.fixture
def search_payload() -> DSpacePayload:
    return load_fixture("discover_search_objects.json")


@pytest.fixture
def created_item_payload() -> DSpacePayload:
    return load_fixture("created_item.json")
