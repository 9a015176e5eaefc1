"""Page size and list keys for the import workflow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_PAGE_SIZE: Final[int] = 5
PAGINATION_ID: Final[str] = "external-entry-import"
ENTITY_LIST_ID: Final[str] = "external-source-import-entity"
AUTHORITY_LIST_ID: Final[str] = "external-source-import-authority"
URI_METADATA_FIELD: Final[str] = "dc.identifier.uri"


@dataclass(frozen=True, slots=True)
class WorkflowSettings:
    page_size: int = DEFAULT_PAGE_SIZE
    pagination_id: str = PAGINATION_ID
    entity_list_id: str = ENTITY_LIST_ID
    authority_list_id: str = AUTHORITY_LIST_ID

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")
        if self.entity_list_id == self.authority_list_id:
            raise ValueError("Entity and authority lists need distinct ids")

    @property
    def list_ids(self) -> tuple[str, str]:
        return (self.entity_list_id, self.authority_list_id)
