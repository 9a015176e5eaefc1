"""DSpace REST response schemas used for candidate lookup and entry import."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

type DSpaceUUID = str


class DSpaceBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.debug(
            "DSpace %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class DSpaceLink(DSpaceBaseModel):
    href: str


class DSpaceLinks(DSpaceBaseModel):
    self_link: DSpaceLink | None = Field(default=None, alias="self")


class DSpaceMetadataValue(DSpaceBaseModel):
    value: str
    language: str | None = None
    authority: str | None = None
    confidence: int = -1
    place: int = 0


type DSpaceMetadataMap = dict[str, list[DSpaceMetadataValue]]


class DSpaceItem(DSpaceBaseModel):
    id: DSpaceUUID
    uuid: DSpaceUUID | None = None
    name: str
    handle: str | None = None
    metadata: DSpaceMetadataMap = Field(default_factory=dict)
    entity_type: str | None = Field(default=None, alias="entityType")
    type: str = "item"
    links: DSpaceLinks | None = Field(default=None, alias="_links")


class DSpaceIndexableEmbed(DSpaceBaseModel):
    indexable_object: DSpaceItem = Field(alias="indexableObject")


class DSpaceSearchObject(DSpaceBaseModel):
    hit_highlights: dict[str, list[str]] | None = Field(default=None, alias="hitHighlights")
    embedded: DSpaceIndexableEmbed = Field(alias="_embedded")


class DSpacePage(DSpaceBaseModel):
    number: int = 0
    size: int
    total_elements: int = Field(default=0, alias="totalElements")
    total_pages: int = Field(default=0, alias="totalPages")


class DSpaceSearchObjects(DSpaceBaseModel):
    objects: list[DSpaceSearchObject] = Field(default_factory=list)


class DSpaceSearchResult(DSpaceBaseModel):
    embedded: DSpaceSearchObjects = Field(default_factory=DSpaceSearchObjects, alias="_embedded")
    page: DSpacePage


class DSpaceDiscoverEmbedded(DSpaceBaseModel):
    search_result: DSpaceSearchResult = Field(alias="searchResult")


class DSpaceDiscoverResponse(DSpaceBaseModel):
    query: str | None = None
    configuration: str | None = None
    embedded: DSpaceDiscoverEmbedded = Field(alias="_embedded")


class DSpaceExternalSourceEntry(DSpaceBaseModel):
    id: str
    display: str
    value: str
    external_source: str = Field(alias="externalSource")
    metadata: DSpaceMetadataMap = Field(default_factory=dict)
    type: str = "externalSourceEntry"
    links: DSpaceLinks | None = Field(default=None, alias="_links")
