"""Catalog API."""

from typing import Self

from pydantic import ConfigDict, Field

from squarekit.api.base import APIResource, QueryParameters
from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.setters import add_unique, append, assign, constant
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.enums import CatalogObjectType
from squarekit.response import SquareResponse


class CatalogObject(SquareModel):
    """A catalog entry; type-specific data such as ``item_data`` is kept as-is."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True, extra="allow")

    type: CatalogObjectType
    id: str
    version: int | None = None
    is_deleted: bool | None = None
    present_at_all_locations: bool | None = None
    present_at_location_ids: list[str] | None = None
    absent_at_location_ids: list[str] | None = None
    updated_at: str | None = None


class UpsertCatalogObjectBody(SquareModel):
    """Body of ``POST /catalog/object``."""

    idempotency_key: str | None = None
    object: CatalogObject | None = None

    setters = {
        "object": assign("object"),
    }

    def validate_body(self) -> Self:
        if self.object is None:
            self.reject("object is required")
        self.idempotency_key = new_idempotency_key()
        return self


class CatalogListParameters(QueryParameters):
    cursor: str | None = None
    types: list[CatalogObjectType] | None = None
    catalog_version: int | None = None

    setters = {
        "cursor": assign("cursor"),
        "add_type": add_unique("types"),
        "catalog_version": assign("catalog_version"),
    }


class BatchRetrieveCatalogObjectsBody(SquareModel):
    """Body of ``POST /catalog/batch-retrieve``."""

    object_ids: list[str] = Field(default_factory=list)
    include_related_objects: bool | None = None
    catalog_version: int | None = None

    setters = {
        "add_object_id": append("object_ids"),
        "object_ids": assign("object_ids"),
        "include_related_objects": constant("include_related_objects", True),
        "catalog_version": assign("catalog_version"),
    }

    def validate_body(self) -> Self:
        if not self.object_ids:
            self.reject("object_ids must not be empty")
        return self


class BatchDeleteCatalogObjectsBody(SquareModel):
    """Body of ``POST /catalog/batch-delete``."""

    object_ids: list[str] = Field(default_factory=list)

    setters = {
        "add_object_id": append("object_ids"),
        "object_ids": assign("object_ids"),
    }

    def validate_body(self) -> Self:
        if not self.object_ids:
            self.reject("object_ids must not be empty")
        return self


class Catalog(APIResource):
    api = SquareAPI.CATALOG

    async def list(self, params: CatalogListParameters | None = None) -> SquareResponse:
        return await self._request(
            Verb.GET, "/list", params=params.to_params() if params else None
        )

    async def upsert_object(self, body: UpsertCatalogObjectBody) -> SquareResponse:
        return await self._request(Verb.POST, "/object", body=body)

    async def retrieve(self, object_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/object/{object_id}")

    async def delete(self, object_id: str) -> SquareResponse:
        return await self._request(Verb.DELETE, f"/object/{object_id}")

    async def batch_retrieve(self, body: BatchRetrieveCatalogObjectsBody) -> SquareResponse:
        return await self._request(Verb.POST, "/batch-retrieve", body=body)

    async def batch_delete(self, body: BatchDeleteCatalogObjectsBody) -> SquareResponse:
        return await self._request(Verb.POST, "/batch-delete", body=body)
