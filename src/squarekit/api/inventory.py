"""Inventory API."""

from typing import Self

from pydantic import Field

from squarekit.api.base import APIResource
from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.folds import registry
from squarekit.core.setters import append, constant
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.models import InventoryChange, InventoryPhysicalCount
from squarekit.response import SquareResponse


class BatchChangeInventoryBody(SquareModel):
    """Body of ``POST /inventory/changes/batch-create``."""

    idempotency_key: str | None = None
    changes: list[InventoryChange] = Field(default_factory=list)
    ignore_unchanged_counts: bool | None = None

    setters = {
        "change": append("changes"),
        "ignore_unchanged_counts": constant("ignore_unchanged_counts", True),
    }

    def validate_body(self) -> Self:
        if not self.changes:
            self.reject("at least one change is required")
        self.idempotency_key = new_idempotency_key()
        return self


registry.append(InventoryChange, BatchChangeInventoryBody, "changes")
registry.assign(InventoryPhysicalCount, InventoryChange, "physical_count")


class Inventory(APIResource):
    api = SquareAPI.INVENTORY

    async def batch_change(self, body: BatchChangeInventoryBody) -> SquareResponse:
        return await self._request(Verb.POST, "/changes/batch-create", body=body)

    async def retrieve_count(self, object_id: str, location_id: str | None = None) -> SquareResponse:
        """Current counts of a catalog object, optionally for one location."""
        params = [("location_ids", location_id)] if location_id else None
        return await self._request(Verb.GET, f"/{object_id}", params=params)

    async def retrieve_adjustment(self, adjustment_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/adjustments/{adjustment_id}")

    async def retrieve_transfer(self, transfer_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/transfers/{transfer_id}")

    async def retrieve_physical_count(self, physical_count_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/physical-counts/{physical_count_id}")
