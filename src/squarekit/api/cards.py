"""Cards API."""

from typing import Self

from pydantic import Field

from squarekit.api.base import APIResource, QueryParameters
from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.setters import assign, constant
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.enums import SortOrder
from squarekit.objects.models import Card
from squarekit.response import SquareResponse


class CreateCardBody(SquareModel):
    """Body of ``POST /cards``: store a card on file for a customer."""

    idempotency_key: str | None = None
    source_id: str | None = None
    verification_token: str | None = None
    card: Card = Field(default_factory=Card)

    setters = {
        "customer_id": assign("card.customer_id"),
        "billing_address": assign("card.billing_address"),
        "cardholder_name": assign("card.cardholder_name"),
        "reference_id": assign("card.reference_id"),
        "source_id": assign("source_id"),
        "verification_token": assign("verification_token"),
    }

    def validate_body(self) -> Self:
        if self.source_id is None or self.card.customer_id is None:
            self.reject("source_id and customer_id are required")
        self.idempotency_key = new_idempotency_key()
        return self


class ListCardsParameters(QueryParameters):
    cursor: str | None = None
    customer_id: str | None = None
    include_disabled: bool | None = None
    reference_id: str | None = None
    sort_order: SortOrder | None = None

    setters = {
        "cursor": assign("cursor"),
        "customer_id": assign("customer_id"),
        "include_disabled": constant("include_disabled", True),
        "exclude_disabled": constant("include_disabled", False),
        "reference_id": assign("reference_id"),
        "sort_ascending": constant("sort_order", SortOrder.ASC),
        "sort_descending": constant("sort_order", SortOrder.DESC),
    }


class Cards(APIResource):
    api = SquareAPI.CARDS

    async def list(self, params: ListCardsParameters | None = None) -> SquareResponse:
        return await self._request(Verb.GET, params=params.to_params() if params else None)

    async def retrieve(self, card_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/{card_id}")

    async def create(self, body: CreateCardBody) -> SquareResponse:
        return await self._request(Verb.POST, body=body)

    async def disable(self, card_id: str) -> SquareResponse:
        """Disable a card; it can no longer be charged."""
        return await self._request(Verb.POST, f"/{card_id}/disable")
