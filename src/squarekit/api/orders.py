"""Orders API."""

from typing import Self

from pydantic import Field

from squarekit.api.base import APIResource
from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.folds import registry
from squarekit.core.setters import append, assign, constant
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.models import (
    Order,
    OrderLineItem,
    OrderReward,
    OrderServiceCharge,
    SearchOrdersQuery,
)
from squarekit.response import SquareResponse


class CreateOrderBody(SquareModel):
    """Body of ``POST /orders``."""

    idempotency_key: str | None = None
    order: Order = Field(default_factory=Order)

    setters = {
        "location_id": assign("order.location_id"),
        "customer_id": assign("order.customer_id"),
        "reference_id": assign("order.reference_id"),
        "add_service_charge": append("order.service_charges"),
        "add_line_item": append("order.line_items"),
    }

    def validate_body(self) -> Self:
        if self.order.location_id is None:
            self.reject("order location_id is required")
        self.idempotency_key = new_idempotency_key()
        return self


class SearchOrdersBody(SquareModel):
    """Body of ``POST /orders/search``.

    Entries are requested unless ``no_return_entries`` was called. Validation only
    fills ``return_entries`` when it was left unset, so the opt-out survives.
    """

    cursor: str | None = None
    limit: int | None = None
    location_ids: list[str] | None = None
    query: SearchOrdersQuery | None = None
    return_entries: bool | None = None

    setters = {
        "add_location_id": append("location_ids"),
        "location_ids": assign("location_ids"),
        "cursor": assign("cursor"),
        "limit": assign("limit"),
        "no_return_entries": constant("return_entries", False),
        "query": assign("query"),
    }

    def validate_body(self) -> Self:
        if self.return_entries is None:
            self.return_entries = True
        return self


class UpdateOrderBody(SquareModel):
    """Body of ``PUT /orders/{order_id}``."""

    fields_to_clear: list[str] | None = None
    idempotency_key: str | None = None
    order: Order | None = None

    setters = {
        "fields_to_clear": assign("fields_to_clear"),
        "order": assign("order"),
    }

    def validate_body(self) -> Self:
        if self.order is None:
            self.reject("order is required")
        self.idempotency_key = new_idempotency_key()
        return self


class PayOrderBody(SquareModel):
    """Body of ``POST /orders/{order_id}/pay``."""

    idempotency_key: str | None = None
    order_version: int | None = None
    payment_ids: list[str] | None = None

    setters = {
        "order_version": assign("order_version"),
        "payment_ids": assign("payment_ids"),
        "add_payment_id": append("payment_ids"),
    }

    def validate_body(self) -> Self:
        if self.order_version is None or self.payment_ids is None:
            self.reject("order_version and payment_ids are required")
        self.idempotency_key = new_idempotency_key()
        return self


class CalculateOrderBody(SquareModel):
    """Body of ``POST /orders/calculate``."""

    order: Order | None = None
    proposed_rewards: list[OrderReward] | None = None

    setters = {
        "order": assign("order"),
        "add_proposed_reward": append("proposed_rewards"),
    }

    def validate_body(self) -> Self:
        if self.order is None:
            self.reject("order is required")
        return self


registry.append(OrderServiceCharge, CreateOrderBody, "order.service_charges")
registry.append(OrderServiceCharge, Order, "service_charges")
registry.append(OrderLineItem, Order, "line_items")
registry.assign(SearchOrdersQuery, SearchOrdersBody, "query")
registry.assign(Order, UpdateOrderBody, "order")
registry.assign(Order, CalculateOrderBody, "order")
registry.append(OrderReward, CalculateOrderBody, "proposed_rewards")


class Orders(APIResource):
    api = SquareAPI.ORDERS

    async def create(self, body: CreateOrderBody) -> SquareResponse:
        return await self._request(Verb.POST, body=body)

    async def search(self, body: SearchOrdersBody) -> SquareResponse:
        return await self._request(Verb.POST, "/search", body=body)

    async def retrieve(self, order_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/{order_id}")

    async def update(self, order_id: str, body: UpdateOrderBody) -> SquareResponse:
        return await self._request(Verb.PUT, f"/{order_id}", body=body)

    async def pay(self, order_id: str, body: PayOrderBody) -> SquareResponse:
        return await self._request(Verb.POST, f"/{order_id}/pay", body=body)

    async def calculate(self, body: CalculateOrderBody) -> SquareResponse:
        """Preview prices, taxes and rewards of an order without creating it."""
        return await self._request(Verb.POST, "/calculate", body=body)
