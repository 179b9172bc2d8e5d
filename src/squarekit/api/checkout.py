"""Checkout API: hosted checkouts and payment links."""

from typing import Self

from pydantic import Field

from squarekit.api.base import APIResource, QueryParameters
from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.folds import registry
from squarekit.core.setters import append, assign, constant
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.models import (
    Address,
    ChargeRequestAdditionalRecipient,
    CheckoutOptions,
    CreateOrderRequest,
    Order,
    OrderLineItem,
    PaymentLink,
    PrePopulatedData,
    QuickPay,
)
from squarekit.response import SquareResponse


class CreateCheckoutBody(SquareModel):
    """Body of ``POST /locations/{location_id}/checkouts``."""

    idempotency_key: str | None = None
    order: CreateOrderRequest = Field(default_factory=CreateOrderRequest)
    ask_for_shipping_address: bool | None = None
    merchant_support_email: str | None = None
    pre_populate_buyer_email: str | None = None
    pre_populate_shipping_address: Address | None = None
    redirect_url: str | None = None
    additional_recipients: list[ChargeRequestAdditionalRecipient] | None = None
    note: str | None = None

    setters = {
        "location_id": assign("order.order.location_id"),
        "customer_id": assign("order.order.customer_id"),
        "add_order_item": append("order.order.line_items"),
        "ask_for_shipping_address": constant("ask_for_shipping_address", True),
        "merchant_support_email": assign("merchant_support_email"),
        "pre_populate_buyer_email": assign("pre_populate_buyer_email"),
        "pre_populate_shipping_address": assign("pre_populate_shipping_address"),
        "redirect_url": assign("redirect_url"),
        "add_additional_recipient": append("additional_recipients"),
        "note": assign("note"),
    }

    def validate_body(self) -> Self:
        if self.order.order is None or self.order.order.location_id is None:
            self.reject("order location_id is required")
        self.idempotency_key = new_idempotency_key()
        self.order.idempotency_key = new_idempotency_key()
        return self


class CreatePaymentLinkBody(SquareModel):
    """Body of ``POST /online-checkout/payment-links``.

    Needs either an ``order`` or a ``quick_pay`` description of what is sold.
    """

    idempotency_key: str | None = None
    description: str | None = None
    quick_pay: QuickPay | None = None
    order: Order | None = None
    checkout_options: CheckoutOptions | None = None
    pre_populated_data: PrePopulatedData | None = None
    source: str | None = None
    payment_note: str | None = None

    setters = {
        "description": assign("description"),
        "quick_pay": assign("quick_pay"),
        "order": assign("order"),
        "checkout_options": assign("checkout_options"),
        "redirect_url": assign("checkout_options.redirect_url"),
        "allow_tipping": constant("checkout_options.allow_tipping", True),
        "pre_populated_data": assign("pre_populated_data"),
        "buyer_email": assign("pre_populated_data.buyer_email"),
        "source": assign("source"),
        "payment_note": assign("payment_note"),
    }

    def validate_body(self) -> Self:
        if self.order is None and self.quick_pay is None:
            self.reject("order or quick_pay is required")
        self.idempotency_key = new_idempotency_key()
        return self


class UpdatePaymentLinkBody(SquareModel):
    """Body of ``PUT /online-checkout/payment-links/{id}``."""

    payment_link: PaymentLink = Field(default_factory=PaymentLink)

    setters = {
        "payment_link": assign("payment_link"),
        "version": assign("payment_link.version"),
        "description": assign("payment_link.description"),
        "payment_note": assign("payment_link.payment_note"),
        "checkout_options": assign("payment_link.checkout_options"),
        "pre_populated_data": assign("payment_link.pre_populated_data"),
    }

    def validate_body(self) -> Self:
        if self.payment_link.version < 1:
            self.reject("payment_link version must be at least 1")
        return self


class ListPaymentLinksParameters(QueryParameters):
    cursor: str | None = None
    limit: int | None = None

    setters = {
        "cursor": assign("cursor"),
        "limit": assign("limit"),
    }


registry.append(OrderLineItem, CreateCheckoutBody, "order.order.line_items")
registry.assign(QuickPay, CreatePaymentLinkBody, "quick_pay")


class Checkout(APIResource):
    api = SquareAPI.CHECKOUT

    async def create_checkout(self, location_id: str, body: CreateCheckoutBody) -> SquareResponse:
        """Create a hosted checkout page for an order at ``location_id``."""
        return await self._client.request(
            Verb.POST, SquareAPI.LOCATIONS, f"/{location_id}/checkouts", body=body
        )

    async def list_payment_links(
        self, params: ListPaymentLinksParameters | None = None
    ) -> SquareResponse:
        return await self._request(
            Verb.GET, "/payment-links", params=params.to_params() if params else None
        )

    async def create_payment_link(self, body: CreatePaymentLinkBody) -> SquareResponse:
        return await self._request(Verb.POST, "/payment-links", body=body)

    async def retrieve_payment_link(self, link_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/payment-links/{link_id}")

    async def update_payment_link(self, link_id: str, body: UpdatePaymentLinkBody) -> SquareResponse:
        return await self._request(Verb.PUT, f"/payment-links/{link_id}", body=body)

    async def delete_payment_link(self, link_id: str) -> SquareResponse:
        return await self._request(Verb.DELETE, f"/payment-links/{link_id}")
