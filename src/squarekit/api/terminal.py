"""Terminal API: checkouts and refunds on Square Terminal devices."""

from typing import Self

from pydantic import Field

from squarekit.api.base import APIResource
from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.folds import registry
from squarekit.core.setters import assign
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.models import (
    DeviceCheckoutOptions,
    TerminalCheckout,
    TerminalCheckoutQuery,
    TerminalRefund,
    TerminalRefundQuery,
)
from squarekit.response import SquareResponse


class CreateTerminalCheckoutBody(SquareModel):
    """Body of ``POST /terminals/checkouts``."""

    idempotency_key: str | None = None
    checkout: TerminalCheckout = Field(default_factory=TerminalCheckout)

    setters = {
        "amount_money": assign("checkout.amount_money"),
        "device_options": assign("checkout.device_options"),
        "customer_id": assign("checkout.customer_id"),
        "deadline_duration": assign("checkout.deadline_duration"),
        "note": assign("checkout.note"),
        "order_id": assign("checkout.order_id"),
        "payment_type": assign("checkout.payment_type"),
        "payment_options": assign("checkout.payment_options"),
        "reference_id": assign("checkout.reference_id"),
    }

    def validate_body(self) -> Self:
        if self.checkout.amount_money is None or self.checkout.device_options is None:
            self.reject("amount_money and device_options are required")
        self.idempotency_key = new_idempotency_key()
        return self


class SearchTerminalCheckoutsBody(SquareModel):
    """Body of ``POST /terminals/checkouts/search``."""

    query: TerminalCheckoutQuery | None = None
    cursor: str | None = None
    limit: int | None = None

    setters = {
        "query": assign("query"),
        "cursor": assign("cursor"),
        "limit": assign("limit"),
    }


class CreateTerminalRefundBody(SquareModel):
    """Body of ``POST /terminals/refunds``."""

    idempotency_key: str | None = None
    refund: TerminalRefund = Field(default_factory=TerminalRefund)

    setters = {
        "amount_money": assign("refund.amount_money"),
        "device_id": assign("refund.device_id"),
        "payment_id": assign("refund.payment_id"),
        "reason": assign("refund.reason"),
        "deadline_duration": assign("refund.deadline_duration"),
    }

    def validate_body(self) -> Self:
        refund = self.refund
        if (
            refund.device_id is None
            or refund.amount_money is None
            or refund.reason is None
            or refund.payment_id is None
        ):
            self.reject("device_id, amount_money, reason and payment_id are required")
        self.idempotency_key = new_idempotency_key()
        return self


class SearchTerminalRefundsBody(SquareModel):
    """Body of ``POST /terminals/refunds/search``."""

    query: TerminalRefundQuery | None = None
    cursor: str | None = None
    limit: int | None = None

    setters = {
        "query": assign("query"),
        "cursor": assign("cursor"),
        "limit": assign("limit"),
    }


registry.assign(DeviceCheckoutOptions, CreateTerminalCheckoutBody, "checkout.device_options")
registry.assign(TerminalCheckoutQuery, SearchTerminalCheckoutsBody, "query")
registry.assign(TerminalRefundQuery, SearchTerminalRefundsBody, "query")


class Terminal(APIResource):
    api = SquareAPI.TERMINALS

    async def create_checkout(self, body: CreateTerminalCheckoutBody) -> SquareResponse:
        """Send a checkout request to a paired Terminal device."""
        return await self._request(Verb.POST, "/checkouts", body=body)

    async def search_checkouts(self, body: SearchTerminalCheckoutsBody) -> SquareResponse:
        return await self._request(Verb.POST, "/checkouts/search", body=body)

    async def get_checkout(self, checkout_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/checkouts/{checkout_id}")

    async def cancel_checkout(self, checkout_id: str) -> SquareResponse:
        return await self._request(Verb.POST, f"/checkouts/{checkout_id}/cancel")

    async def create_refund(self, body: CreateTerminalRefundBody) -> SquareResponse:
        return await self._request(Verb.POST, "/refunds", body=body)

    async def search_refunds(self, body: SearchTerminalRefundsBody) -> SquareResponse:
        return await self._request(Verb.POST, "/refunds/search", body=body)

    async def get_refund(self, terminal_refund_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/refunds/{terminal_refund_id}")

    async def cancel_refund(self, terminal_refund_id: str) -> SquareResponse:
        return await self._request(Verb.POST, f"/refunds/{terminal_refund_id}/cancel")
