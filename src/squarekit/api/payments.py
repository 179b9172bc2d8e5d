"""Payments API."""

from typing import Self

from squarekit.api.base import APIResource
from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.setters import assign, compute
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.enums import Currency
from squarekit.objects.models import Money
from squarekit.response import SquareResponse


def _set_amount(body: "PaymentRequest", amount: int, currency: Currency | str) -> None:
    body.amount_money = Money(amount=amount, currency=currency)


class PaymentRequest(SquareModel):
    """Body of ``POST /payments``."""

    source_id: str | None = None
    idempotency_key: str | None = None
    amount_money: Money | None = None
    verification_token: str | None = None
    customer_id: str | None = None
    location_id: str | None = None
    reference_id: str | None = None
    note: str | None = None
    autocomplete: bool | None = None

    setters = {
        "source_id": assign("source_id"),
        "amount": compute(_set_amount),
        "amount_money": assign("amount_money"),
        "verification_token": assign("verification_token"),
        "customer_id": assign("customer_id"),
        "location_id": assign("location_id"),
        "reference_id": assign("reference_id"),
        "note": assign("note"),
    }

    def validate_body(self) -> Self:
        if self.source_id is None or self.amount_money is None:
            self.reject("source_id and amount_money are required")
        self.idempotency_key = new_idempotency_key()
        return self


class Payments(APIResource):
    api = SquareAPI.PAYMENTS

    async def create(self, payment: PaymentRequest) -> SquareResponse:
        """Charge a payment source."""
        return await self._request(Verb.POST, body=payment)
