"""Unit tests for SquareClient request handling."""

import json

import httpx
import pytest

from squarekit.api.bookings import CancelBookingBody
from squarekit.api.catalog import BatchRetrieveCatalogObjectsBody
from squarekit.api.customers import DeleteCustomerBody, ListCustomersParameters
from squarekit.api.payments import PaymentRequest
from squarekit.client import SquareClient
from squarekit.core.builder import Builder
from squarekit.core.exceptions import SquareAPIError, SquareTransportError
from squarekit.endpoints import SQUARE_PRODUCTION_BASE, Environment, SquareAPI


class TestEndpoints:
    """Tests for URL construction."""

    def test_sandbox_by_default(self, client):
        assert client.endpoint(SquareAPI.PAYMENTS) == (
            "https://connect.squareupsandbox.com/v2/payments"
        )

    def test_production_copy(self, client):
        production = client.production()

        assert production.environment is Environment.PRODUCTION
        assert production.endpoint(SquareAPI.ORDERS, "/search") == (
            f"{SQUARE_PRODUCTION_BASE}orders/search"
        )
        assert client.environment is Environment.SANDBOX
        assert production.access_token == client.access_token

    def test_environment_name_is_case_insensitive(self, access_token):
        client = SquareClient(access_token, "SANDBOX")

        assert client.environment is Environment.SANDBOX
        assert SquareClient(access_token, "Production").environment is Environment.PRODUCTION


@pytest.mark.asyncio
class TestRequest:
    """Tests for SquareClient.request through the endpoint wrappers."""

    async def test_payment_post(self, client, recorded_requests, square_reply):
        square_reply["json"] = {"payment": {"id": "PAY1", "status": "COMPLETED"}}
        payment = (
            Builder.from_body(PaymentRequest())
            .source_id("cnon:card-nonce-ok")
            .amount(100, "USD")
            .build()
        )

        response = await client.payments.create(payment)

        request = recorded_requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://connect.squareupsandbox.com/v2/payments"
        assert request.headers["Authorization"] == "Bearer EAAAtest_access_token"
        assert request.headers["Square-Version"] == "2022-10-19"
        sent = json.loads(request.content)
        assert sent["amount_money"] == {"amount": 100, "currency": "USD"}
        assert sent["idempotency_key"] == payment.idempotency_key
        assert response.get("payment")["id"] == "PAY1"

    async def test_catalog_batch_retrieve_body(self, client, recorded_requests):
        body = Builder.from_body(BatchRetrieveCatalogObjectsBody()).add_object_id("id1").build()

        await client.catalog.batch_retrieve(body)

        request = recorded_requests[0]
        assert request.url.path == "/v2/catalog/batch-retrieve"
        assert json.loads(request.content)["object_ids"] == ["id1"]

    async def test_list_params(self, client, recorded_requests):
        params = (
            Builder.from_body(ListCustomersParameters())
            .limit(10)
            .sort_field_created_at()
            .sort_order_desc()
            .build()
        )

        await client.customers.list(params)

        request = recorded_requests[0]
        assert request.method == "GET"
        assert request.url.params["limit"] == "10"
        assert request.url.params["sort_field"] == "CREATED_AT"
        assert request.url.params["sort_order"] == "DESC"
        assert request.content == b""

    async def test_delete_customer_sends_version(self, client, recorded_requests):
        body = Builder.from_body(DeleteCustomerBody()).customer_id("C1").version(4).build()

        await client.customers.delete(body)

        request = recorded_requests[0]
        assert request.method == "DELETE"
        assert request.url.path == "/v2/customers/C1"
        assert request.url.params["version"] == "4"

    async def test_cancel_booking_path(self, client, recorded_requests):
        body = Builder.from_body(CancelBookingBody()).booking_id("B1").booking_version(2).build()

        await client.bookings.cancel(body)

        request = recorded_requests[0]
        assert request.url.path == "/v2/bookings/B1/cancel"
        assert json.loads(request.content) == {
            "idempotency_key": body.idempotency_key,
            "booking_version": 2,
        }

    async def test_inventory_count_location_param(self, client, recorded_requests):
        await client.inventory.retrieve_count("ITEM1", location_id="L1")

        request = recorded_requests[0]
        assert request.url.path == "/v2/inventory/ITEM1"
        assert request.url.params["location_ids"] == "L1"

    async def test_errors_array_raises(self, client, square_reply):
        square_reply["status_code"] = 400
        square_reply["json"] = {
            "errors": [
                {
                    "category": "INVALID_REQUEST_ERROR",
                    "code": "MISSING_REQUIRED_PARAMETER",
                    "detail": "Missing required parameter.",
                    "field": "source_id",
                }
            ]
        }

        with pytest.raises(SquareAPIError) as exc_info:
            await client.locations.list()

        assert exc_info.value.status_code == 400
        assert exc_info.value.codes == ["MISSING_REQUIRED_PARAMETER"]
        assert exc_info.value.errors[0].field == "source_id"

    async def test_error_status_without_errors_raises(self, client, square_reply):
        square_reply["status_code"] = 503

        with pytest.raises(SquareAPIError) as exc_info:
            await client.sites.list()

        assert exc_info.value.status_code == 503
        assert exc_info.value.errors == []

    async def test_empty_success_body(self, access_token):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b""))
        client = SquareClient(access_token, "sandbox", transport=transport)

        response = await client.terminal.cancel_checkout("CHK1")

        assert response.has_errors is False
        assert response.data == {}

    async def test_non_json_reply(self, access_token):
        transport = httpx.MockTransport(lambda request: httpx.Response(502, text="Bad Gateway"))
        client = SquareClient(access_token, "sandbox", transport=transport)

        with pytest.raises(SquareTransportError):
            await client.locations.list()

    async def test_connection_failure(self, access_token):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = SquareClient(access_token, "sandbox", transport=httpx.MockTransport(handler))

        with pytest.raises(SquareTransportError) as exc_info:
            await client.locations.list()

        assert exc_info.value.url == "https://connect.squareupsandbox.com/v2/locations"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_timeout(self, access_token):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = SquareClient(access_token, "sandbox", timeout=1.0, transport=httpx.MockTransport(handler))

        with pytest.raises(SquareTransportError) as exc_info:
            await client.locations.list()

        assert "timed out" in exc_info.value.message
