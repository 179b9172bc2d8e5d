"""Pytest fixtures for squarekit tests."""

import httpx
import pytest

from squarekit.client import SquareClient
from squarekit.objects import Currency, Money


@pytest.fixture
def usd() -> Money:
    """Three dollars."""
    return Money(amount=300, currency=Currency.USD)


@pytest.fixture
def access_token() -> str:
    return "EAAAtest_access_token"


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def square_reply() -> dict:
    """JSON the mock transport answers with; tests may replace its contents."""
    return {"status_code": 200, "json": {}}


@pytest.fixture
def mock_transport(recorded_requests, square_reply) -> httpx.MockTransport:
    """Transport that records requests and answers with ``square_reply``."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(square_reply["status_code"], json=square_reply["json"])

    return httpx.MockTransport(handler)


@pytest.fixture
def client(access_token, mock_transport) -> SquareClient:
    """Sandbox client wired to the mock transport."""
    return SquareClient(access_token, "sandbox", square_version="2022-10-19", transport=mock_transport)
