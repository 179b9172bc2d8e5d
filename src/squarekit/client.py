"""Async HTTP client for the Square API."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from squarekit.api.bookings import Bookings
from squarekit.api.cards import Cards
from squarekit.api.catalog import Catalog
from squarekit.api.checkout import Checkout
from squarekit.api.customers import Customers
from squarekit.api.inventory import Inventory
from squarekit.api.locations import Locations
from squarekit.api.orders import Orders
from squarekit.api.payments import Payments
from squarekit.api.sites import Sites
from squarekit.api.terminal import Terminal
from squarekit.config import settings
from squarekit.core.exceptions import SquareAPIError, SquareTransportError
from squarekit.endpoints import Environment, SquareAPI, Verb
from squarekit.response import SquareResponse

logger = logging.getLogger(__name__)

Params = list[tuple[str, str]]


class SquareClient:
    """Sends requests to the Square API.

    Missing arguments fall back to the ``SQUARE_*`` settings. The client runs
    in sandbox mode unless configured otherwise or switched with
    ``production()``.

    Resources are exposed as attributes::

        client = SquareClient("token")
        response = await client.payments.create(payment)
    """

    def __init__(
        self,
        access_token: str | None = None,
        environment: Environment | str | None = None,
        *,
        square_version: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.access_token = access_token if access_token is not None else settings.square_access_token
        environment = environment or settings.square_environment
        if isinstance(environment, str):
            environment = environment.lower()
        self.environment = Environment(environment)
        self.square_version = square_version or settings.square_version
        self.timeout = timeout if timeout is not None else settings.square_timeout_seconds
        self._transport = transport

        self.payments = Payments(self)
        self.bookings = Bookings(self)
        self.cards = Cards(self)
        self.catalog = Catalog(self)
        self.checkout = Checkout(self)
        self.customers = Customers(self)
        self.inventory = Inventory(self)
        self.locations = Locations(self)
        self.orders = Orders(self)
        self.sites = Sites(self)
        self.terminal = Terminal(self)

    def production(self) -> "SquareClient":
        """Return a copy of this client targeting the production API."""
        return SquareClient(
            self.access_token,
            Environment.PRODUCTION,
            square_version=self.square_version,
            timeout=self.timeout,
            transport=self._transport,
        )

    def endpoint(self, api: SquareAPI, path: str = "") -> str:
        return f"{self.environment.base_url}{api.value}{path}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Square-Version": self.square_version,
            "Accept": "application/json",
        }

    async def request(
        self,
        verb: Verb | str,
        api: SquareAPI,
        path: str = "",
        body: BaseModel | dict[str, Any] | None = None,
        params: Params | None = None,
    ) -> SquareResponse:
        """Send one request and return the parsed response.

        Raises:
            SquareAPIError: The API returned an ``errors`` array or a non-2xx status.
            SquareTransportError: The request failed or the reply was not JSON.
        """
        verb = Verb(verb)
        url = self.endpoint(api, path)
        payload = body.to_payload() if hasattr(body, "to_payload") else body
        logger.debug("%s %s", verb.value, url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    verb.value,
                    url,
                    headers=self._headers(),
                    json=payload,
                    params=params or None,
                )
        except httpx.TimeoutException as e:
            logger.error("Square request timed out: %s %s", verb.value, url)
            raise SquareTransportError(f"Request timed out after {self.timeout}s", url=url) from e
        except httpx.RequestError as e:
            logger.error("Square request failed: %s %s: %s", verb.value, url, str(e))
            raise SquareTransportError(f"Request failed: {e}", url=url) from e

        try:
            # Some endpoints answer 200 with no body
            parsed = SquareResponse.model_validate(response.json() if response.content else {})
        except (ValueError, ValidationError) as e:
            logger.error("Unreadable response from %s (status %s)", url, response.status_code)
            raise SquareTransportError(
                f"Square returned a non-JSON response ({response.status_code})", url=url
            ) from e

        if parsed.has_errors or response.is_error:
            errors = parsed.errors or []
            detail = "; ".join(f"{e.code}: {e.detail or e.category}" for e in errors)
            logger.warning("Square API error %s for %s: %s", response.status_code, url, detail)
            raise SquareAPIError(
                detail or f"Square returned {response.status_code}",
                errors=errors,
                status_code=response.status_code,
            )

        return parsed
