"""Square environments and API path prefixes."""

from enum import Enum

SQUARE_PRODUCTION_BASE = "https://connect.squareup.com/v2/"
SQUARE_SANDBOX_BASE = "https://connect.squareupsandbox.com/v2/"


class Environment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        if self is Environment.PRODUCTION:
            return SQUARE_PRODUCTION_BASE
        return SQUARE_SANDBOX_BASE


class SquareAPI(str, Enum):
    """Top-level API path of each Square resource."""

    PAYMENTS = "payments"
    BOOKINGS = "bookings"
    LOCATIONS = "locations"
    CATALOG = "catalog"
    CUSTOMERS = "customers"
    CARDS = "cards"
    CHECKOUT = "online-checkout"
    INVENTORY = "inventory"
    ORDERS = "orders"
    TERMINALS = "terminals"
    SITES = "sites"


class Verb(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
