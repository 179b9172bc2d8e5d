"""Generic Square API response envelope."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ResponseError(BaseModel):
    """One entry of the ``errors`` array Square returns on failure."""

    category: str
    code: str
    detail: str | None = None
    field: str | None = None


class SquareResponse(BaseModel):
    """Any Square response.

    Resource payloads (``payment``, ``orders``, ``booking``...) are kept as
    extra attributes, so ``response.payment["id"]`` works for any endpoint.
    """

    model_config = ConfigDict(extra="allow")

    errors: list[ResponseError] | None = None
    cursor: str | None = None
    id: str | None = None
    id_mapping: list[Any] | None = None
    cancelled_order_id: str | None = None
    deleted_object_ids: list[str] | None = None
    deleted_at: str | None = None
    latest_time: str | None = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def data(self) -> dict[str, Any]:
        """Extra resource payloads keyed by their JSON name."""
        return dict(self.model_extra or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
