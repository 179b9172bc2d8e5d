"""Shared pieces of the per-resource endpoint wrappers."""

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from squarekit.core.base_models import SquareModel
from squarekit.endpoints import SquareAPI, Verb
from squarekit.response import SquareResponse

if TYPE_CHECKING:
    from squarekit.client import SquareClient


def _render(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_render(v) for v in value)
    return str(value)


class QueryParameters(SquareModel):
    """Body sent as URL query parameters rather than JSON."""

    def to_params(self) -> list[tuple[str, str]]:
        """Set parameters in declaration order; lists are comma separated."""
        params = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None or field.exclude:
                continue
            params.append((field.alias or name, _render(value)))
        return params


class APIResource:
    """Base for endpoint groups bound to one SquareAPI prefix."""

    api: SquareAPI

    def __init__(self, client: "SquareClient"):
        self._client = client

    async def _request(
        self,
        verb: Verb,
        path: str = "",
        body: BaseModel | dict[str, Any] | None = None,
        params: list[tuple[str, str]] | None = None,
    ) -> SquareResponse:
        return await self._client.request(verb, self.api, path, body=body, params=params)
