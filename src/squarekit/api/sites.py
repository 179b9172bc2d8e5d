"""Sites API."""

from squarekit.api.base import APIResource
from squarekit.endpoints import SquareAPI, Verb
from squarekit.response import SquareResponse


class Sites(APIResource):
    api = SquareAPI.SITES

    async def list(self) -> SquareResponse:
        """List the Square Online sites of the seller."""
        return await self._request(Verb.GET)
