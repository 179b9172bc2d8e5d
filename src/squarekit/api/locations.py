"""Locations API."""

from typing import Self

from pydantic import Field

from squarekit.api.base import APIResource
from squarekit.core.base_models import SquareModel
from squarekit.core.setters import append, assign
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.models import Location
from squarekit.response import SquareResponse


class CreateLocationBody(SquareModel):
    """Body of ``POST /locations`` and ``PUT /locations/{id}``."""

    location: Location = Field(default_factory=Location)

    setters = {
        "name": assign("location.name"),
        "address": assign("location.address"),
        "business_name": assign("location.business_name"),
        "business_email": assign("location.business_email"),
        "business_hours": assign("location.business_hours"),
        "add_business_hours_period": append("location.business_hours.periods"),
        "capabilities": assign("location.capabilities"),
        "add_capability": append("location.capabilities"),
        "coordinates": assign("location.coordinates"),
        "country": assign("location.country"),
        "currency": assign("location.currency"),
        "description": assign("location.description"),
        "language_code": assign("location.language_code"),
        "phone_number": assign("location.phone_number"),
        "status": assign("location.status"),
        "timezone": assign("location.timezone"),
        "type": assign("location.type"),
        "website_url": assign("location.website_url"),
    }

    def validate_body(self) -> Self:
        if self.location.name is None:
            self.reject("location name is required")
        return self


class Locations(APIResource):
    api = SquareAPI.LOCATIONS

    async def list(self) -> SquareResponse:
        return await self._request(Verb.GET)

    async def create(self, body: CreateLocationBody) -> SquareResponse:
        return await self._request(Verb.POST, body=body)

    async def update(self, location_id: str, body: CreateLocationBody) -> SquareResponse:
        return await self._request(Verb.PUT, f"/{location_id}", body=body)

    async def retrieve(self, location_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/{location_id}")
