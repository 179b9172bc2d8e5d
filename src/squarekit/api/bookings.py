"""Bookings API."""

from typing import Self

from pydantic import Field

from squarekit.api.base import APIResource, QueryParameters
from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.folds import registry
from squarekit.core.setters import Append, append, assign, compute, constant, resolve
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.models import AppointmentSegment, Booking, TimeRange
from squarekit.response import SquareResponse


class CreateBookingBody(SquareModel):
    """Body of ``POST /bookings``, also used for updates."""

    idempotency_key: str | None = None
    booking: Booking = Field(default_factory=Booking)

    setters = {
        "customer_id": assign("booking.customer_id"),
        "location_id": assign("booking.location_id"),
        "location_type": assign("booking.location_type"),
        "start_at": assign("booking.start_at"),
        "add_appointment_segment": append("booking.appointment_segments"),
        "seller_note": assign("booking.seller_note"),
        "customer_note": assign("booking.customer_note"),
        "version": assign("booking.version"),
    }

    def validate_body(self) -> Self:
        booking = self.booking
        if (
            booking.customer_id is None
            or booking.location_id is None
            or booking.start_at is None
            or not booking.appointment_segments
        ):
            self.reject("customer_id, location_id, start_at and an appointment segment are required")
        self.idempotency_key = new_idempotency_key()
        return self


class CancelBookingBody(SquareModel):
    """Body of ``POST /bookings/{booking_id}/cancel``."""

    booking_id: str | None = Field(default=None, exclude=True)
    idempotency_key: str | None = None
    booking_version: int | None = None

    setters = {
        "booking_id": assign("booking_id"),
        "booking_version": assign("booking_version"),
    }

    def validate_body(self) -> Self:
        if self.booking_id is None:
            self.reject("booking_id is required")
        self.idempotency_key = new_idempotency_key()
        return self


class FilterValue(SquareModel):
    all: list[str] | None = None
    any: list[str] | None = None
    none: list[str] | None = None


class SegmentFilter(SquareModel):
    service_variation_id: str
    team_member_id_filter: FilterValue | None = None


class AvailabilityFilter(SquareModel):
    start_at_range: TimeRange | None = None
    booking_id: str | None = None
    location_id: str | None = None
    segment_filters: list[SegmentFilter] | None = None


class AvailabilityQuery(SquareModel):
    filter: AvailabilityFilter | None = None


def _set_start_at_range(body: "SearchAvailabilityBody", start: str, end: str) -> None:
    target, leaf = resolve(body, "query.filter.start_at_range")
    setattr(target, leaf, TimeRange(start_at=start, end_at=end))


_segment_filters = Append("query.filter.segment_filters")


def _add_segment_filter(
    body: "SearchAvailabilityBody",
    service_variation_id: str,
    team_member_ids: list[str] | None = None,
) -> None:
    team_filter = FilterValue(any=team_member_ids) if team_member_ids else None
    _segment_filters.apply(
        body,
        SegmentFilter(
            service_variation_id=service_variation_id,
            team_member_id_filter=team_filter,
        ),
    )


class SearchAvailabilityBody(SquareModel):
    """Body of ``POST /bookings/availability/search``."""

    query: AvailabilityQuery = Field(default_factory=AvailabilityQuery)

    setters = {
        "start_at_range": compute(_set_start_at_range),
        "booking_id": assign("query.filter.booking_id"),
        "location_id": assign("query.filter.location_id"),
        "segment_filters": compute(_add_segment_filter),
    }

    def validate_body(self) -> Self:
        if self.query.filter is None or self.query.filter.start_at_range is None:
            self.reject("start_at_range is required")
        return self


class ListBookingsParameters(QueryParameters):
    limit: int | None = None
    cursor: str | None = None
    team_member_id: str | None = None
    location_id: str | None = None
    start_at_min: str | None = None
    start_at_max: str | None = None

    setters = {
        "limit": assign("limit"),
        "cursor": assign("cursor"),
        "team_member_id": assign("team_member_id"),
        "location_id": assign("location_id"),
        "start_at_min": assign("start_at_min"),
        "start_at_max": assign("start_at_max"),
    }


class ListTeamMemberProfilesParameters(QueryParameters):
    limit: int | None = None
    cursor: str | None = None
    bookable_only: bool | None = None
    location_id: str | None = None

    setters = {
        "limit": assign("limit"),
        "cursor": assign("cursor"),
        "bookable_only": constant("bookable_only", True),
        "location_id": assign("location_id"),
    }


registry.append(AppointmentSegment, CreateBookingBody, "booking.appointment_segments")


class Bookings(APIResource):
    api = SquareAPI.BOOKINGS

    async def list(self, params: ListBookingsParameters | None = None) -> SquareResponse:
        return await self._request(Verb.GET, params=params.to_params() if params else None)

    async def search_availability(self, body: SearchAvailabilityBody) -> SquareResponse:
        return await self._request(Verb.POST, "/availability/search", body=body)

    async def create(self, body: CreateBookingBody) -> SquareResponse:
        return await self._request(Verb.POST, body=body)

    async def update(self, booking_id: str, body: CreateBookingBody) -> SquareResponse:
        return await self._request(Verb.PUT, f"/{booking_id}", body=body)

    async def retrieve(self, booking_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/{booking_id}")

    async def cancel(self, body: CancelBookingBody) -> SquareResponse:
        return await self._request(Verb.POST, f"/{body.booking_id}/cancel", body=body)

    async def retrieve_business_profile(self) -> SquareResponse:
        return await self._request(Verb.GET, "/business-booking-profile")

    async def list_team_member_profiles(
        self, params: ListTeamMemberProfilesParameters | None = None
    ) -> SquareResponse:
        return await self._request(
            Verb.GET,
            "/team-member-booking-profiles",
            params=params.to_params() if params else None,
        )

    async def retrieve_team_member_profile(self, team_member_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/team-member-booking-profiles/{team_member_id}")
