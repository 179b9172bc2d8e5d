"""Customers API."""

from typing import Self

from pydantic import Field

from squarekit.api.base import APIResource, QueryParameters
from squarekit.core.base_models import SquareModel, new_idempotency_key
from squarekit.core.setters import AddUnique, Assign, assign, compute, constant
from squarekit.endpoints import SquareAPI, Verb
from squarekit.objects.enums import (
    CustomerCreationSource,
    CustomerInclusionExclusion,
    CustomerSortField,
    SortOrder,
)
from squarekit.objects.models import Address, TimeRange
from squarekit.response import SquareResponse


class CreateCustomerBody(SquareModel):
    """Body of ``POST /customers``.

    At least one of given name, family name, company name, email address or
    phone number must be set.
    """

    idempotency_key: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    company_name: str | None = None
    nickname: str | None = None
    email_address: str | None = None
    address: Address | None = None
    phone_number: str | None = None
    reference_id: str | None = None
    note: str | None = None
    birthday: str | None = None

    setters = {
        "given_name": assign("given_name"),
        "family_name": assign("family_name"),
        "company_name": assign("company_name"),
        "nickname": assign("nickname"),
        "email_address": assign("email_address"),
        "address": assign("address"),
        "phone_number": assign("phone_number"),
        "reference_id": assign("reference_id"),
        "note": assign("note"),
        "birthday": assign("birthday"),
    }

    def validate_body(self) -> Self:
        identifying = (
            self.given_name,
            self.family_name,
            self.company_name,
            self.email_address,
            self.phone_number,
        )
        if all(value is None for value in identifying):
            self.reject("a name, company, email address or phone number is required")
        self.idempotency_key = new_idempotency_key()
        return self


class DeleteCustomerBody(SquareModel):
    """Target of ``DELETE /customers/{customer_id}``; nothing is sent as JSON."""

    customer_id: str | None = None
    version: int | None = None

    setters = {
        "customer_id": assign("customer_id"),
        "version": assign("version"),
    }

    def validate_body(self) -> Self:
        if self.customer_id is None:
            self.reject("customer_id is required")
        return self

    def to_params(self) -> list[tuple[str, str]]:
        if self.version is None:
            return []
        return [("version", str(self.version))]


class CustomerTextFilter(SquareModel):
    exact: str | None = None
    fuzzy: str | None = None


class CustomerCreationSourceFilter(SquareModel):
    rule: CustomerInclusionExclusion | None = None
    values: list[CustomerCreationSource] | None = None


class CustomerFilter(SquareModel):
    created_at: TimeRange | None = None
    updated_at: TimeRange | None = None
    creation_source: CustomerCreationSourceFilter | None = None
    email_address: CustomerTextFilter | None = None
    phone_number: CustomerTextFilter | None = None
    reference_id: CustomerTextFilter | None = None


class CustomerSort(SquareModel):
    field: CustomerSortField | None = None
    order: SortOrder | None = None


class CustomerQuery(SquareModel):
    filter: CustomerFilter | None = None
    sort: CustomerSort | None = None


def _limit(path: str):
    spec = Assign(path)

    def apply(body: SquareModel, limit: int) -> None:
        if 1 <= limit <= 100:
            spec.apply(body, limit)

    return compute(apply)


def _time_range(path: str):
    spec = Assign(path)

    def apply(body: SquareModel, start: str, end: str) -> None:
        spec.apply(body, TimeRange(start_at=start, end_at=end))

    return compute(apply)


_creation_rule = Assign("query.filter.creation_source.rule")
_creation_values = AddUnique("query.filter.creation_source.values")


def _add_creation_source(body: "SearchCustomersBody", source: CustomerCreationSource) -> None:
    _creation_values.apply(body, source)
    if body.query.filter.creation_source.rule is None:
        _creation_rule.apply(body, CustomerInclusionExclusion.INCLUDE)


class SearchCustomersBody(SquareModel):
    """Body of ``POST /customers/search``."""

    cursor: str | None = None
    limit: int | None = None
    query: CustomerQuery | None = None

    setters = {
        "cursor": assign("cursor"),
        "limit": _limit("limit"),
        "created_at": _time_range("query.filter.created_at"),
        "updated_at": _time_range("query.filter.updated_at"),
        "exact_email_address": assign("query.filter.email_address.exact"),
        "fuzzy_email_address": assign("query.filter.email_address.fuzzy"),
        "exact_phone_number": assign("query.filter.phone_number.exact"),
        "fuzzy_phone_number": assign("query.filter.phone_number.fuzzy"),
        "exact_reference_id": assign("query.filter.reference_id.exact"),
        "fuzzy_reference_id": assign("query.filter.reference_id.fuzzy"),
        "set_creation_source_include": constant(
            "query.filter.creation_source.rule", CustomerInclusionExclusion.INCLUDE
        ),
        "set_creation_source_exclude": constant(
            "query.filter.creation_source.rule", CustomerInclusionExclusion.EXCLUDE
        ),
        "add_creation_source": compute(_add_creation_source),
        "sort_field": assign("query.sort.field"),
        "sort_ascending": constant("query.sort.order", SortOrder.ASC),
        "sort_descending": constant("query.sort.order", SortOrder.DESC),
    }


class ListCustomersParameters(QueryParameters):
    cursor: str | None = None
    limit: int | None = None
    sort_field: CustomerSortField | None = None
    sort_order: SortOrder | None = None

    setters = {
        "cursor": assign("cursor"),
        "limit": _limit("limit"),
        "sort_field_default": constant("sort_field", CustomerSortField.DEFAULT),
        "sort_field_created_at": constant("sort_field", CustomerSortField.CREATED_AT),
        "sort_order_asc": constant("sort_order", SortOrder.ASC),
        "sort_order_desc": constant("sort_order", SortOrder.DESC),
    }


class Customers(APIResource):
    api = SquareAPI.CUSTOMERS

    async def list(self, params: ListCustomersParameters | None = None) -> SquareResponse:
        return await self._request(Verb.GET, params=params.to_params() if params else None)

    async def create(self, body: CreateCustomerBody) -> SquareResponse:
        return await self._request(Verb.POST, body=body)

    async def retrieve(self, customer_id: str) -> SquareResponse:
        return await self._request(Verb.GET, f"/{customer_id}")

    async def search(self, body: SearchCustomersBody) -> SquareResponse:
        return await self._request(Verb.POST, "/search", body=body)

    async def delete(self, body: DeleteCustomerBody) -> SquareResponse:
        return await self._request(
            Verb.DELETE, f"/{body.customer_id}", params=body.to_params() or None
        )
