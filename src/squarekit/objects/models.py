"""Square API objects shared between request bodies and responses.

Objects that can be assembled with a sub-builder declare a setter table and
a validation gate; the rest are plain data.
"""

from typing import Any, Self

from pydantic import Field, field_validator

from squarekit.core.base_models import SquareModel
from squarekit.core.setters import assign, append, compute, constant
from squarekit.objects.enums import (
    BookingLocationType,
    CheckoutOptionsPaymentType,
    Currency,
    InventoryChangeType,
    InventoryState,
    LocationStatus,
    LocationType,
    OrderLineItemItemType,
    OrderServiceChargeCalculationPhase,
    OrderServiceChargeType,
    OrderState,
    SearchOrdersSortField,
    SortOrder,
    TerminalCheckoutStatus,
)


# =============================================================================
# Primitives
# =============================================================================


class Money(SquareModel):
    """An amount in the smallest currency unit."""

    amount: int | None = Field(default=None, ge=0)
    currency: Currency

    @field_validator("currency", mode="before")
    @classmethod
    def uppercase_currency(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


class Address(SquareModel):
    address_line_1: str | None = None
    address_line_2: str | None = None
    address_line_3: str | None = None
    locality: str | None = None
    sublocality: str | None = None
    administrative_district_level_1: str | None = None
    postal_code: str | None = None
    country: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class Coordinates(SquareModel):
    latitude: float
    longitude: float


class BusinessHoursPeriod(SquareModel):
    day_of_week: str
    start_local_time: str
    end_local_time: str


class BusinessHours(SquareModel):
    periods: list[BusinessHoursPeriod] = Field(default_factory=list)


class TimeRange(SquareModel):
    """RFC 3339 start/end bounds; either end may be open."""

    start_at: str | None = None
    end_at: str | None = None


# =============================================================================
# Bookings
# =============================================================================


class AppointmentSegment(SquareModel):
    duration_minutes: float | None = None
    team_member_id: str | None = None
    any_team_member_id: str | None = None
    intermission_minutes: int | None = None
    resource_ids: list[str] | None = None
    service_variation_id: str | None = None
    service_variation_version: int | None = None

    setters = {
        "duration_minutes": assign("duration_minutes"),
        "team_member_id": assign("team_member_id"),
        "any_team_member_id": assign("any_team_member_id"),
        "intermission_minutes": assign("intermission_minutes"),
        "service_variation_id": assign("service_variation_id"),
        "service_variation_version": assign("service_variation_version"),
    }

    def validate_body(self) -> Self:
        if (
            self.duration_minutes is None
            or self.team_member_id is None
            or self.service_variation_id is None
            or self.service_variation_version is None
        ):
            self.reject(
                "duration_minutes, team_member_id, service_variation_id and "
                "service_variation_version are required"
            )
        return self


class Booking(SquareModel):
    id: str | None = None
    version: int | None = None
    status: str | None = None
    all_day: bool | None = None
    appointment_segments: list[AppointmentSegment] | None = None
    customer_id: str | None = None
    customer_note: str | None = None
    location_id: str | None = None
    location_type: BookingLocationType | None = None
    seller_note: str | None = None
    source: str | None = None
    start_at: str | None = None
    transition_time_minutes: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


# =============================================================================
# Customers, cards, locations
# =============================================================================


class Card(SquareModel):
    id: str | None = None
    billing_address: Address | None = None
    bin: str | None = None
    card_brand: str | None = None
    card_type: str | None = None
    cardholder_name: str | None = None
    customer_id: str | None = None
    enabled: bool | None = None
    exp_month: int | None = Field(default=None, ge=1, le=12)
    exp_year: int | None = None
    fingerprint: str | None = None
    last_4: str | None = None
    merchant_id: str | None = None
    prepaid_type: str | None = None
    reference_id: str | None = None
    version: int | None = None


class Customer(SquareModel):
    id: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    company_name: str | None = None
    nickname: str | None = None
    email_address: str | None = None
    phone_number: str | None = None
    address: Address | None = None
    birthday: str | None = None
    reference_id: str | None = None
    note: str | None = None
    creation_source: str | None = None
    group_ids: list[str] | None = None
    segment_ids: list[str] | None = None
    version: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Location(SquareModel):
    id: str | None = None
    name: str | None = None
    business_name: str | None = None
    business_email: str | None = None
    description: str | None = None
    address: Address | None = None
    coordinates: Coordinates | None = None
    business_hours: BusinessHours | None = None
    timezone: str | None = None
    capabilities: list[str] | None = None
    status: LocationStatus | None = None
    type: LocationType | None = None
    country: str | None = None
    currency: Currency | None = None
    language_code: str | None = None
    merchant_id: str | None = None
    phone_number: str | None = None
    website_url: str | None = None
    created_at: str | None = None


# =============================================================================
# Orders
# =============================================================================


class OrderLineItem(SquareModel):
    uid: str | None = None
    quantity: str | None = None
    name: str | None = None
    note: str | None = None
    catalog_object_id: str | None = None
    catalog_version: int | None = None
    variation_name: str | None = None
    item_type: OrderLineItemItemType | None = None
    base_price_money: Money | None = None
    gross_sales_money: Money | None = None
    total_money: Money | None = None
    total_tax_money: Money | None = None
    total_discount_money: Money | None = None
    metadata: dict[str, str] | None = None

    setters = {
        "quantity": assign("quantity"),
        "name": assign("name"),
        "note": assign("note"),
        "catalog_object_id": assign("catalog_object_id"),
        "variation_name": assign("variation_name"),
        "item_type": assign("item_type"),
        "base_price_money": assign("base_price_money"),
    }

    def validate_body(self) -> Self:
        if self.quantity is None:
            self.reject("quantity is required")
        return self


def _set_phase(phase: OrderServiceChargeCalculationPhase):
    return constant("calculation_phase", phase)


class OrderServiceCharge(SquareModel):
    uid: str | None = None
    name: str | None = None
    catalog_object_id: str | None = None
    catalog_version: int | None = None
    percentage: str | None = None
    amount_money: Money | None = None
    applied_money: Money | None = None
    total_money: Money | None = None
    total_tax_money: Money | None = None
    calculation_phase: OrderServiceChargeCalculationPhase | None = None
    taxable: bool | None = None
    type: OrderServiceChargeType | None = None
    metadata: dict[str, str] | None = None

    setters = {
        "amount_money": assign("amount_money"),
        "name": assign("name"),
        "percentage": assign("percentage"),
        "catalog_object_id": assign("catalog_object_id"),
        "total_phase": _set_phase(OrderServiceChargeCalculationPhase.TOTAL_PHASE),
        "subtotal_phase": _set_phase(OrderServiceChargeCalculationPhase.SUBTOTAL_PHASE),
        "taxable": constant("taxable", True),
        "not_taxable": constant("taxable", False),
    }

    def validate_body(self) -> Self:
        if self.amount_money is None or self.name is None or self.calculation_phase is None:
            self.reject("amount_money, name and calculation_phase are required")
        return self


class OrderReward(SquareModel):
    id: str | None = None
    reward_tier_id: str | None = None

    setters = {
        "id": assign("id"),
        "reward_tier_id": assign("reward_tier_id"),
    }

    def validate_body(self) -> Self:
        if self.id is None or self.reward_tier_id is None:
            self.reject("id and reward_tier_id are required")
        return self


class Order(SquareModel):
    id: str | None = None
    location_id: str | None = None
    reference_id: str | None = None
    customer_id: str | None = None
    ticket_name: str | None = None
    state: OrderState | None = None
    version: int | None = None
    line_items: list[OrderLineItem] | None = None
    service_charges: list[OrderServiceCharge] | None = None
    rewards: list[OrderReward] | None = None
    metadata: dict[str, str] | None = None
    total_money: Money | None = None
    total_tax_money: Money | None = None
    total_discount_money: Money | None = None
    total_tip_money: Money | None = None
    total_service_charge_money: Money | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None

    setters = {
        "location_id": assign("location_id"),
        "version": assign("version"),
        "customer_id": assign("customer_id"),
        "reference_id": assign("reference_id"),
        "ticket_name": assign("ticket_name"),
        "state": assign("state"),
        "add_line_item": append("line_items"),
        "add_service_charge": append("service_charges"),
    }

    def validate_body(self) -> Self:
        if self.location_id is None or self.version is None:
            self.reject("location_id and version are required")
        return self


class SearchOrdersStateFilter(SquareModel):
    states: list[OrderState] = Field(default_factory=list)


class SearchOrdersDateTimeFilter(SquareModel):
    created_at: TimeRange | None = None
    updated_at: TimeRange | None = None
    closed_at: TimeRange | None = None


class SearchOrdersCustomerFilter(SquareModel):
    customer_ids: list[str] = Field(default_factory=list)


class SearchOrdersFilter(SquareModel):
    state_filter: SearchOrdersStateFilter | None = None
    date_time_filter: SearchOrdersDateTimeFilter | None = None
    customer_filter: SearchOrdersCustomerFilter | None = None


class SearchOrdersSort(SquareModel):
    sort_field: SearchOrdersSortField | None = None
    sort_order: SortOrder | None = None


def _sort_orders(order: SortOrder):
    def apply(query: "SearchOrdersQuery") -> None:
        if query.sort is None:
            query.sort = SearchOrdersSort(sort_field=SearchOrdersSortField.CREATED_AT)
        query.sort.sort_order = order

    return compute(apply)


class SearchOrdersQuery(SquareModel):
    filter: SearchOrdersFilter | None = None
    sort: SearchOrdersSort | None = None

    setters = {
        "filter": assign("filter"),
        "sort_ascending": _sort_orders(SortOrder.ASC),
        "sort_descending": _sort_orders(SortOrder.DESC),
        "sort_field": assign("sort.sort_field"),
    }


# =============================================================================
# Checkout
# =============================================================================


class CheckoutOptions(SquareModel):
    allow_tipping: bool | None = None
    ask_for_shipping_address: bool | None = None
    merchant_support_email: str | None = None
    redirect_url: str | None = None
    subscription_plan_id: str | None = None


class PrePopulatedData(SquareModel):
    buyer_address: Address | None = None
    buyer_email: str | None = None
    buyer_phone_number: str | None = None


class QuickPay(SquareModel):
    location_id: str | None = None
    name: str | None = None
    price_money: Money | None = None

    setters = {
        "location_id": assign("location_id"),
        "name": assign("name"),
        "price_money": assign("price_money"),
    }

    def validate_body(self) -> Self:
        if self.location_id is None or self.name is None or self.price_money is None:
            self.reject("location_id, name and price_money are required")
        return self


class PaymentLink(SquareModel):
    id: str | None = None
    version: int = 1
    description: str | None = None
    order_id: str | None = None
    payment_note: str | None = None
    checkout_options: CheckoutOptions | None = None
    pre_populated_data: PrePopulatedData | None = None
    url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CreateOrderRequest(SquareModel):
    idempotency_key: str | None = None
    order: Order | None = None


class ChargeRequestAdditionalRecipient(SquareModel):
    location_id: str
    description: str
    amount_money: Money


# =============================================================================
# Terminal
# =============================================================================


class TipSettings(SquareModel):
    allow_tipping: bool | None = None
    separate_tip_screen: bool | None = None
    custom_tip_field: bool | None = None
    tip_percentages: list[int] | None = None
    smart_tipping: bool | None = None


class DeviceCheckoutOptions(SquareModel):
    device_id: str | None = None
    collect_signature: bool | None = None
    show_itemized_cart: bool | None = None
    skip_receipt_screen: bool | None = None
    tip_settings: TipSettings | None = None

    setters = {
        "device_id": assign("device_id"),
        "collect_signature": constant("collect_signature", True),
        "show_itemized_cart": constant("show_itemized_cart", True),
        "skip_receipt_screen": constant("skip_receipt_screen", True),
        "tip_settings": assign("tip_settings"),
    }

    def validate_body(self) -> Self:
        if self.device_id is None:
            self.reject("device_id is required")
        return self


class PaymentOptions(SquareModel):
    autocomplete: bool | None = None
    delay_duration: str | None = None
    accept_partial_authorization: bool | None = None


class TerminalCheckout(SquareModel):
    id: str | None = None
    amount_money: Money | None = None
    device_options: DeviceCheckoutOptions | None = None
    customer_id: str | None = None
    deadline_duration: str | None = None
    note: str | None = None
    order_id: str | None = None
    payment_type: CheckoutOptionsPaymentType | None = None
    payment_options: PaymentOptions | None = None
    reference_id: str | None = None
    status: TerminalCheckoutStatus | None = None
    payment_ids: list[str] | None = None
    created_at: str | None = None
    updated_at: str | None = None


class TerminalQueryFilter(SquareModel):
    created_at: TimeRange | None = None
    device_id: str | None = None
    status: TerminalCheckoutStatus | None = None


class TerminalQuerySort(SquareModel):
    sort_order: SortOrder | None = None


class TerminalCheckoutQuery(SquareModel):
    filter: TerminalQueryFilter | None = None
    sort: TerminalQuerySort | None = None

    setters = {
        "sort_ascending": constant("sort.sort_order", SortOrder.ASC),
        "sort_descending": constant("sort.sort_order", SortOrder.DESC),
        "created_at": assign("filter.created_at"),
        "device_id": assign("filter.device_id"),
        "status": assign("filter.status"),
    }


class TerminalRefund(SquareModel):
    id: str | None = None
    amount_money: Money | None = None
    device_id: str | None = None
    payment_id: str | None = None
    reason: str | None = None
    deadline_duration: str | None = None
    refund_id: str | None = None
    order_id: str | None = None
    status: TerminalCheckoutStatus | None = None
    created_at: str | None = None
    updated_at: str | None = None


class TerminalRefundQuery(SquareModel):
    filter: TerminalQueryFilter | None = None
    sort: TerminalQuerySort | None = None

    setters = {
        "sort_ascending": constant("sort.sort_order", SortOrder.ASC),
        "sort_descending": constant("sort.sort_order", SortOrder.DESC),
        "created_at": assign("filter.created_at"),
        "device_id": assign("filter.device_id"),
        "pending": constant("filter.status", TerminalCheckoutStatus.PENDING),
        "in_progress": constant("filter.status", TerminalCheckoutStatus.IN_PROGRESS),
        "cancel_requested": constant("filter.status", TerminalCheckoutStatus.CANCEL_REQUESTED),
        "canceled": constant("filter.status", TerminalCheckoutStatus.CANCELED),
        "completed": constant("filter.status", TerminalCheckoutStatus.COMPLETED),
    }


# =============================================================================
# Inventory
# =============================================================================


class InventoryPhysicalCount(SquareModel):
    id: str | None = None
    reference_id: str | None = None
    catalog_object_id: str | None = None
    catalog_object_type: str | None = None
    state: InventoryState | None = None
    location_id: str | None = None
    quantity: str | None = None
    occurred_at: str | None = None
    created_at: str | None = None

    setters = {
        "reference_id": assign("reference_id"),
        "catalog_object_id": assign("catalog_object_id"),
        "state": assign("state"),
        "location_id": assign("location_id"),
        "quantity": assign("quantity"),
        "occurred_at": assign("occurred_at"),
    }

    def validate_body(self) -> Self:
        if (
            self.catalog_object_id is None
            or self.location_id is None
            or self.quantity is None
            or self.state is None
            or self.occurred_at is None
        ):
            self.reject(
                "catalog_object_id, location_id, quantity, state and occurred_at are required"
            )
        return self


class InventoryAdjustment(SquareModel):
    id: str | None = None
    reference_id: str | None = None
    from_state: InventoryState | None = None
    to_state: InventoryState | None = None
    location_id: str | None = None
    catalog_object_id: str | None = None
    catalog_object_type: str | None = None
    quantity: str | None = None
    occurred_at: str | None = None
    created_at: str | None = None


class InventoryTransfer(SquareModel):
    id: str | None = None
    reference_id: str | None = None
    state: InventoryState | None = None
    from_location_id: str | None = None
    to_location_id: str | None = None
    catalog_object_id: str | None = None
    catalog_object_type: str | None = None
    quantity: str | None = None
    occurred_at: str | None = None
    created_at: str | None = None


_CHANGE_FIELDS = {
    InventoryChangeType.PHYSICAL_COUNT: "physical_count",
    InventoryChangeType.ADJUSTMENT: "adjustment",
    InventoryChangeType.TRANSFER: "transfer",
}


class InventoryChange(SquareModel):
    type: InventoryChangeType | None = None
    physical_count: InventoryPhysicalCount | None = None
    adjustment: InventoryAdjustment | None = None
    transfer: InventoryTransfer | None = None
    measurement_unit_id: str | None = None

    setters = {
        "type": assign("type"),
        "physical_count": assign("physical_count"),
        "adjustment": assign("adjustment"),
        "transfer": assign("transfer"),
        "measurement_unit_id": assign("measurement_unit_id"),
    }

    def validate_body(self) -> Self:
        if self.type is None:
            self.reject("type is required")
        if getattr(self, _CHANGE_FIELDS[self.type]) is None:
            self.reject(f"{_CHANGE_FIELDS[self.type]} is required for {self.type.value} changes")
        return self
