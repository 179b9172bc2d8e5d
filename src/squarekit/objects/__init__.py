"""Square API objects and enumerations."""

from squarekit.objects.enums import (
    Currency,
    SortOrder,
    SearchOrdersSortField,
    CustomerSortField,
    OrderServiceChargeCalculationPhase,
    OrderServiceChargeType,
    OrderLineItemItemType,
    OrderState,
    InventoryChangeType,
    InventoryState,
    CatalogObjectType,
    CustomerCreationSource,
    CustomerInclusionExclusion,
    BookingLocationType,
    LocationStatus,
    LocationType,
    TerminalCheckoutStatus,
    CheckoutOptionsPaymentType,
)
from squarekit.objects.models import (
    Money,
    Address,
    Coordinates,
    BusinessHoursPeriod,
    BusinessHours,
    TimeRange,
    AppointmentSegment,
    Booking,
    Card,
    Customer,
    Location,
    OrderLineItem,
    OrderServiceCharge,
    OrderReward,
    Order,
    SearchOrdersStateFilter,
    SearchOrdersDateTimeFilter,
    SearchOrdersCustomerFilter,
    SearchOrdersFilter,
    SearchOrdersSort,
    SearchOrdersQuery,
    CheckoutOptions,
    PrePopulatedData,
    QuickPay,
    PaymentLink,
    CreateOrderRequest,
    ChargeRequestAdditionalRecipient,
    TipSettings,
    DeviceCheckoutOptions,
    PaymentOptions,
    TerminalCheckout,
    TerminalQueryFilter,
    TerminalQuerySort,
    TerminalCheckoutQuery,
    TerminalRefund,
    TerminalRefundQuery,
    InventoryPhysicalCount,
    InventoryAdjustment,
    InventoryTransfer,
    InventoryChange,
)

__all__ = [
    "Address",
    "AppointmentSegment",
    "Booking",
    "BookingLocationType",
    "BusinessHours",
    "BusinessHoursPeriod",
    "Card",
    "CatalogObjectType",
    "ChargeRequestAdditionalRecipient",
    "CheckoutOptions",
    "CheckoutOptionsPaymentType",
    "Coordinates",
    "CreateOrderRequest",
    "Currency",
    "Customer",
    "CustomerCreationSource",
    "CustomerInclusionExclusion",
    "CustomerSortField",
    "DeviceCheckoutOptions",
    "InventoryAdjustment",
    "InventoryChange",
    "InventoryChangeType",
    "InventoryPhysicalCount",
    "InventoryState",
    "InventoryTransfer",
    "Location",
    "LocationStatus",
    "LocationType",
    "Money",
    "Order",
    "OrderLineItem",
    "OrderLineItemItemType",
    "OrderReward",
    "OrderServiceCharge",
    "OrderServiceChargeCalculationPhase",
    "OrderServiceChargeType",
    "OrderState",
    "PaymentLink",
    "PaymentOptions",
    "PrePopulatedData",
    "QuickPay",
    "SearchOrdersCustomerFilter",
    "SearchOrdersDateTimeFilter",
    "SearchOrdersFilter",
    "SearchOrdersQuery",
    "SearchOrdersSort",
    "SearchOrdersSortField",
    "SearchOrdersStateFilter",
    "SortOrder",
    "TerminalCheckout",
    "TerminalCheckoutQuery",
    "TerminalCheckoutStatus",
    "TerminalQueryFilter",
    "TerminalQuerySort",
    "TerminalRefund",
    "TerminalRefundQuery",
    "TimeRange",
    "TipSettings",
]
