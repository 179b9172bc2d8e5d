"""Enumerations used in Square objects."""

from enum import Enum


class Currency(str, Enum):
    """ISO 4217 currency of a Money amount."""

    GBP = "GBP"
    USD = "USD"
    EUR = "EUR"
    JPY = "JPY"
    SGD = "SGD"
    AUD = "AUD"
    CAD = "CAD"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class SearchOrdersSortField(str, Enum):
    CREATED_AT = "CREATED_AT"
    UPDATED_AT = "UPDATED_AT"
    CLOSED_AT = "CLOSED_AT"


class CustomerSortField(str, Enum):
    DEFAULT = "DEFAULT"
    CREATED_AT = "CREATED_AT"


class OrderServiceChargeCalculationPhase(str, Enum):
    SUBTOTAL_PHASE = "SUBTOTAL_PHASE"
    TOTAL_PHASE = "TOTAL_PHASE"


class OrderServiceChargeType(str, Enum):
    AUTO_GRATUITY = "AUTO_GRATUITY"
    CUSTOM = "CUSTOM"


class OrderLineItemItemType(str, Enum):
    ITEM = "ITEM"
    CUSTOM_AMOUNT = "CUSTOM_AMOUNT"
    GIFT_CARD = "GIFT_CARD"


class OrderState(str, Enum):
    OPEN = "OPEN"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"
    DRAFT = "DRAFT"


class InventoryChangeType(str, Enum):
    PHYSICAL_COUNT = "PHYSICAL_COUNT"
    ADJUSTMENT = "ADJUSTMENT"
    TRANSFER = "TRANSFER"


class InventoryState(str, Enum):
    CUSTOM = "CUSTOM"
    IN_STOCK = "IN_STOCK"
    SOLD = "SOLD"
    RETURNED_BY_CUSTOMER = "RETURNED_BY_CUSTOMER"
    RESERVED_FOR_SALE = "RESERVED_FOR_SALE"
    SOLD_ONLINE = "SOLD_ONLINE"
    ORDERED_FROM_VENDOR = "ORDERED_FROM_VENDOR"
    RECEIVED_FROM_VENDOR = "RECEIVED_FROM_VENDOR"
    IN_TRANSIT_TO = "IN_TRANSIT_TO"
    NONE = "NONE"
    WASTE = "WASTE"
    UNLINKED_RETURN = "UNLINKED_RETURN"
    COMPOSED = "COMPOSED"
    DECOMPOSED = "DECOMPOSED"


class CatalogObjectType(str, Enum):
    ITEM = "ITEM"
    IMAGE = "IMAGE"
    CATEGORY = "CATEGORY"
    ITEM_VARIATION = "ITEM_VARIATION"
    TAX = "TAX"
    DISCOUNT = "DISCOUNT"
    MODIFIER_LIST = "MODIFIER_LIST"
    MODIFIER = "MODIFIER"
    PRICING_RULE = "PRICING_RULE"
    PRODUCT_SET = "PRODUCT_SET"
    TIME_PERIOD = "TIME_PERIOD"
    MEASUREMENT_UNIT = "MEASUREMENT_UNIT"
    SUBSCRIPTION_PLAN = "SUBSCRIPTION_PLAN"
    ITEM_OPTION = "ITEM_OPTION"
    ITEM_OPTION_VAL = "ITEM_OPTION_VAL"
    CUSTOM_ATTRIBUTE_DEFINITION = "CUSTOM_ATTRIBUTE_DEFINITION"
    QUICK_AMOUNTS_SETTINGS = "QUICK_AMOUNTS_SETTINGS"


class CustomerCreationSource(str, Enum):
    OTHER = "OTHER"
    APPOINTMENTS = "APPOINTMENTS"
    COUPON = "COUPON"
    DELETION_RECOVERY = "DELETION_RECOVERY"
    DIRECTORY = "DIRECTORY"
    EGIFTING = "EGIFTING"
    EMAIL_COLLECTION = "EMAIL_COLLECTION"
    FEEDBACK = "FEEDBACK"
    IMPORT = "IMPORT"
    INVOICES = "INVOICES"
    LOYALTY = "LOYALTY"
    MARKETING = "MARKETING"
    MERGE = "MERGE"
    ONLINE_STORE = "ONLINE_STORE"
    INSTANT_PROFILE = "INSTANT_PROFILE"
    TERMINAL = "TERMINAL"
    THIRD_PARTY = "THIRD_PARTY"
    THIRD_PARTY_IMPORT = "THIRD_PARTY_IMPORT"
    UNMERGE_RECOVERY = "UNMERGE_RECOVERY"


class CustomerInclusionExclusion(str, Enum):
    INCLUDE = "INCLUDE"
    EXCLUDE = "EXCLUDE"


class BookingLocationType(str, Enum):
    BUSINESS_LOCATION = "BUSINESS_LOCATION"
    CUSTOMER_LOCATION = "CUSTOMER_LOCATION"
    PHONE = "PHONE"


class LocationStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class LocationType(str, Enum):
    PHYSICAL = "PHYSICAL"
    MOBILE = "MOBILE"


class TerminalCheckoutStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    CANCEL_REQUESTED = "CANCEL_REQUESTED"
    CANCELED = "CANCELED"
    COMPLETED = "COMPLETED"


class CheckoutOptionsPaymentType(str, Enum):
    CARD_PRESENT = "CARD_PRESENT"
    MANUAL_CARD_ENTRY = "MANUAL_CARD_ENTRY"
    FELICA_ID = "FELICA_ID"
    FELICA_QUICPAY = "FELICA_QUICPAY"
    FELICA_TRANSPORTATION_GROUP = "FELICA_TRANSPORTATION_GROUP"
    FELICA_ALL = "FELICA_ALL"
    PAYPAY = "PAYPAY"
