"""Error codes and field names reported to clients.

Codes are translation keys resolved by the frontend, so their values must not change.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    CODE_NOT_FOUND = "error.STEP_1_CODE_NOT_FOUND"
    ACCESS_RESTRICTED = "error.STEP_1_ACCESS_RESTRICTED"
    NOT_ENOUGH_TICKETS = "error.STEP_1_NOT_ENOUGH_TICKETS"
    SELECT_AT_LEAST_ONE = "error.STEP_1_SELECT_AT_LEAST_ONE"
    OVER_MAXIMUM = "error.STEP_1_OVER_MAXIMUM"
    CATEGORY_NOT_SALEABLE = "error.STEP_1_TICKET_CATEGORY_MUST_BE_SALEABLE"
    DISCOUNT_CODE_USAGE_EXCEEDED = "error.STEP_2_DISCOUNT_CODE_USAGE_EXCEEDED"
    FIRST_NAME_REQUIRED = "error.firstname"
    LAST_NAME_REQUIRED = "error.lastname"
    EMAIL_INVALID = "error.email"
    SELECTED_CATEGORY_INVALID = "error.selectedcategory"


class ErrorField(StrEnum):
    PROMO_CODE = "promoCode"
    RESERVATION = "reservation"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    SELECTED_CATEGORY = "selectedCategory"


class RejectionReason(StrEnum):
    """Why a code was rejected. Only used for logging, clients always see CODE_NOT_FOUND."""

    CATEGORY_NOT_ACTIVE = "category_not_active"
    SPECIAL_PRICE_NOT_FREE = "special_price_not_free"
    OUTSIDE_VALIDITY_WINDOW = "outside_validity_window"
    USAGE_EXCEEDED = "usage_exceeded"
    UNKNOWN_CODE = "unknown_code"
