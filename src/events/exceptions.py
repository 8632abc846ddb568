from events.service.code_resolver.enums import ErrorCode


class ReservationError(Exception):
    """Base class of the errors aborting a reservation. Each maps to a client error code."""

    error_code: ErrorCode


class NotEnoughTicketsError(ReservationError):
    """Raised when fewer seats are left than requested."""

    error_code = ErrorCode.NOT_ENOUGH_TICKETS


class MissingSpecialPriceTokenError(ReservationError):
    """Raised when a restricted category is requested without a code unlocking it."""

    error_code = ErrorCode.ACCESS_RESTRICTED


class InvalidSpecialPriceTokenError(ReservationError):
    """Raised when the special price is no longer free once locked."""

    error_code = ErrorCode.CODE_NOT_FOUND


class TooManyTicketsForDiscountCodeError(ReservationError):
    """Raised when the reservation would push a discount over its maximum usage."""

    error_code = ErrorCode.DISCOUNT_CODE_USAGE_EXCEEDED
