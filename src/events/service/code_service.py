"""Validation of a code entered on the event page."""

from common.schema import ErrorDescriptor, ValidatedResponse
from events.models import Event, PromoCodeDiscount
from events.schema import EventCodeSchema

from .code_resolver import CodeCheckResult, DiscountCode, SpecialPriceCode, resolve_code


def describe_code(raw_code: str, result: CodeCheckResult) -> EventCodeSchema:
    """Describe an accepted code. Rejected and empty codes carry no type."""
    if not result.success:
        return EventCodeSchema(code=raw_code)
    match result.code:
        case SpecialPriceCode():
            return EventCodeSchema(
                code=raw_code, type="SPECIAL_PRICE", discount_type=PromoCodeDiscount.DiscountType.NONE
            )
        case DiscountCode(discount=discount):
            if discount.discount_type == PromoCodeDiscount.DiscountType.FIXED_AMOUNT:
                amount = str(discount.formatted_discount_amount)
            else:
                amount = str(discount.discount_amount)
            return EventCodeSchema(
                code=raw_code,
                type="ACCESS" if discount.code_type == PromoCodeDiscount.CodeType.ACCESS else "DISCOUNT",
                discount_type=PromoCodeDiscount.DiscountType(discount.discount_type),
                discount_amount=amount,
            )
        case _:
            return EventCodeSchema(code=raw_code)


def validate_code(event: Event, raw_code: str) -> ValidatedResponse[EventCodeSchema]:
    result = resolve_code(event, raw_code)
    event_code = describe_code(raw_code, result)
    if result.error is not None:
        return ValidatedResponse[EventCodeSchema].failed(
            [ErrorDescriptor(field_name=result.error.field_name, code=result.error.code)], value=event_code
        )
    return ValidatedResponse[EventCodeSchema].ok(event_code)
