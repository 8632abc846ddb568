import typing as t

from ninja import Schema

from events.models import PromoCodeDiscount


class EventCodeSchema(Schema):
    """A code entered for an event, as understood by the backend.

    ``type`` and the discount fields are null when the code is rejected or empty.
    """

    code: str
    type: t.Literal["SPECIAL_PRICE", "ACCESS", "DISCOUNT"] | None = None
    discount_type: PromoCodeDiscount.DiscountType | None = None
    discount_amount: str | None = None
