from uuid import UUID

from ninja import Schema
from pydantic import Field

from common.schema import StrippedString


class TicketSelectionSchema(Schema):
    ticket_category_id: UUID
    amount: int = Field(0, ge=0)


class ReservationPayloadSchema(Schema):
    promo_code: StrippedString | None = None
    reservation: list[TicketSelectionSchema] = Field(default_factory=list)
    lang: str = Field("en", max_length=10)
