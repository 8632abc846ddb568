"""Ticket category listing schemas."""

from decimal import Decimal
from uuid import UUID

from ninja import Schema
from pydantic import AwareDatetime


class TicketCategorySchema(Schema):
    id: UUID
    name: str
    description: str
    price: Decimal
    final_price: Decimal
    discount_applied: bool
    access_restricted: bool
    bounded: bool
    max_tickets: int
    available_tickets: int
    sold_out: bool
    expired: bool
    sale_in_future: bool
    inception: AwareDatetime | None = None
    expiration: AwareDatetime | None = None


class WaitingListCategorySchema(Schema):
    id: UUID
    name: str


class ItemsByCategorySchema(Schema):
    """Categories purchasable with the given code, along with waiting list hints."""

    ticket_categories: list[TicketCategorySchema]
    display_waiting_queue_form: bool
    pre_sales: bool
    waiting_list_categories: list[WaitingListCategorySchema]
