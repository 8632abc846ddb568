"""Listing of the ticket categories purchasable with an optional code."""

from datetime import datetime

from events.models import ConfigurationKey, Event, PromoCodeDiscount, SpecialPrice, TicketCategory
from events.schema import ItemsByCategorySchema, TicketCategorySchema, WaitingListCategorySchema

from . import configuration_service
from .availability import EventAvailability
from .code_resolver import (
    CodeCheckResult,
    CodeLookup,
    DjangoCodeLookup,
    compute_max_tickets,
    resolve_code,
    should_apply_discount,
    should_display_restricted_category,
)


def is_visible(
    category: TicketCategory, special_price: SpecialPrice | None, discount: PromoCodeDiscount | None
) -> bool:
    """Restricted categories are only listed when the code unlocks them."""
    return not category.access_restricted or should_display_restricted_category(special_price, category, discount)


def is_pre_sales(categories: list[TicketCategory], now: datetime) -> bool:
    return bool(categories) and all(c.is_sale_in_future(now) for c in categories)


def display_waiting_queue_form(
    event: Event, categories: list[TicketCategory], availability: EventAvailability, now: datetime
) -> bool:
    """Whether visitors may join the waiting list.

    During pre-sales this needs pre-registration enabled. Otherwise the event
    must be sold out while at least one category is still within its sales window.
    """
    if not categories or event.end <= now:
        return False
    if not configuration_service.get_bool(ConfigurationKey.ENABLE_WAITING_QUEUE, event=event):
        return False
    if is_pre_sales(categories, now):
        return configuration_service.get_bool(ConfigurationKey.ENABLE_PRE_REGISTRATION, event=event)
    return any(not c.is_expired(now) for c in categories) and availability.no_seats_available()


def build_category(
    category: TicketCategory,
    code: CodeCheckResult,
    availability: EventAvailability,
    now: datetime,
    lookup: CodeLookup,
) -> TicketCategorySchema:
    special_price = code.special_price
    discount = code.discount if code.discount and should_apply_discount(code.discount, category) else None
    default_max = configuration_service.get_int(
        ConfigurationKey.MAX_AMOUNT_OF_TICKETS_BY_RESERVATION, event=availability.event, category=category
    )
    available = availability.for_category(category)
    max_tickets = compute_max_tickets(
        category,
        discount,
        special_price_used=special_price is not None,
        default_max=default_max,
        lookup=lookup,
    )

    # A rejected code still unlocks and caps categories but never lowers a price.
    if not code.success:
        final_price = category.price
    elif special_price is not None and special_price.ticket_category_id == category.pk:
        final_price = special_price.price
    elif discount is not None:
        final_price = discount.discounted_price(category.price)
    else:
        final_price = category.price

    return TicketCategorySchema(
        id=category.pk,
        name=category.name,
        description=category.description,
        price=category.price,
        final_price=final_price,
        discount_applied=final_price != category.price,
        access_restricted=category.access_restricted,
        bounded=category.bounded,
        max_tickets=min(max_tickets, available),
        available_tickets=available,
        sold_out=available == 0,
        expired=category.is_expired(now),
        sale_in_future=category.is_sale_in_future(now),
        inception=category.inception,
        expiration=category.expiration,
    )


def list_ticket_categories(event: Event, raw_code: str | None = None) -> ItemsByCategorySchema:
    """Build the category listing of an event as seen with ``raw_code``.

    A rejected code that matched a special price or promo code keeps
    controlling which categories are listed and how many tickets each allows.
    """
    lookup = DjangoCodeLookup()
    code = resolve_code(event, raw_code, lookup=lookup)

    now = event.now()
    categories = list(event.ticket_categories.active())
    availability = EventAvailability(event)
    visible = [c for c in categories if is_visible(c, code.special_price, code.discount)]

    return ItemsByCategorySchema(
        ticket_categories=[
            build_category(c, code, availability, now, lookup) for c in visible if not c.is_expired(now)
        ],
        display_waiting_queue_form=display_waiting_queue_form(event, visible, availability, now),
        pre_sales=is_pre_sales(visible, now)
        and configuration_service.get_bool(ConfigurationKey.ENABLE_PRE_REGISTRATION, event=event),
        waiting_list_categories=[
            WaitingListCategorySchema(id=c.pk, name=c.name)
            for c in visible
            if not c.is_expired(now) and not c.bounded
        ],
    )
