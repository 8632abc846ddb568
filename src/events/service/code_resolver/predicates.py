"""Pure helpers deciding how a resolved code affects a ticket category."""

from events.models import PromoCodeDiscount, SpecialPrice, TicketCategory

from .lookups import CodeLookup, DjangoCodeLookup


def should_display_restricted_category(
    special_price: SpecialPrice | None,
    category: TicketCategory,
    discount: PromoCodeDiscount | None,
) -> bool:
    """Whether a restricted category is unlocked by the given code."""
    if discount is not None and discount.code_type == PromoCodeDiscount.CodeType.ACCESS:
        return discount.hidden_category_id == category.pk
    if special_price is not None:
        return special_price.ticket_category_id == category.pk
    return False


def should_apply_discount(discount: PromoCodeDiscount, category: TicketCategory) -> bool:
    """Whether the discount lowers the price of the category."""
    if discount.code_type == PromoCodeDiscount.CodeType.DISCOUNT:
        category_ids = discount.category_ids
        return not category_ids or category.pk in category_ids
    return category.access_restricted and discount.hidden_category_id == category.pk


def compute_max_tickets(
    category: TicketCategory,
    discount: PromoCodeDiscount | None,
    special_price_used: bool,
    default_max: int,
    lookup: CodeLookup | None = None,
) -> int:
    """Maximum number of tickets of the category purchasable in one reservation.

    Args:
        category: The category being purchased.
        discount: The resolved discount, if any. Ignored when it does not apply to the category.
        special_price_used: Whether a special price unlocks the purchase.
        default_max: The configured per-reservation maximum.
        lookup: Used to count the discount's confirmed usage.
    """
    if special_price_used:
        return min(1, default_max)
    if discount is not None and discount.max_usage is not None and should_apply_discount(discount, category):
        lookup = lookup or DjangoCodeLookup()
        usage = lookup.count_confirmed_usage(discount.pk, discount.category_ids)
        return max(0, discount.max_usage - usage)
    return default_max
