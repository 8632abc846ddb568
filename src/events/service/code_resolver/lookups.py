"""Data access used by the code resolver.

The resolver depends on the CodeLookup protocol only, so rules can be exercised
against in-memory fakes.
"""

import typing as t
import zoneinfo
from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from django.db.models import Case, IntegerField, Value, When
from django.utils import timezone

from events.models import PromoCodeDiscount, SpecialPrice, Ticket, TicketCategory, TicketReservation


class CodeLookup(t.Protocol):
    """Read-only queries needed to resolve a code."""

    def find_special_price_by_code(self, code: str) -> SpecialPrice | None:
        """Find a special price by its exact code."""
        ...

    def find_promo_code_discount(self, event_id: UUID, organization_id: UUID, code: str) -> PromoCodeDiscount | None:
        """Find a promo code bound to the event, or else an organization-wide one."""
        ...

    def is_special_price_free(self, special_price: SpecialPrice) -> bool:
        """Whether the special price can be used by a new reservation."""
        ...

    def is_category_active_and_exists(self, category_id: UUID, event_id: UUID) -> bool:
        """Whether the category exists, belongs to the event and is active."""
        ...

    def count_confirmed_usage(self, discount_id: UUID, restricted_category_ids: Iterable[UUID] | None = None) -> int:
        """Count tickets of confirmed reservations made with the discount.

        Args:
            discount_id: The discount to count.
            restricted_category_ids: When not empty, only tickets of these categories count.
        """
        ...

    def current_time(self, tz: zoneinfo.ZoneInfo) -> datetime:
        """The current time in the given timezone."""
        ...


class DjangoCodeLookup:
    """CodeLookup backed by the ORM."""

    def find_special_price_by_code(self, code: str) -> SpecialPrice | None:
        return SpecialPrice.objects.select_related("ticket_category").filter(code=code).first()

    def is_special_price_free(self, special_price: SpecialPrice) -> bool:
        if special_price.status == SpecialPrice.Status.FREE:
            return True
        if special_price.status != SpecialPrice.Status.PENDING:
            return False
        # Held by reservations that all lapsed without being paid.
        tickets = Ticket.objects.filter(special_price=special_price)
        return tickets.exists() and not tickets.not_released().exists()

    def find_promo_code_discount(self, event_id: UUID, organization_id: UUID, code: str) -> PromoCodeDiscount | None:
        return (
            PromoCodeDiscount.objects.for_event_or_organization(event_id, organization_id)
            .filter(promo_code=code)
            .select_related("hidden_category")
            .prefetch_related("categories")
            .annotate(
                event_specific=Case(
                    When(event_id=event_id, then=Value(0)), default=Value(1), output_field=IntegerField()
                )
            )
            .order_by("event_specific")
            .first()
        )

    def is_category_active_and_exists(self, category_id: UUID, event_id: UUID) -> bool:
        return TicketCategory.objects.active().filter(pk=category_id, event_id=event_id).exists()

    def count_confirmed_usage(self, discount_id: UUID, restricted_category_ids: Iterable[UUID] | None = None) -> int:
        qs = Ticket.objects.filter(
            reservation__promo_code_discount_id=discount_id,
            reservation__status__in=TicketReservation.CONFIRMED_STATUSES,
        )
        category_ids = list(restricted_category_ids or [])
        if category_ids:
            qs = qs.filter(category_id__in=category_ids)
        return qs.count()

    def current_time(self, tz: zoneinfo.ZoneInfo) -> datetime:
        return timezone.localtime(timezone.now(), tz)
