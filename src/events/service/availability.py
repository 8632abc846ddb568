"""Seat availability of an event's ticket categories.

Bounded categories sell from their own quota. Unbounded categories share the
seats of the event that are not allocated to a bounded quota.
"""

from uuid import UUID

from django.db.models import Count

from events.models import Event, Ticket, TicketCategory


class EventAvailability:
    """Snapshot of the seats still available for an event.

    Counts are loaded once on construction, so a snapshot taken inside a
    transaction holding the event lock stays consistent until it commits.
    """

    def __init__(self, event: Event, categories: list[TicketCategory] | None = None) -> None:
        self.event = event
        self.categories = categories if categories is not None else list(event.ticket_categories.all())
        self.taken: dict[UUID, int] = dict(
            Ticket.objects.not_released()
            .filter(event=event)
            .values("category_id")
            .annotate(count=Count("id"))
            .values_list("category_id", "count")
        )
        active = [c for c in self.categories if c.status == TicketCategory.Status.ACTIVE]
        bounded_quota = sum(c.max_tickets for c in active if c.bounded)
        taken_by_unbounded = sum(self.taken.get(c.pk, 0) for c in self.categories if not c.bounded)
        self.shared_pool = max(0, event.available_seats - bounded_quota - taken_by_unbounded)

    def for_category(self, category: TicketCategory) -> int:
        if category.status != TicketCategory.Status.ACTIVE:
            return 0
        if category.bounded:
            return max(0, category.max_tickets - self.taken.get(category.pk, 0))
        return self.shared_pool

    def no_seats_available(self) -> bool:
        return all(self.for_category(c) == 0 for c in self.categories)
