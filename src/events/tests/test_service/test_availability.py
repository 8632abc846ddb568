import typing as t
from datetime import timedelta

import pytest
from django.utils import timezone

from events.models import Event, Ticket, TicketCategory, TicketReservation
from events.service.availability import EventAvailability

pytestmark = pytest.mark.django_db


class TestEventAvailability:
    def test_unbounded_share_seats_left_by_bounded_quotas(
        self, event: Event, category: TicketCategory, bounded_category: TicketCategory
    ) -> None:
        availability = EventAvailability(event)

        assert availability.for_category(bounded_category) == 10
        assert availability.for_category(category) == 90
        assert availability.shared_pool == 90

    def test_sold_tickets_are_subtracted(
        self,
        event: Event,
        category: TicketCategory,
        bounded_category: TicketCategory,
        reservation_factory: t.Callable[..., TicketReservation],
    ) -> None:
        reservation_factory(event, category, 30)
        reservation_factory(event, bounded_category, 4)

        availability = EventAvailability(event)

        assert availability.for_category(category) == 60
        assert availability.for_category(bounded_category) == 6

    def test_released_tickets_free_their_seat(
        self,
        event: Event,
        bounded_category: TicketCategory,
        reservation_factory: t.Callable[..., TicketReservation],
    ) -> None:
        reservation_factory(event, bounded_category, 4, ticket_status=Ticket.Status.RELEASED)
        reservation_factory(event, bounded_category, 2, ticket_status=Ticket.Status.CANCELLED)
        reservation_factory(event, bounded_category, 1, ticket_status=Ticket.Status.PENDING)

        assert EventAvailability(event).for_category(bounded_category) == 9

    def test_expired_pending_reservation_frees_its_seats(
        self,
        event: Event,
        bounded_category: TicketCategory,
        reservation_factory: t.Callable[..., TicketReservation],
    ) -> None:
        pending = TicketReservation.Status.PENDING
        reservation_factory(event, bounded_category, 3, status=pending, ticket_status=Ticket.Status.PENDING)
        reservation_factory(
            event,
            bounded_category,
            4,
            status=pending,
            ticket_status=Ticket.Status.PENDING,
            expires_at=timezone.now() - timedelta(minutes=1),
        )
        reservation_factory(event, bounded_category, 2, status=TicketReservation.Status.EXPIRED)

        assert EventAvailability(event).for_category(bounded_category) == 7

    def test_inactive_category_has_no_seats(self, event: Event, bounded_category: TicketCategory) -> None:
        bounded_category.status = TicketCategory.Status.NOT_ACTIVE
        bounded_category.save()

        assert EventAvailability(event).for_category(bounded_category) == 0

    def test_inactive_bounded_quota_returns_to_shared_pool(
        self, event: Event, category: TicketCategory, bounded_category: TicketCategory
    ) -> None:
        bounded_category.status = TicketCategory.Status.NOT_ACTIVE
        bounded_category.save()

        assert EventAvailability(event).for_category(category) == 100

    def test_oversold_quota_is_clamped(
        self,
        event: Event,
        bounded_category: TicketCategory,
        reservation_factory: t.Callable[..., TicketReservation],
    ) -> None:
        reservation_factory(event, bounded_category, 12)

        assert EventAvailability(event).for_category(bounded_category) == 0

    def test_no_seats_available(
        self,
        event: Event,
        category: TicketCategory,
        bounded_category: TicketCategory,
        reservation_factory: t.Callable[..., TicketReservation],
    ) -> None:
        assert not EventAvailability(event).no_seats_available()

        reservation_factory(event, category, 90)
        reservation_factory(event, bounded_category, 10)

        assert EventAvailability(event).no_seats_available()
