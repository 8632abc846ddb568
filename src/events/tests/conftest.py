from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from events.models import (
    Event,
    Organization,
    PromoCodeDiscount,
    SpecialPrice,
    Ticket,
    TicketCategory,
    TicketReservation,
)


@pytest.fixture
def organization() -> Organization:
    return Organization.objects.create(name="Org", slug="org", email="tickets@org.test")


@pytest.fixture
def event(organization: Organization) -> Event:
    return Event.objects.create(
        organization=organization,
        name="Event",
        slug="event",
        status=Event.EventStatus.PUBLIC,
        timezone="Europe/Zurich",
        begin=timezone.now() + timedelta(days=30),
        end=timezone.now() + timedelta(days=30, hours=4),
        available_seats=100,
        currency="CHF",
    )


@pytest.fixture
def category(event: Event) -> TicketCategory:
    """An unbounded public category."""
    return TicketCategory.objects.create(event=event, name="Standard", price=Decimal("50.00"), ordinal=1)


@pytest.fixture
def bounded_category(event: Event) -> TicketCategory:
    return TicketCategory.objects.create(
        event=event, name="Balcony", price=Decimal("80.00"), bounded=True, max_tickets=10, ordinal=2
    )


@pytest.fixture
def restricted_category(event: Event) -> TicketCategory:
    return TicketCategory.objects.create(
        event=event,
        name="Backstage",
        price=Decimal("100.00"),
        access_restricted=True,
        bounded=True,
        max_tickets=5,
        ordinal=3,
    )


@pytest.fixture
def special_price(restricted_category: TicketCategory) -> SpecialPrice:
    return SpecialPrice.objects.create(code="VIP-0001", ticket_category=restricted_category, price=Decimal("0.00"))


@pytest.fixture
def promo_code(organization: Organization, event: Event) -> PromoCodeDiscount:
    """A 10% discount on every category of the event."""
    return PromoCodeDiscount.objects.create(
        promo_code="SAVE10",
        organization=organization,
        event=event,
        discount_type=PromoCodeDiscount.DiscountType.PERCENTAGE,
        discount_amount=10,
    )


@pytest.fixture
def access_code(organization: Organization, event: Event, restricted_category: TicketCategory) -> PromoCodeDiscount:
    """Unlocks the restricted category with CHF 20 off."""
    return PromoCodeDiscount.objects.create(
        promo_code="BACKSTAGE",
        organization=organization,
        event=event,
        code_type=PromoCodeDiscount.CodeType.ACCESS,
        discount_type=PromoCodeDiscount.DiscountType.FIXED_AMOUNT,
        discount_amount=2000,
        hidden_category=restricted_category,
    )


class ReservationFactory:
    """Creates reservations holding tickets of a single category."""

    def __call__(
        self,
        event: Event,
        category: TicketCategory,
        amount: int,
        *,
        status: str = TicketReservation.Status.COMPLETE,
        discount: PromoCodeDiscount | None = None,
        ticket_status: str = Ticket.Status.ACQUIRED,
        expires_at: datetime | None = None,
    ) -> TicketReservation:
        reservation = TicketReservation.objects.create(
            event=event,
            status=status,
            expires_at=expires_at or timezone.now() + timedelta(minutes=25),
            promo_code_discount=discount,
        )
        for _ in range(amount):
            Ticket.objects.create(
                event=event,
                category=category,
                reservation=reservation,
                status=ticket_status,
                final_price=category.price,
            )
        return reservation


@pytest.fixture
def reservation_factory() -> ReservationFactory:
    return ReservationFactory()
