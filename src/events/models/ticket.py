import typing as t
from datetime import datetime

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone

from common.models import TimeStampedModel

from .event import Event


class TicketCategoryQuerySet(models.QuerySet["TicketCategory"]):
    def active(self) -> t.Self:
        """Categories currently enabled for sale."""
        return self.filter(status=TicketCategory.Status.ACTIVE)

    def access_restricted(self) -> t.Self:
        return self.filter(access_restricted=True)


class TicketCategory(TimeStampedModel):
    """A kind of ticket sold for an event.

    Access-restricted categories are hidden from public listings and can only be
    unlocked by a matching special price or access code.
    """

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        NOT_ACTIVE = "not_active", "Not active"

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="ticket_categories")
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default="")
    status = models.CharField(choices=Status.choices, max_length=20, default=Status.ACTIVE, db_index=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    access_restricted = models.BooleanField(default=False, db_index=True)
    inception = models.DateTimeField(null=True, blank=True, help_text="When ticket sales begin for this category")
    expiration = models.DateTimeField(null=True, blank=True, help_text="When ticket sales end for this category")
    bounded = models.BooleanField(default=False, help_text="Whether this category has its own ticket quota.")
    max_tickets = models.PositiveIntegerField(default=0, help_text="Ticket quota, only meaningful when bounded.")
    ordinal = models.PositiveIntegerField(default=0, db_index=True)

    objects = TicketCategoryQuerySet.as_manager()

    class Meta:
        ordering = ["event", "ordinal", "name"]
        constraints = [models.UniqueConstraint(fields=["event", "name"], name="unique_event_category_name")]
        verbose_name_plural = "ticket categories"

    def __str__(self) -> str:
        return f"{self.name} for event {self.event.name}"

    def clean(self) -> None:
        """Validate the sales window."""
        super().clean()
        if self.inception and self.expiration and self.expiration <= self.inception:
            raise DjangoValidationError({"expiration": "Ticket sales end time must be after the sales start time."})

    def is_expired(self, now: datetime) -> bool:
        return self.expiration is not None and self.expiration <= now

    def is_sale_in_future(self, now: datetime) -> bool:
        return self.inception is not None and self.inception > now

    def is_on_sale(self, now: datetime) -> bool:
        return self.status == self.Status.ACTIVE and not self.is_expired(now) and not self.is_sale_in_future(now)


class TicketReservation(TimeStampedModel):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        IN_PAYMENT = "in_payment", "In payment"
        OFFLINE_PAYMENT = "offline_payment", "Offline payment"
        COMPLETE = "complete", "Complete"
        STUCK = "stuck", "Stuck"
        CANCELLED = "cancelled", "Cancelled"
        EXPIRED = "expired", "Expired"

    # Reservations in these states count against a discount's max usage.
    CONFIRMED_STATUSES = (Status.IN_PAYMENT, Status.OFFLINE_PAYMENT, Status.COMPLETE, Status.STUCK)

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="reservations")
    status = models.CharField(choices=Status.choices, max_length=20, default=Status.PENDING, db_index=True)
    expires_at = models.DateTimeField(db_index=True)
    promo_code_discount = models.ForeignKey(
        "events.PromoCodeDiscount",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reservations",
    )
    user_language = models.CharField(max_length=10, default="en")

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Reservation {self.pk} for event {self.event.name}"


class TicketQuerySet(models.QuerySet["Ticket"]):
    def not_released(self) -> t.Self:
        """Tickets that still occupy a seat.

        A pending reservation holds its seats until it expires.
        """
        lapsed = Q(
            reservation__status=TicketReservation.Status.PENDING,
            reservation__expires_at__lte=timezone.now(),
        ) | Q(reservation__status__in=[TicketReservation.Status.CANCELLED, TicketReservation.Status.EXPIRED])
        return self.exclude(status__in=[Ticket.Status.RELEASED, Ticket.Status.CANCELLED]).exclude(lapsed)


class Ticket(TimeStampedModel):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        ACQUIRED = "acquired", "Acquired"
        CHECKED_IN = "checked_in", "Checked in"
        RELEASED = "released", "Released"
        CANCELLED = "cancelled", "Cancelled"

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")
    category = models.ForeignKey(TicketCategory, on_delete=models.CASCADE, related_name="tickets")
    reservation = models.ForeignKey(TicketReservation, on_delete=models.CASCADE, related_name="tickets")
    special_price = models.ForeignKey(
        "events.SpecialPrice",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="tickets",
    )
    status = models.CharField(choices=Status.choices, max_length=20, default=Status.PENDING, db_index=True)
    final_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)

    objects = TicketQuerySet.as_manager()

    class Meta:
        ordering = ["reservation", "created_at"]
        indexes = [models.Index(fields=["category", "status"], name="events_tick_categor_7d1e3f_idx")]

    def __str__(self) -> str:
        return f"{self.category.name} ticket ({self.status})"
