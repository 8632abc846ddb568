from django.db import models

from common.models import TimeStampedModel

from .event import Event
from .ticket import TicketCategory


class WaitingQueueSubscription(TimeStampedModel):
    """Someone waiting for tickets of a sold out (or not yet on sale) event."""

    class Status(models.TextChoices):
        WAITING = "waiting", "Waiting"
        PRE_RESERVED = "pre_reserved", "Pre-reserved"
        ACQUIRED = "acquired", "Acquired"
        EXPIRED = "expired", "Expired"
        CANCELLED = "cancelled", "Cancelled"

    class SubscriptionType(models.TextChoices):
        PRE_SALES = "pre_sales", "Pre-sales"
        SOLD_OUT = "sold_out", "Sold out"

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="waiting_queue")
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    email = models.EmailField()
    user_language = models.CharField(max_length=10, default="en")
    selected_category = models.ForeignKey(
        TicketCategory, on_delete=models.SET_NULL, null=True, blank=True, related_name="waiting_queue"
    )
    subscription_type = models.CharField(
        choices=SubscriptionType.choices, max_length=20, default=SubscriptionType.SOLD_OUT
    )
    status = models.CharField(choices=Status.choices, max_length=20, default=Status.WAITING, db_index=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [models.UniqueConstraint(fields=["event", "email"], name="unique_waiting_queue_email")]

    def __str__(self) -> str:
        return f"{self.email} waiting for {self.event.name}"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
