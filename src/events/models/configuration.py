import typing as t

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models

from common.models import TimeStampedModel

from .event import Event
from .organization import Organization
from .ticket import TicketCategory


class ConfigurationKey(models.TextChoices):
    MAX_AMOUNT_OF_TICKETS_BY_RESERVATION = "max_amount_of_tickets_by_reservation", "Max tickets per reservation"
    DISPLAY_DISCOUNT_CODE_BOX = "display_discount_code_box", "Display discount code box"
    USE_PARTNER_CODE_INSTEAD_OF_PROMOTIONAL = (
        "use_partner_code_instead_of_promotional",
        "Use partner code instead of promotional",
    )
    ENABLE_WAITING_QUEUE = "enable_waiting_queue", "Enable waiting queue"
    ENABLE_PRE_REGISTRATION = "enable_pre_registration", "Enable pre-registration"
    RESERVATION_TIMEOUT = "reservation_timeout", "Reservation timeout (minutes)"


class ConfigurationSetting(TimeStampedModel):
    """A configuration value, scoped to the system or to an organization, event or ticket category.

    At most one scope may be set. A row without any scope applies system-wide.
    """

    class Scope(models.TextChoices):
        SYSTEM = "system", "System"
        ORGANIZATION = "organization", "Organization"
        EVENT = "event", "Event"
        CATEGORY = "category", "Ticket category"

    key = models.CharField(choices=ConfigurationKey.choices, max_length=64, db_index=True)
    value = models.CharField(max_length=255)
    description = models.CharField(max_length=255, blank=True, default="")
    organization = models.ForeignKey(
        Organization, on_delete=models.CASCADE, null=True, blank=True, related_name="configuration"
    )
    event = models.ForeignKey(Event, on_delete=models.CASCADE, null=True, blank=True, related_name="configuration")
    ticket_category = models.ForeignKey(
        TicketCategory, on_delete=models.CASCADE, null=True, blank=True, related_name="configuration"
    )

    class Meta:
        ordering = ["key"]
        constraints = [
            models.UniqueConstraint(
                fields=["key", "organization", "event", "ticket_category"],
                name="unique_configuration_per_scope",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.key}={self.value} ({self.scope})"

    @property
    def scope(self) -> str:
        if self.ticket_category_id:
            return self.Scope.CATEGORY
        if self.event_id:
            return self.Scope.EVENT
        if self.organization_id:
            return self.Scope.ORGANIZATION
        return self.Scope.SYSTEM

    def clean(self) -> None:
        super().clean()
        scopes: list[t.Any] = [self.organization_id, self.event_id, self.ticket_category_id]
        if sum(1 for s in scopes if s) > 1:
            raise DjangoValidationError("A setting can only be bound to one scope.")
