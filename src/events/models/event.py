import typing as t
import zoneinfo
from datetime import datetime

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models
from django.utils import timezone

from common.models import TimeStampedModel

from .mixins import SlugFromNameMixin, validate_timezone
from .organization import Organization


class EventQuerySet(models.QuerySet["Event"]):
    def with_organization(self) -> t.Self:
        """Select the organization along with the event."""
        return self.select_related("organization")

    def published(self) -> t.Self:
        """Events listed publicly."""
        return self.filter(status=Event.EventStatus.PUBLIC)

    def not_disabled(self) -> t.Self:
        """Events that can still be browsed by slug (drafts included)."""
        return self.exclude(status=Event.EventStatus.DISABLED)


class Event(SlugFromNameMixin, TimeStampedModel):
    class EventStatus(models.TextChoices):
        DRAFT = "draft", "Draft"
        PUBLIC = "public", "Public"
        DISABLED = "disabled", "Disabled"

    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name="events")
    status = models.CharField(choices=EventStatus.choices, max_length=10, default=EventStatus.DRAFT, db_index=True)
    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=255, unique=True, blank=True, help_text="Short name used in public URLs.")
    description = models.TextField(blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")
    timezone = models.CharField(max_length=64, default=settings.TIME_ZONE, validators=[validate_timezone])
    begin = models.DateTimeField(db_index=True)
    end = models.DateTimeField(db_index=True)
    available_seats = models.PositiveIntegerField(default=0, help_text="Total capacity across all categories.")
    free_of_charge = models.BooleanField(default=False)
    currency = models.CharField(max_length=3, default=settings.DEFAULT_CURRENCY, help_text="ISO 4217 currency code")

    objects = EventQuerySet.as_manager()

    class Meta:
        ordering = ["begin", "name"]
        indexes = [models.Index(fields=["organization", "status"], name="events_even_organiz_2a4c1b_idx")]

    def __str__(self) -> str:
        return self.name

    def clean(self) -> None:
        """Ensure the event does not end before it begins."""
        super().clean()
        if self.begin and self.end and self.end < self.begin:
            raise DjangoValidationError({"end": "The event cannot end before it begins."})

    @property
    def zone(self) -> zoneinfo.ZoneInfo:
        return zoneinfo.ZoneInfo(self.timezone)

    def now(self) -> datetime:
        """Current time expressed in the event's timezone."""
        return timezone.localtime(timezone.now(), self.zone)

    @property
    def same_day(self) -> bool:
        return bool(timezone.localtime(self.begin, self.zone).date() == timezone.localtime(self.end, self.zone).date())
