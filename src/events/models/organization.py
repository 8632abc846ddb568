import typing as t

from django.db import models

from common.models import TimeStampedModel

from .mixins import SlugFromNameMixin


class OrganizationQuerySet(models.QuerySet["Organization"]):
    def with_events(self) -> t.Self:
        """Prefetch the organization's events."""
        return self.prefetch_related("events")


class Organization(SlugFromNameMixin, TimeStampedModel):
    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField(blank=True, default="")
    email = models.EmailField(blank=True, default="")

    objects = OrganizationQuerySet.as_manager()

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
