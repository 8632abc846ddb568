import typing as t

from ninja_extra import ControllerBase

from events import models


class EventPublicBaseController(ControllerBase):
    """Base controller for public event endpoints.

    Events are addressed by slug. Disabled events are hidden entirely.
    """

    def get_queryset(self) -> models.event.EventQuerySet:
        return models.Event.objects.not_disabled().with_organization()

    def get_one_by_slug(self, slug: str) -> models.Event:
        """Wrapper helper."""
        return t.cast(models.Event, self.get_object_or_exception(self.get_queryset(), slug=slug))
