from ninja_extra import api_controller, route

from common.schema import ResponseMessage
from events import models, schema

from .base import EventPublicBaseController


@api_controller("/public", tags=["Public events"])
class EventPublicDetailsController(EventPublicBaseController):
    """Browsing of published events."""

    @route.get("/events", url_name="public_event_list", response={200: list[schema.EventInListSchema]})
    def list_events(self) -> models.event.EventQuerySet:
        """List the events published on the box office."""
        return models.Event.objects.published().with_organization()

    @route.get(
        "/event/{slug}",
        url_name="public_event_detail",
        response={200: schema.EventDetailSchema, 404: ResponseMessage},
    )
    def get_event(self, slug: str) -> models.Event:
        """Get an event by its slug.

        `promotions_configuration.has_access_promotions` tells whether the code box
        should be displayed, i.e. whether a code could unlock or discount anything.
        """
        return self.get_one_by_slug(slug)
