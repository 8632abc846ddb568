"""Public event schemas."""

import typing as t
from uuid import UUID

from ninja import Schema
from pydantic import AwareDatetime

from events.models import Event
from events.service import event_service


class MinimalOrganizationSchema(Schema):
    id: UUID
    name: str
    slug: str
    email: str


class PromotionsConfigurationSchema(Schema):
    has_access_promotions: bool
    use_partner_code: bool


class EventBaseSchema(Schema):
    id: UUID
    slug: str
    name: str
    location: str
    timezone: str
    begin: AwareDatetime
    end: AwareDatetime
    same_day: bool


class EventInListSchema(EventBaseSchema):
    pass


class EventDetailSchema(EventBaseSchema):
    organization: MinimalOrganizationSchema
    status: Event.EventStatus
    description: str
    free_of_charge: bool
    currency: str
    promotions_configuration: PromotionsConfigurationSchema

    @staticmethod
    def resolve_promotions_configuration(obj: Event, context: t.Any) -> dict[str, bool]:
        return event_service.get_promotions_configuration(obj)
