"""Events schema package."""

from .code import EventCodeSchema
from .event import (
    EventBaseSchema,
    EventDetailSchema,
    EventInListSchema,
    MinimalOrganizationSchema,
    PromotionsConfigurationSchema,
)
from .reservation import ReservationPayloadSchema, TicketSelectionSchema
from .ticket import ItemsByCategorySchema, TicketCategorySchema, WaitingListCategorySchema
from .waiting_queue import WaitingQueueSubscriptionSchema

__all__ = [
    # Events
    "EventBaseSchema",
    "EventDetailSchema",
    "EventInListSchema",
    "MinimalOrganizationSchema",
    "PromotionsConfigurationSchema",
    # Ticket categories
    "ItemsByCategorySchema",
    "TicketCategorySchema",
    "WaitingListCategorySchema",
    # Codes
    "EventCodeSchema",
    # Reservations
    "ReservationPayloadSchema",
    "TicketSelectionSchema",
    # Waiting queue
    "WaitingQueueSubscriptionSchema",
]
