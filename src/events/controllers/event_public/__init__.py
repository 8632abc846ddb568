from .details import EventPublicDetailsController
from .tickets import EventPublicTicketsController

EVENT_PUBLIC_CONTROLLERS: list[type] = [
    EventPublicDetailsController,
    EventPublicTicketsController,
]

__all__ = [
    "EventPublicDetailsController",
    "EventPublicTicketsController",
    "EVENT_PUBLIC_CONTROLLERS",
]
