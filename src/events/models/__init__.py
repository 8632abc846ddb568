from .codes import PromoCodeDiscount, SpecialPrice
from .configuration import ConfigurationKey, ConfigurationSetting
from .event import Event
from .organization import Organization
from .ticket import Ticket, TicketCategory, TicketReservation
from .waiting_queue import WaitingQueueSubscription

__all__ = [
    # Organizations
    "Organization",
    # Events
    "Event",
    # Tickets
    "TicketCategory",
    "TicketReservation",
    "Ticket",
    # Codes
    "SpecialPrice",
    "PromoCodeDiscount",
    # Configuration
    "ConfigurationKey",
    "ConfigurationSetting",
    # Waiting queue
    "WaitingQueueSubscription",
]
