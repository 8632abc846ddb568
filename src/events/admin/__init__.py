# src/events/admin/__init__.py
"""Events admin module.

Django autodiscover will import this module, which triggers registration
of all admin classes via the @admin.register decorators in submodules.
"""

from events.admin.codes import PromoCodeDiscountAdmin, SpecialPriceAdmin
from events.admin.configuration import ConfigurationSettingAdmin, WaitingQueueSubscriptionAdmin
from events.admin.event import EventAdmin, OrganizationAdmin
from events.admin.ticket import TicketAdmin, TicketCategoryAdmin, TicketReservationAdmin

__all__ = [
    # Organization
    "OrganizationAdmin",
    # Event
    "EventAdmin",
    # Ticket
    "TicketCategoryAdmin",
    "TicketReservationAdmin",
    "TicketAdmin",
    # Codes
    "SpecialPriceAdmin",
    "PromoCodeDiscountAdmin",
    # Configuration
    "ConfigurationSettingAdmin",
    "WaitingQueueSubscriptionAdmin",
]
