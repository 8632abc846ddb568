# src/events/admin/base.py
"""Base admin components: mixins and inlines."""

import typing as t

from django.urls import reverse
from django.utils.html import format_html
from unfold.admin import TabularInline

from events import models


# --- Helper Mixins for Reusable Link Fields ---
class OrganizationLinkMixin:
    """Mixin to add a link to an organization."""

    def organization_link(self, obj: t.Any) -> str | None:
        if not hasattr(obj, "organization") or not obj.organization:
            return None
        url = reverse("admin:events_organization_change", args=[obj.organization.id])
        return format_html('<a href="{}">{}</a>', url, obj.organization.name)

    organization_link.short_description = "Organization"  # type: ignore[attr-defined]


class EventLinkMixin:
    """Mixin to add a link to an event."""

    def event_link(self, obj: t.Any) -> str | None:
        if not hasattr(obj, "event") or not obj.event:
            return None
        url = reverse("admin:events_event_change", args=[obj.event.id])
        return format_html('<a href="{}">{}</a>', url, obj.event.name)

    event_link.short_description = "Event"  # type: ignore[attr-defined]


class CategoryLinkMixin:
    """Mixin to add a link to the ticket category of an object."""

    def category_link(self, obj: t.Any) -> str | None:
        category = getattr(obj, "ticket_category", None) or getattr(obj, "category", None)
        if not category:
            return None
        url = reverse("admin:events_ticketcategory_change", args=[category.id])
        return format_html('<a href="{}">{}</a>', url, category.name)

    category_link.short_description = "Ticket category"  # type: ignore[attr-defined]


# --- Inlines ---
class TicketCategoryInline(TabularInline):  # type: ignore[misc]
    model = models.TicketCategory
    extra = 0
    show_change_link = True
    fields = ["name", "status", "price", "access_restricted", "bounded", "max_tickets", "inception", "expiration"]


class SpecialPriceInline(TabularInline):  # type: ignore[misc]
    model = models.SpecialPrice
    extra = 1
    fields = ["code", "price", "status"]


class TicketInline(TabularInline):  # type: ignore[misc]
    model = models.Ticket
    extra = 0
    can_delete = False
    fields = ["category", "status", "final_price", "special_price"]
    readonly_fields = ["category", "final_price", "special_price"]


class ConfigurationSettingInline(TabularInline):  # type: ignore[misc]
    model = models.ConfigurationSetting
    extra = 0
    fields = ["key", "value", "description"]
