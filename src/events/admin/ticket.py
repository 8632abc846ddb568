# src/events/admin/ticket.py
"""Admin classes for ticket categories, reservations and tickets."""

from django.contrib import admin
from unfold.admin import ModelAdmin

from events import models
from events.admin.base import CategoryLinkMixin, EventLinkMixin, SpecialPriceInline, TicketInline


@admin.register(models.TicketCategory)
class TicketCategoryAdmin(ModelAdmin, EventLinkMixin):  # type: ignore[misc]
    """Admin view for TicketCategory."""

    list_display = ["name", "event_link", "status", "price", "access_restricted", "bounded", "max_tickets"]
    list_filter = ["status", "access_restricted", "bounded", "event"]
    search_fields = ["name", "event__name"]
    autocomplete_fields = ["event"]
    inlines = [SpecialPriceInline]


@admin.register(models.TicketReservation)
class TicketReservationAdmin(ModelAdmin, EventLinkMixin):  # type: ignore[misc]
    list_display = ["id", "event_link", "status", "expires_at", "promo_code_discount", "ticket_count"]
    list_filter = ["status", "event"]
    search_fields = ["id", "event__name", "promo_code_discount__promo_code"]
    autocomplete_fields = ["event", "promo_code_discount"]
    readonly_fields = ["id", "created_at"]
    date_hierarchy = "created_at"
    inlines = [TicketInline]

    @admin.display(description="Tickets")
    def ticket_count(self, obj: models.TicketReservation) -> int:
        return obj.tickets.count()


@admin.register(models.Ticket)
class TicketAdmin(ModelAdmin, EventLinkMixin, CategoryLinkMixin):  # type: ignore[misc]
    list_display = ["id", "event_link", "category_link", "status", "final_price"]
    list_filter = ["status", "event__name", "category__name"]
    search_fields = ["event__name", "category__name", "special_price__code"]
    autocomplete_fields = ["event", "category", "reservation", "special_price"]
    readonly_fields = ["id"]
