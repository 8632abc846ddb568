# src/events/admin/codes.py
"""Admin classes for special prices and promo codes.

Codes are only ever created here, the public API reads them.
"""

from django.contrib import admin
from unfold.admin import ModelAdmin

from events import models
from events.admin.base import CategoryLinkMixin, EventLinkMixin, OrganizationLinkMixin


@admin.register(models.SpecialPrice)
class SpecialPriceAdmin(ModelAdmin, CategoryLinkMixin):  # type: ignore[misc]
    list_display = ["code", "category_link", "price", "status"]
    list_filter = ["status", "ticket_category__event"]
    search_fields = ["code", "ticket_category__name"]
    autocomplete_fields = ["ticket_category"]


@admin.register(models.PromoCodeDiscount)
class PromoCodeDiscountAdmin(ModelAdmin, OrganizationLinkMixin, EventLinkMixin):  # type: ignore[misc]
    list_display = [
        "promo_code",
        "organization_link",
        "event_link",
        "code_type",
        "discount_type",
        "discount_amount",
        "max_usage",
        "valid_from",
        "valid_to",
    ]
    list_filter = ["code_type", "discount_type", "organization"]
    search_fields = ["promo_code", "event__name", "organization__name"]
    autocomplete_fields = ["organization", "event", "hidden_category"]
    filter_horizontal = ["categories"]
