# src/events/admin/event.py
"""Admin classes for Organization and Event."""

from django.contrib import admin
from unfold.admin import ModelAdmin

from events import models
from events.admin.base import ConfigurationSettingInline, OrganizationLinkMixin, TicketCategoryInline


@admin.register(models.Organization)
class OrganizationAdmin(ModelAdmin):  # type: ignore[misc]
    list_display = ["name", "slug", "email"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}
    inlines = [ConfigurationSettingInline]


@admin.register(models.Event)
class EventAdmin(ModelAdmin, OrganizationLinkMixin):  # type: ignore[misc]
    """Admin model for Events."""

    list_display = ["name", "organization_link", "status", "begin", "end", "available_seats", "free_of_charge"]
    list_filter = ["status", "organization", "begin", "free_of_charge"]
    search_fields = ["name", "slug", "organization__name"]
    autocomplete_fields = ["organization"]
    prepopulated_fields = {"slug": ("name",)}
    date_hierarchy = "begin"
    inlines = [TicketCategoryInline, ConfigurationSettingInline]
