# src/events/admin/configuration.py
"""Admin classes for configuration and the waiting queue."""

from django.contrib import admin
from unfold.admin import ModelAdmin

from events import models
from events.admin.base import EventLinkMixin, OrganizationLinkMixin


@admin.register(models.ConfigurationSetting)
class ConfigurationSettingAdmin(ModelAdmin, OrganizationLinkMixin, EventLinkMixin):  # type: ignore[misc]
    list_display = ["key", "value", "scope", "organization_link", "event_link", "ticket_category"]
    list_filter = ["key"]
    search_fields = ["key", "value", "description"]
    autocomplete_fields = ["organization", "event", "ticket_category"]


@admin.register(models.WaitingQueueSubscription)
class WaitingQueueSubscriptionAdmin(ModelAdmin, EventLinkMixin):  # type: ignore[misc]
    list_display = ["email", "full_name", "event_link", "subscription_type", "status", "created_at"]
    list_filter = ["status", "subscription_type", "event"]
    search_fields = ["email", "first_name", "last_name", "event__name"]
    autocomplete_fields = ["event", "selected_category"]
