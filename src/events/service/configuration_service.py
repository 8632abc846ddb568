"""Scoped configuration lookup.

A value set on a ticket category overrides one set on its event, which overrides
one set on the organization, which overrides the system-wide value.
"""

import typing as t

import structlog
from django.conf import settings
from django.db.models import Q

from events.models import ConfigurationKey, ConfigurationSetting, Event, Organization, TicketCategory

DEFAULTS: dict[ConfigurationKey, t.Callable[[], str]] = {
    ConfigurationKey.MAX_AMOUNT_OF_TICKETS_BY_RESERVATION: lambda: str(settings.MAX_TICKETS_PER_RESERVATION),
    ConfigurationKey.DISPLAY_DISCOUNT_CODE_BOX: lambda: "true",
    ConfigurationKey.USE_PARTNER_CODE_INSTEAD_OF_PROMOTIONAL: lambda: "false",
    ConfigurationKey.ENABLE_WAITING_QUEUE: lambda: "false",
    ConfigurationKey.ENABLE_PRE_REGISTRATION: lambda: "false",
    ConfigurationKey.RESERVATION_TIMEOUT: lambda: str(settings.RESERVATION_TIMEOUT_MINUTES),
}

logger = structlog.get_logger(__name__)

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})


def _scope_rank(setting: ConfigurationSetting) -> int:
    return {
        ConfigurationSetting.Scope.CATEGORY: 0,
        ConfigurationSetting.Scope.EVENT: 1,
        ConfigurationSetting.Scope.ORGANIZATION: 2,
        ConfigurationSetting.Scope.SYSTEM: 3,
    }[ConfigurationSetting.Scope(setting.scope)]


def get_config_value(
    key: ConfigurationKey,
    *,
    organization: Organization | None = None,
    event: Event | None = None,
    category: TicketCategory | None = None,
) -> str:
    """Return the most specific value configured for ``key``, or its default.

    Missing scopes are derived from the more specific ones given.
    """
    if category is not None and event is None:
        event = category.event
    if event is not None and organization is None:
        organization = event.organization

    scope_filter = Q(organization__isnull=True, event__isnull=True, ticket_category__isnull=True)
    if organization is not None:
        scope_filter |= Q(organization=organization)
    if event is not None:
        scope_filter |= Q(event=event)
    if category is not None:
        scope_filter |= Q(ticket_category=category)

    candidates = list(ConfigurationSetting.objects.filter(scope_filter, key=key))
    if not candidates:
        return DEFAULTS[key]()
    return min(candidates, key=_scope_rank).value


def get_bool(key: ConfigurationKey, **scope: t.Any) -> bool:
    return get_config_value(key, **scope).strip().lower() in TRUE_VALUES


def get_int(key: ConfigurationKey, **scope: t.Any) -> int:
    """Integer value of ``key``. Unparsable values fall back to the default."""
    value = get_config_value(key, **scope)
    try:
        return int(value)
    except ValueError:
        logger.warning("invalid_integer_configuration", key=key.value, value=value)
        return int(DEFAULTS[key]())
