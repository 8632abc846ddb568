import pytest
from django.core.exceptions import ValidationError
from django.test import override_settings

from events.models import ConfigurationKey, ConfigurationSetting, Event, Organization, TicketCategory
from events.service import configuration_service

pytestmark = pytest.mark.django_db

KEY = ConfigurationKey.MAX_AMOUNT_OF_TICKETS_BY_RESERVATION


class TestScopePrecedence:
    @override_settings(MAX_TICKETS_PER_RESERVATION=7)
    def test_default_from_settings(self, event: Event) -> None:
        assert configuration_service.get_int(KEY, event=event) == 7

    def test_system_value(self, event: Event) -> None:
        ConfigurationSetting.objects.create(key=KEY, value="3")

        assert configuration_service.get_int(KEY, event=event) == 3

    def test_organization_overrides_system(self, organization: Organization, event: Event) -> None:
        ConfigurationSetting.objects.create(key=KEY, value="3")
        ConfigurationSetting.objects.create(key=KEY, value="4", organization=organization)

        assert configuration_service.get_int(KEY, event=event) == 4

    def test_event_overrides_organization(self, organization: Organization, event: Event) -> None:
        ConfigurationSetting.objects.create(key=KEY, value="4", organization=organization)
        ConfigurationSetting.objects.create(key=KEY, value="6", event=event)

        assert configuration_service.get_int(KEY, event=event) == 6

    def test_category_overrides_event(self, event: Event, category: TicketCategory) -> None:
        ConfigurationSetting.objects.create(key=KEY, value="6", event=event)
        ConfigurationSetting.objects.create(key=KEY, value="1", ticket_category=category)

        assert configuration_service.get_int(KEY, category=category) == 1
        assert configuration_service.get_int(KEY, event=event) == 6

    def test_other_event_settings_are_ignored(self, organization: Organization, event: Event) -> None:
        other = Event.objects.create(organization=organization, name="Other", begin=event.begin, end=event.end)
        ConfigurationSetting.objects.create(key=KEY, value="9", event=other)

        assert configuration_service.get_int(KEY, event=event) == configuration_service.get_int(KEY)

    def test_other_keys_are_ignored(self, event: Event) -> None:
        ConfigurationSetting.objects.create(key=ConfigurationKey.RESERVATION_TIMEOUT, value="99", event=event)

        assert configuration_service.get_int(KEY, event=event) != 99


class TestValueParsing:
    @pytest.mark.parametrize("value", ["true", "True", "1", "yes", " on "])
    def test_truthy(self, event: Event, value: str) -> None:
        ConfigurationSetting.objects.create(key=ConfigurationKey.ENABLE_WAITING_QUEUE, value=value, event=event)

        assert configuration_service.get_bool(ConfigurationKey.ENABLE_WAITING_QUEUE, event=event)

    @pytest.mark.parametrize("value", ["false", "0", "no", "off"])
    def test_falsy(self, event: Event, value: str) -> None:
        ConfigurationSetting.objects.create(key=ConfigurationKey.DISPLAY_DISCOUNT_CODE_BOX, value=value, event=event)

        assert not configuration_service.get_bool(ConfigurationKey.DISPLAY_DISCOUNT_CODE_BOX, event=event)

    @override_settings(RESERVATION_TIMEOUT_MINUTES=25)
    def test_invalid_integer_falls_back_to_default(self, event: Event) -> None:
        ConfigurationSetting.objects.create(key=ConfigurationKey.RESERVATION_TIMEOUT, value="soon", event=event)

        assert configuration_service.get_int(ConfigurationKey.RESERVATION_TIMEOUT, event=event) == 25


def test_setting_bound_to_two_scopes_is_invalid(organization: Organization, event: Event) -> None:
    with pytest.raises(ValidationError):
        ConfigurationSetting.objects.create(key=KEY, value="1", organization=organization, event=event)
