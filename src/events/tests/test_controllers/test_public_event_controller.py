"""Tests for the public event endpoints."""

import typing as t

import orjson
import pytest
from django.shortcuts import reverse  # type: ignore[attr-defined]
from django.test.client import Client

from events.models import (
    ConfigurationKey,
    ConfigurationSetting,
    Event,
    Organization,
    PromoCodeDiscount,
    SpecialPrice,
    TicketCategory,
    TicketReservation,
    WaitingQueueSubscription,
)

pytestmark = pytest.mark.django_db


# ===== GET /public/events and /public/event/{slug} =====


class TestEventDetails:
    def test_list_only_published_events(self, client: Client, organization: Organization, event: Event) -> None:
        Event.objects.create(organization=organization, name="Draft", begin=event.begin, end=event.end)

        response = client.get(reverse("api:public_event_list"))

        assert response.status_code == 200
        assert [e["slug"] for e in response.json()] == ["event"]

    def test_event_detail(self, client: Client, event: Event, restricted_category: TicketCategory) -> None:
        response = client.get(reverse("api:public_event_detail", kwargs={"slug": "event"}))

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Event"
        assert data["timezone"] == "Europe/Zurich"
        assert data["currency"] == "CHF"
        assert data["organization"]["slug"] == "org"
        assert data["promotions_configuration"] == {"has_access_promotions": True, "use_partner_code": False}

    def test_code_box_can_be_disabled(
        self, client: Client, event: Event, restricted_category: TicketCategory
    ) -> None:
        ConfigurationSetting.objects.create(
            key=ConfigurationKey.DISPLAY_DISCOUNT_CODE_BOX, value="false", organization=event.organization
        )

        response = client.get(reverse("api:public_event_detail", kwargs={"slug": "event"}))

        assert response.json()["promotions_configuration"]["has_access_promotions"] is False

    def test_unknown_event(self, client: Client) -> None:
        response = client.get(reverse("api:public_event_detail", kwargs={"slug": "nope"}))

        assert response.status_code == 404

    def test_disabled_event_is_hidden(self, client: Client, event: Event) -> None:
        event.status = Event.EventStatus.DISABLED
        event.save()

        response = client.get(reverse("api:public_event_detail", kwargs={"slug": "event"}))

        assert response.status_code == 404


# ===== GET /public/event/{slug}/ticket-categories =====


class TestTicketCategories:
    def test_without_code(
        self, client: Client, event: Event, category: TicketCategory, restricted_category: TicketCategory
    ) -> None:
        response = client.get(reverse("api:public_ticket_categories", kwargs={"slug": "event"}))

        assert response.status_code == 200
        data = response.json()
        assert [c["name"] for c in data["ticket_categories"]] == ["Standard"]
        assert data["display_waiting_queue_form"] is False
        assert data["pre_sales"] is False

    def test_with_access_code(
        self,
        client: Client,
        event: Event,
        category: TicketCategory,
        restricted_category: TicketCategory,
        access_code: PromoCodeDiscount,
    ) -> None:
        url = reverse("api:public_ticket_categories", kwargs={"slug": "event"})

        response = client.get(url, {"code": "BACKSTAGE"})

        assert response.status_code == 200
        names = [c["name"] for c in response.json()["ticket_categories"]]
        assert names == ["Standard", "Backstage"]

    def test_unknown_code_lists_public_categories(self, client: Client, event: Event, category: TicketCategory) -> None:
        url = reverse("api:public_ticket_categories", kwargs={"slug": "event"})

        response = client.get(url, {"code": "NOPE"})

        assert response.status_code == 200
        assert len(response.json()["ticket_categories"]) == 1


# ===== GET /public/event/{slug}/validate-code =====


class TestValidateCode:
    def test_valid_code(self, client: Client, event: Event, promo_code: PromoCodeDiscount) -> None:
        url = reverse("api:public_validate_code", kwargs={"slug": "event"})

        response = client.get(url, {"code": "SAVE10"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["value"] == {
            "code": "SAVE10",
            "type": "DISCOUNT",
            "discount_type": "percentage",
            "discount_amount": "10",
        }

    def test_special_price(self, client: Client, event: Event, special_price: SpecialPrice) -> None:
        url = reverse("api:public_validate_code", kwargs={"slug": "event"})

        response = client.get(url, {"code": "VIP-0001"})

        assert response.status_code == 200
        assert response.json()["value"]["type"] == "SPECIAL_PRICE"

    def test_invalid_code(self, client: Client, event: Event) -> None:
        url = reverse("api:public_validate_code", kwargs={"slug": "event"})

        response = client.get(url, {"code": "NOPE"})

        assert response.status_code == 422
        data = response.json()
        assert data["success"] is False
        assert data["validation_errors"] == [{"field_name": "promoCode", "code": "error.STEP_1_CODE_NOT_FOUND"}]


# ===== POST /public/event/{slug}/reserve-tickets =====


class TestReserveTickets:
    def _post(self, client: Client, payload: dict[str, t.Any]) -> t.Any:
        url = reverse("api:public_reserve_tickets", kwargs={"slug": "event"})
        return client.post(url, data=orjson.dumps(payload), content_type="application/json")

    def test_reserve(self, client: Client, event: Event, category: TicketCategory) -> None:
        response = self._post(
            client, {"reservation": [{"ticket_category_id": str(category.pk), "amount": 2}], "lang": "it"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        reservation = TicketReservation.objects.get(pk=data["value"])
        assert reservation.tickets.count() == 2
        assert reservation.user_language == "it"

    def test_validation_errors(self, client: Client, event: Event, category: TicketCategory) -> None:
        response = self._post(
            client,
            {"promo_code": "NOPE", "reservation": [{"ticket_category_id": str(category.pk), "amount": 0}]},
        )

        assert response.status_code == 422
        assert response.json()["validation_errors"] == [
            {"field_name": "promoCode", "code": "error.STEP_1_CODE_NOT_FOUND"},
            {"field_name": "reservation", "code": "error.STEP_1_SELECT_AT_LEAST_ONE"},
        ]

    def test_negative_amount_is_rejected_by_schema(
        self, client: Client, event: Event, category: TicketCategory
    ) -> None:
        response = self._post(client, {"reservation": [{"ticket_category_id": str(category.pk), "amount": -1}]})

        assert response.status_code == 422
        assert not TicketReservation.objects.exists()

    def test_unknown_event(self, client: Client) -> None:
        response = self._post(client, {"reservation": []})

        assert response.status_code == 404


# ===== POST /public/event/{slug}/waiting-list/subscribe =====


class TestWaitingListSubscribe:
    def test_subscribe(self, client: Client, event: Event, category: TicketCategory) -> None:
        ConfigurationSetting.objects.create(key=ConfigurationKey.ENABLE_WAITING_QUEUE, value="true", event=event)
        url = reverse("api:public_waiting_list_subscribe", kwargs={"slug": "event"})
        payload = {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"}

        response = client.post(url, data=orjson.dumps(payload), content_type="application/json")

        assert response.status_code == 200
        assert response.json() == {"success": True, "validation_errors": [], "value": True}
        assert WaitingQueueSubscription.objects.filter(event=event, email="ada@example.com").exists()

    def test_invalid_payload(self, client: Client, event: Event) -> None:
        url = reverse("api:public_waiting_list_subscribe", kwargs={"slug": "event"})
        payload = {"first_name": "Ada", "last_name": "Lovelace", "email": "nope"}

        response = client.post(url, data=orjson.dumps(payload), content_type="application/json")

        assert response.status_code == 422
        assert response.json()["validation_errors"] == [{"field_name": "email", "code": "error.email"}]


# ===== CORS =====


class TestCors:
    def test_public_endpoints_allow_any_origin(self, client: Client, event: Event) -> None:
        response = client.get(
            reverse("api:public_event_detail", kwargs={"slug": "event"}), HTTP_ORIGIN="https://shop.example.com"
        )

        assert response["Access-Control-Allow-Origin"] == "*"

    def test_other_endpoints_are_not_cors_enabled(self, client: Client) -> None:
        response = client.get(reverse("api:version"), HTTP_ORIGIN="https://shop.example.com")

        assert "Access-Control-Allow-Origin" not in response
