import typing as t

import orjson
from django.core.exceptions import ValidationError
from django.test import RequestFactory

from api.exception_handlers import handle_django_validation_error, handle_general_exception, obfuscate


def test_obfuscate_masks_sensitive_keys() -> None:
    data = {"Authorization": "Bearer abc", "email": "a@example.com"}

    assert obfuscate(data) == {"Authorization": "********", "email": "a@example.com"}
    assert data["Authorization"] == "Bearer abc"


def test_obfuscate_ignores_non_dicts() -> None:
    assert obfuscate(["password"]) == ["password"]


def test_field_validation_error_is_a_bad_request(rf: RequestFactory) -> None:
    response = handle_django_validation_error(rf.get("/"), ValidationError({"timezone": ["Not a timezone."]}))

    assert response.status_code == 400
    assert orjson.loads(response.content) == {"errors": {"timezone": ["Not a timezone."]}}


def test_non_field_validation_error(rf: RequestFactory) -> None:
    response = handle_django_validation_error(rf.get("/"), ValidationError("Broken."))

    assert orjson.loads(response.content) == {"errors": {"__all__": ["Broken."]}}


def test_unhandled_exception_hides_details(rf: RequestFactory, settings: t.Any) -> None:
    settings.DEBUG = False
    request = rf.post(
        "/api/public/event/x/reserve-tickets", data=b'{"token": "s3cr3t"}', content_type="application/json"
    )

    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        response = handle_general_exception(request, e)

    assert response.status_code == 500
    assert orjson.loads(response.content) == {"detail": "Internal Server Error."}
