"""Common schemas for the API."""

import typing as t

from ninja import Schema
from pydantic import StringConstraints

T = t.TypeVar("T")

StrippedString = t.Annotated[str, StringConstraints(strip_whitespace=True)]


class VersionResponse(Schema):
    version: str


class ResponseOk(Schema):
    status: t.Literal["ok"] = "ok"


class ResponseMessage(Schema):
    message: str


class ErrorDescriptor(Schema):
    """A single validation problem, addressed by field and translatable error code."""

    field_name: str
    code: str


class ValidatedResponse(Schema, t.Generic[T]):
    """Envelope carrying a value together with the outcome of its validation.

    Failures still carry a value so clients can render what was submitted.
    """

    success: bool
    validation_errors: list[ErrorDescriptor] = []
    value: T | None = None

    @classmethod
    def ok(cls, value: T) -> "ValidatedResponse[T]":
        return cls(success=True, validation_errors=[], value=value)

    @classmethod
    def failed(cls, errors: list[ErrorDescriptor], value: T | None = None) -> "ValidatedResponse[T]":
        return cls(success=False, validation_errors=errors, value=value)
