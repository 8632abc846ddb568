from uuid import UUID

from ninja import Schema
from pydantic import Field

from common.schema import StrippedString


class WaitingQueueSubscriptionSchema(Schema):
    """Waiting list sign up. Fields are validated by the service so errors share the response envelope."""

    first_name: StrippedString = ""
    last_name: StrippedString = ""
    email: StrippedString = ""
    selected_category: UUID | None = None
    user_language: str = Field("en", max_length=10)
