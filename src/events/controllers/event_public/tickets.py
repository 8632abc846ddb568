from ninja_extra import api_controller, route

from common.schema import ResponseMessage, ValidatedResponse
from common.throttling import ReservationThrottle, WaitingListThrottle
from events import schema
from events.service import code_service, ticket_category_service, waiting_queue_service
from events.service.reservation_service import ReservationService

from .base import EventPublicBaseController


@api_controller("/public", tags=["Public events"])
class EventPublicTicketsController(EventPublicBaseController):
    """Ticket categories, code validation, reservations and the waiting list."""

    @route.get(
        "/event/{slug}/ticket-categories",
        url_name="public_ticket_categories",
        response={200: schema.ItemsByCategorySchema, 404: ResponseMessage},
    )
    def list_ticket_categories(self, slug: str, code: str | None = None) -> schema.ItemsByCategorySchema:
        """List the ticket categories currently on sale.

        Access-restricted categories are only listed when `code` unlocks them, and
        prices reflect the discount the code grants. A rejected code still unlocks
        and caps categories but does not change prices.
        """
        event = self.get_one_by_slug(slug)
        return ticket_category_service.list_ticket_categories(event, code)

    @route.get(
        "/event/{slug}/validate-code",
        url_name="public_validate_code",
        response={
            200: ValidatedResponse[schema.EventCodeSchema],
            422: ValidatedResponse[schema.EventCodeSchema],
            404: ResponseMessage,
        },
    )
    def validate_code(self, slug: str, code: str) -> tuple[int, ValidatedResponse[schema.EventCodeSchema]]:
        """Check whether a code can be used for this event and describe what it does.

        Unknown, used up or expired codes all fail with `error.STEP_1_CODE_NOT_FOUND`.
        """
        event = self.get_one_by_slug(slug)
        result = code_service.validate_code(event, code)
        return (200 if result.success else 422), result

    @route.post(
        "/event/{slug}/reserve-tickets",
        url_name="public_reserve_tickets",
        response={200: ValidatedResponse[str], 422: ValidatedResponse[str], 404: ResponseMessage},
        throttle=ReservationThrottle(),
    )
    def reserve_tickets(
        self, slug: str, payload: schema.ReservationPayloadSchema
    ) -> tuple[int, ValidatedResponse[str]]:
        """Reserve tickets, optionally with a special price or promo code.

        On success `value` is the id of a PENDING reservation that expires after the
        configured timeout. On failure every validation error is returned at once.
        """
        event = self.get_one_by_slug(slug)
        result = ReservationService(event, payload).reserve()
        return (200 if result.success else 422), result

    @route.post(
        "/event/{slug}/waiting-list/subscribe",
        url_name="public_waiting_list_subscribe",
        response={200: ValidatedResponse[bool], 422: ValidatedResponse[bool], 404: ResponseMessage},
        throttle=WaitingListThrottle(),
    )
    def subscribe_to_waiting_list(
        self, slug: str, payload: schema.WaitingQueueSubscriptionSchema
    ) -> tuple[int, ValidatedResponse[bool]]:
        """Join the waiting list of a sold out event.

        `value` is false when the waiting list is closed or the e-mail is already on it.
        """
        event = self.get_one_by_slug(slug)
        result = waiting_queue_service.subscribe_to_waiting_queue(event, payload)
        return (200 if result.success else 422), result
