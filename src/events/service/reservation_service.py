"""Service creating pending ticket reservations from the public event page."""

from datetime import timedelta
from decimal import Decimal
from uuid import UUID

import structlog
from django.db import transaction
from django.utils import timezone

from common.schema import ErrorDescriptor, ValidatedResponse
from events.exceptions import (
    InvalidSpecialPriceTokenError,
    MissingSpecialPriceTokenError,
    NotEnoughTicketsError,
    ReservationError,
    TooManyTicketsForDiscountCodeError,
)
from events.models import (
    ConfigurationKey,
    Event,
    PromoCodeDiscount,
    SpecialPrice,
    Ticket,
    TicketCategory,
    TicketReservation,
)
from events.schema import ReservationPayloadSchema

from . import configuration_service
from .availability import EventAvailability
from .code_resolver import (
    CodeCheckResult,
    CodeLookup,
    DjangoCodeLookup,
    ErrorCode,
    ErrorField,
    compute_max_tickets,
    normalize_code,
    resolve_code,
    should_apply_discount,
    should_display_restricted_category,
)

logger = structlog.get_logger(__name__)


class ReservationService:
    """Validates a ticket selection and creates a PENDING reservation for it.

    Validation problems are collected and returned rather than raised, so the
    client gets every error of the submitted form at once.
    """

    def __init__(self, event: Event, payload: ReservationPayloadSchema, lookup: CodeLookup | None = None) -> None:
        """Initialize the reservation service.

        Args:
            event: The event tickets are reserved for.
            payload: The submitted selection and optional code.
            lookup: Data access for code resolution.
        """
        self.event = event
        self.payload = payload
        self.lookup: CodeLookup = lookup or DjangoCodeLookup()
        self.errors: list[ErrorDescriptor] = []
        self.code = CodeCheckResult()
        self.categories: dict[UUID, TicketCategory] = {c.pk: c for c in event.ticket_categories.all()}

    def _error(self, code: ErrorCode, field_name: str = ErrorField.RESERVATION) -> None:
        self.errors.append(ErrorDescriptor(field_name=field_name, code=code))

    def resolve_code(self) -> None:
        """Resolve the submitted code. Only a supplied code can fail."""
        if normalize_code(self.payload.promo_code) is None:
            return
        result = resolve_code(self.event, self.payload.promo_code, lookup=self.lookup)
        if result.error is not None:
            self._error(result.error.code, result.error.field_name)
        self.code = result

    def validate_selection(self) -> list[tuple[TicketCategory, int]]:
        """Check the selected categories and amounts.

        Returns:
            The (category, amount) pairs with a positive amount.
        """
        selected = [s for s in self.payload.reservation if s.amount > 0]
        if not selected:
            self._error(ErrorCode.SELECT_AT_LEAST_ONE)
            return []

        now = self.event.now()
        result: list[tuple[TicketCategory, int]] = []
        for selection in selected:
            category = self.categories.get(selection.ticket_category_id)
            if category is None or not category.is_on_sale(now):
                self._error(ErrorCode.CATEGORY_NOT_SALEABLE)
                continue
            default_max = configuration_service.get_int(
                ConfigurationKey.MAX_AMOUNT_OF_TICKETS_BY_RESERVATION, event=self.event, category=category
            )
            max_tickets = compute_max_tickets(
                category,
                self.code.discount,
                special_price_used=self.code.special_price is not None,
                default_max=default_max,
                lookup=self.lookup,
            )
            if selection.amount > max_tickets:
                self._error(ErrorCode.OVER_MAXIMUM)
                continue
            result.append((category, selection.amount))
        return result

    def reserve(self) -> ValidatedResponse[str]:
        """Validate the payload and create the reservation.

        Returns:
            A response carrying the reservation id, or every validation error found.
        """
        self.resolve_code()
        selection = self.validate_selection()
        if self.errors:
            return ValidatedResponse[str].failed(self.errors)

        try:
            reservation = self.create_reservation(selection)
        except ReservationError as e:
            logger.info(
                "reservation_rejected",
                event_id=str(self.event.pk),
                error=type(e).__name__,
            )
            self._error(e.error_code)
            return ValidatedResponse[str].failed(self.errors)

        return ValidatedResponse[str].ok(str(reservation.pk))

    def _assert_access(self, selection: list[tuple[TicketCategory, int]]) -> None:
        for category, _amount in selection:
            if category.access_restricted and not should_display_restricted_category(
                self.code.special_price, category, self.code.discount
            ):
                raise MissingSpecialPriceTokenError()

    def _lock_special_price(self) -> SpecialPrice | None:
        if self.code.special_price is None:
            return None
        special_price = SpecialPrice.objects.select_for_update().get(pk=self.code.special_price.pk)
        if not self.lookup.is_special_price_free(special_price):
            raise InvalidSpecialPriceTokenError()
        return special_price

    def _assert_capacity(self, availability: EventAvailability, selection: list[tuple[TicketCategory, int]]) -> None:
        """Bounded categories are checked one by one, unbounded ones against the shared pool."""
        unbounded_requested = 0
        for category, amount in selection:
            if category.bounded:
                if amount > availability.for_category(category):
                    raise NotEnoughTicketsError()
            else:
                unbounded_requested += amount
        if unbounded_requested > availability.shared_pool:
            raise NotEnoughTicketsError()

    def _discount_for(self, selection: list[tuple[TicketCategory, int]]) -> PromoCodeDiscount | None:
        """The discount, if it applies to at least one selected category."""
        discount = self.code.discount
        if discount is None or not any(should_apply_discount(discount, c) for c, _amount in selection):
            return None
        if discount.max_usage is not None:
            requested = sum(amount for c, amount in selection if should_apply_discount(discount, c))
            usage = self.lookup.count_confirmed_usage(discount.pk, discount.category_ids)
            if usage + requested > discount.max_usage:
                raise TooManyTicketsForDiscountCodeError()
        return discount

    def _ticket_price(
        self,
        category: TicketCategory,
        discount: PromoCodeDiscount | None,
        special_price: SpecialPrice | None,
    ) -> Decimal:
        if special_price is not None:
            return special_price.price
        if discount is not None and should_apply_discount(discount, category):
            return discount.discounted_price(category.price)
        return category.price

    @transaction.atomic
    def create_reservation(self, selection: list[tuple[TicketCategory, int]]) -> TicketReservation:
        """Create the reservation and one ticket per requested seat.

        Raises:
            ReservationError: If the selection can no longer be honoured once the event is locked.
        """
        self._assert_access(selection)

        # Serializes reservations of the same event so availability cannot be oversold.
        locked_event = Event.objects.select_for_update().get(pk=self.event.pk)
        special_price = self._lock_special_price()
        self._assert_capacity(EventAvailability(locked_event), selection)
        discount = self._discount_for(selection)

        timeout = configuration_service.get_int(ConfigurationKey.RESERVATION_TIMEOUT, event=self.event)
        reservation = TicketReservation.objects.create(
            event=self.event,
            status=TicketReservation.Status.PENDING,
            expires_at=timezone.now() + timedelta(minutes=timeout),
            promo_code_discount=discount,
            user_language=self.payload.lang,
        )

        tickets = []
        special_price_used = False
        for category, amount in selection:
            for _ in range(amount):
                ticket_special_price = None
                if special_price and not special_price_used and special_price.ticket_category_id == category.pk:
                    ticket_special_price = special_price
                    special_price_used = True
                ticket = Ticket(
                    event=self.event,
                    category=category,
                    reservation=reservation,
                    special_price=ticket_special_price,
                    status=Ticket.Status.PENDING,
                    final_price=self._ticket_price(category, discount, ticket_special_price),
                )
                # FKs were validated above, full_clean() would query each of them again.
                ticket.clean_fields(exclude=["event", "category", "reservation", "special_price"])
                tickets.append(ticket)
        Ticket.objects.bulk_create(tickets)

        if special_price is not None and special_price_used:
            special_price.status = SpecialPrice.Status.PENDING
            special_price.save(update_fields=["status", "updated_at"])

        logger.info(
            "reservation_created",
            event_id=str(self.event.pk),
            reservation_id=str(reservation.pk),
            ticket_count=len(tickets),
            has_special_price=special_price_used,
            discount_id=str(discount.pk) if discount else None,
        )
        return reservation
