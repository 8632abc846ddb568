import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction

from common.schema import ErrorDescriptor, ValidatedResponse
from events.models import ConfigurationKey, Event, WaitingQueueSubscription
from events.schema import WaitingQueueSubscriptionSchema

from . import configuration_service
from .code_resolver import ErrorCode, ErrorField
from .ticket_category_service import is_pre_sales

logger = structlog.get_logger(__name__)


def validate_subscription(event: Event, payload: WaitingQueueSubscriptionSchema) -> list[ErrorDescriptor]:
    """Check the subscription form, returning one error per invalid field."""
    errors: list[ErrorDescriptor] = []
    if not payload.first_name or len(payload.first_name) > 150:
        errors.append(ErrorDescriptor(field_name=ErrorField.FIRST_NAME, code=ErrorCode.FIRST_NAME_REQUIRED))
    if not payload.last_name or len(payload.last_name) > 150:
        errors.append(ErrorDescriptor(field_name=ErrorField.LAST_NAME, code=ErrorCode.LAST_NAME_REQUIRED))
    try:
        validate_email(payload.email)
    except DjangoValidationError:
        errors.append(ErrorDescriptor(field_name=ErrorField.EMAIL, code=ErrorCode.EMAIL_INVALID))
    if payload.selected_category and not event.ticket_categories.filter(pk=payload.selected_category).exists():
        errors.append(
            ErrorDescriptor(field_name=ErrorField.SELECTED_CATEGORY, code=ErrorCode.SELECTED_CATEGORY_INVALID)
        )
    return errors


def subscribe(event: Event, payload: WaitingQueueSubscriptionSchema) -> bool:
    """Add someone to the event's waiting queue.

    Returns:
        False when the waiting queue is disabled or the e-mail is already subscribed.
    """
    if not configuration_service.get_bool(ConfigurationKey.ENABLE_WAITING_QUEUE, event=event):
        return False

    if WaitingQueueSubscription.objects.filter(event=event, email__iexact=payload.email).exists():
        logger.info("waiting_queue_duplicate_subscription", event_id=str(event.pk))
        return False

    categories = list(event.ticket_categories.active())
    subscription_type = (
        WaitingQueueSubscription.SubscriptionType.PRE_SALES
        if is_pre_sales(categories, event.now())
        else WaitingQueueSubscription.SubscriptionType.SOLD_OUT
    )
    try:
        with transaction.atomic():
            subscription = WaitingQueueSubscription.objects.create(
                event=event,
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                selected_category_id=payload.selected_category,
                user_language=payload.user_language,
                subscription_type=subscription_type,
            )
    except IntegrityError:
        logger.info("waiting_queue_duplicate_subscription", event_id=str(event.pk))
        return False

    logger.info(
        "waiting_queue_subscribed",
        event_id=str(event.pk),
        subscription_id=str(subscription.pk),
        subscription_type=subscription_type,
    )
    return True


def subscribe_to_waiting_queue(event: Event, payload: WaitingQueueSubscriptionSchema) -> ValidatedResponse[bool]:
    """Validate the form and subscribe, reporting field errors instead of subscribing."""
    if errors := validate_subscription(event, payload):
        return ValidatedResponse[bool].failed(errors)
    return ValidatedResponse[bool].ok(subscribe(event, payload))
