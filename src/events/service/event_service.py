from django.db.models import Q

from events.models import ConfigurationKey, Event, PromoCodeDiscount

from . import configuration_service


def get_promotions_configuration(event: Event) -> dict[str, bool]:
    """Whether the code box should be shown on the event page, and how it is labelled.

    The box is only shown when a code could change something: a restricted
    category exists or a promo code is bound to the event or its organization.
    """
    has_codes = (
        event.ticket_categories.access_restricted().exists()
        or PromoCodeDiscount.objects.filter(
            Q(event=event) | Q(event__isnull=True, organization_id=event.organization_id)
        ).exists()
    )
    display_box = configuration_service.get_bool(ConfigurationKey.DISPLAY_DISCOUNT_CODE_BOX, event=event)
    return {
        "has_access_promotions": display_box and has_codes,
        "use_partner_code": configuration_service.get_bool(
            ConfigurationKey.USE_PARTNER_CODE_INSTEAD_OF_PROMOTIONAL, event=event
        ),
    }
