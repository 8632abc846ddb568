"""Rules a supplied code must satisfy.

Rules run in order and the first one that rejects the code wins. Special prices
take precedence: promo code rules only apply when no special price matched.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from events.models import PromoCodeDiscount, SpecialPrice

from .enums import RejectionReason

if TYPE_CHECKING:
    from .service import CodeResolver


class BaseCodeRule(abc.ABC):
    """A single check on the looked up special price or promo code."""

    def __init__(self, resolver: CodeResolver) -> None:
        self.resolver = resolver
        self.special_price: SpecialPrice | None = resolver.special_price
        self.discount: PromoCodeDiscount | None = resolver.discount

    @abc.abstractmethod
    def check(self) -> RejectionReason | None:
        """Return the reason the code is rejected, or None to continue to the next rule."""


class SpecialPriceCategoryRule(BaseCodeRule):
    """Rule #1: the special price must unlock an active category of this event."""

    def check(self) -> RejectionReason | None:
        if self.special_price is None:
            return None
        if not self.resolver.lookup.is_category_active_and_exists(
            self.special_price.ticket_category_id, self.resolver.event.pk
        ):
            return RejectionReason.CATEGORY_NOT_ACTIVE
        return None


class SpecialPriceStatusRule(BaseCodeRule):
    """Rule #2: the special price must still be free."""

    def check(self) -> RejectionReason | None:
        if self.special_price is not None and not self.resolver.lookup.is_special_price_free(self.special_price):
            return RejectionReason.SPECIAL_PRICE_NOT_FREE
        return None


class DiscountValidityRule(BaseCodeRule):
    """Rule #3: now, in the event's timezone, must be inside the promo code's validity window."""

    def check(self) -> RejectionReason | None:
        if self.special_price is not None or self.discount is None:
            return None
        now = self.resolver.lookup.current_time(self.resolver.event.zone)
        if not self.discount.is_currently_valid(now):
            return RejectionReason.OUTSIDE_VALIDITY_WINDOW
        return None


class DiscountUsageRule(BaseCodeRule):
    """Rule #4: a promo code with a maximum usage must not have reached it."""

    def check(self) -> RejectionReason | None:
        if self.special_price is not None or self.discount is None or self.discount.max_usage is None:
            return None
        usage = self.resolver.lookup.count_confirmed_usage(self.discount.pk, self.discount.category_ids)
        if self.discount.max_usage <= usage:
            return RejectionReason.USAGE_EXCEEDED
        return None


class UnknownCodeRule(BaseCodeRule):
    """Rule #5: the code must match something."""

    def check(self) -> RejectionReason | None:
        if self.special_price is None and self.discount is None:
            return RejectionReason.UNKNOWN_CODE
        return None


CODE_RULES: list[type[BaseCodeRule]] = [
    SpecialPriceCategoryRule,
    SpecialPriceStatusRule,
    DiscountValidityRule,
    DiscountUsageRule,
    UnknownCodeRule,
]
