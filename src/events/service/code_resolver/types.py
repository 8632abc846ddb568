"""Result types of code resolution."""

from dataclasses import dataclass, field

from events.models import PromoCodeDiscount, SpecialPrice

from .enums import ErrorCode, ErrorField, RejectionReason


@dataclass(frozen=True)
class NoCode:
    """No code was supplied."""


@dataclass(frozen=True)
class SpecialPriceCode:
    special_price: SpecialPrice


@dataclass(frozen=True)
class DiscountCode:
    discount: PromoCodeDiscount


ResolvedCode = NoCode | SpecialPriceCode | DiscountCode


@dataclass(frozen=True)
class InvalidOrExpiredCode:
    """The only error code resolution reports.

    Attributes:
        reason: The internal cause, never exposed to clients.
    """

    reason: RejectionReason
    field_name: str = ErrorField.PROMO_CODE
    code: str = ErrorCode.CODE_NOT_FOUND


@dataclass(frozen=True)
class CodeCheckResult:
    """Outcome of resolving a code against an event.

    A rejected code still carries what was found so callers can branch on its type.
    """

    code: ResolvedCode = field(default_factory=NoCode)
    error: InvalidOrExpiredCode | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def special_price(self) -> SpecialPrice | None:
        return self.code.special_price if isinstance(self.code, SpecialPriceCode) else None

    @property
    def discount(self) -> PromoCodeDiscount | None:
        return self.code.discount if isinstance(self.code, DiscountCode) else None
