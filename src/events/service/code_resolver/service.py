"""CodeResolver: resolves a raw code against an event."""

import structlog

from events.models import Event

from .lookups import CodeLookup, DjangoCodeLookup
from .rules import CODE_RULES, BaseCodeRule
from .types import CodeCheckResult, DiscountCode, InvalidOrExpiredCode, NoCode, ResolvedCode, SpecialPriceCode

logger = structlog.get_logger(__name__)


def normalize_code(raw_code: str | None) -> str | None:
    """Strip the code. Empty or whitespace-only codes mean no code."""
    if raw_code is None:
        return None
    return raw_code.strip() or None


class CodeResolver:
    """Resolves a code to a special price or a promo code of an event.

    Both kinds are looked up since the caller does not know which one was entered.
    When both match, the special price wins.
    """

    def __init__(self, event: Event, raw_code: str | None, lookup: CodeLookup | None = None) -> None:
        self.event = event
        self.lookup: CodeLookup = lookup or DjangoCodeLookup()
        self.code = normalize_code(raw_code)
        if self.code is None:
            self.special_price = None
            self.discount = None
        else:
            self.special_price = self.lookup.find_special_price_by_code(self.code)
            self.discount = self.lookup.find_promo_code_discount(event.pk, event.organization_id, self.code)
        self._rules: list[BaseCodeRule] = [rule(self) for rule in CODE_RULES]

    @property
    def resolved(self) -> ResolvedCode:
        if self.special_price is not None:
            return SpecialPriceCode(self.special_price)
        if self.discount is not None:
            return DiscountCode(self.discount)
        return NoCode()

    def resolve(self) -> CodeCheckResult:
        if self.code is None:
            return CodeCheckResult(code=NoCode())

        for rule in self._rules:
            if reason := rule.check():
                logger.info(
                    "code_rejected",
                    event_id=str(self.event.pk),
                    rule=type(rule).__name__,
                    reason=reason.value,
                )
                return CodeCheckResult(code=self.resolved, error=InvalidOrExpiredCode(reason=reason))

        return CodeCheckResult(code=self.resolved)


def resolve_code(event: Event, raw_code: str | None, lookup: CodeLookup | None = None) -> CodeCheckResult:
    """Resolve a code entered for an event.

    Never raises on bad input: an unknown, used or expired code is reported
    through the result's ``error``.
    """
    return CodeResolver(event, raw_code, lookup=lookup).resolve()
