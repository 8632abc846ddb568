"""Resolution of special price and promo codes.

A code entered by a buyer is either a single-use special price or a reusable
promo code. This package resolves it and decides how it affects each category.
"""

from .enums import ErrorCode, ErrorField, RejectionReason
from .lookups import CodeLookup, DjangoCodeLookup
from .predicates import compute_max_tickets, should_apply_discount, should_display_restricted_category
from .service import CodeResolver, normalize_code, resolve_code
from .types import CodeCheckResult, DiscountCode, InvalidOrExpiredCode, NoCode, ResolvedCode, SpecialPriceCode

__all__ = [
    "ErrorCode",
    "ErrorField",
    "RejectionReason",
    "CodeLookup",
    "DjangoCodeLookup",
    "CodeResolver",
    "normalize_code",
    "resolve_code",
    "CodeCheckResult",
    "DiscountCode",
    "InvalidOrExpiredCode",
    "NoCode",
    "ResolvedCode",
    "SpecialPriceCode",
    "compute_max_tickets",
    "should_apply_discount",
    "should_display_restricted_category",
]
