"""Codes that unlock prices, discounts or hidden ticket categories.

Both kinds are managed from the admin; the public API only reads them.
"""

import typing as t
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q

from common.models import TimeStampedModel

from .event import Event
from .organization import Organization
from .ticket import TicketCategory


class SpecialPrice(TimeStampedModel):
    """A single-use code unlocking one seat of a ticket category at a specific price."""

    class Status(models.TextChoices):
        FREE = "free", "Free"
        PENDING = "pending", "Pending"
        TAKEN = "taken", "Taken"
        CANCELLED = "cancelled", "Cancelled"

    code = models.CharField(max_length=64, unique=True)
    ticket_category = models.ForeignKey(TicketCategory, on_delete=models.CASCADE, related_name="special_prices")
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    status = models.CharField(choices=Status.choices, max_length=20, default=Status.FREE, db_index=True)

    class Meta:
        ordering = ["ticket_category", "code"]

    def __str__(self) -> str:
        return f"{self.code} ({self.status})"


class PromoCodeDiscountQuerySet(models.QuerySet["PromoCodeDiscount"]):
    def for_event_or_organization(self, event_id: UUID, organization_id: UUID) -> t.Self:
        """Codes bound to the event, or organization-wide codes of its organization."""
        return self.filter(Q(event_id=event_id) | Q(event__isnull=True, organization_id=organization_id))


class PromoCodeDiscount(TimeStampedModel):
    """A reusable promotional code.

    DISCOUNT codes lower the price of the categories they apply to. ACCESS codes unlock
    a single access-restricted category (``hidden_category``) and may also carry a discount.
    ``discount_amount`` is a percentage for PERCENTAGE discounts and an amount in cents
    for FIXED_AMOUNT discounts.
    """

    class CodeType(models.TextChoices):
        DISCOUNT = "discount", "Discount"
        ACCESS = "access", "Access"

    class DiscountType(models.TextChoices):
        PERCENTAGE = "percentage", "Percentage"
        FIXED_AMOUNT = "fixed_amount", "Fixed amount"
        NONE = "none", "None"

    promo_code = models.CharField(max_length=64, db_index=True)
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name="promo_codes")
    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="promo_codes",
        help_text="Leave empty for a code valid on every event of the organization.",
    )
    code_type = models.CharField(choices=CodeType.choices, max_length=20, default=CodeType.DISCOUNT)
    discount_type = models.CharField(choices=DiscountType.choices, max_length=20, default=DiscountType.PERCENTAGE)
    discount_amount = models.PositiveIntegerField(default=0)
    max_usage = models.PositiveIntegerField(null=True, blank=True, help_text="Leave empty for unlimited usage.")
    valid_from = models.DateTimeField(null=True, blank=True)
    valid_to = models.DateTimeField(null=True, blank=True)
    categories = models.ManyToManyField(
        TicketCategory,
        blank=True,
        related_name="promo_codes",
        help_text="Restrict the discount to these categories. Empty means all categories.",
    )
    hidden_category = models.ForeignKey(
        TicketCategory,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="access_codes",
        help_text="The access-restricted category unlocked by an ACCESS code.",
    )

    objects = PromoCodeDiscountQuerySet.as_manager()

    class Meta:
        ordering = ["promo_code"]
        constraints = [
            models.UniqueConstraint(fields=["promo_code", "organization", "event"], name="unique_promo_code_scope"),
        ]

    def __str__(self) -> str:
        return self.promo_code

    def clean(self) -> None:
        """Validate type-specific constraints."""
        super().clean()
        if self.event_id and self.organization_id and self.event.organization_id != self.organization_id:
            raise DjangoValidationError({"event": "The event must belong to the code's organization."})
        if self.code_type == self.CodeType.ACCESS and not self.hidden_category_id:
            raise DjangoValidationError({"hidden_category": "An access code must unlock a category."})
        if self.hidden_category_id and not self.hidden_category.access_restricted:
            raise DjangoValidationError({"hidden_category": "Only access-restricted categories can be unlocked."})
        if self.discount_type == self.DiscountType.PERCENTAGE and self.discount_amount > 100:
            raise DjangoValidationError({"discount_amount": "A percentage discount cannot exceed 100."})
        if self.valid_from and self.valid_to and self.valid_to <= self.valid_from:
            raise DjangoValidationError({"valid_to": "The validity window must end after it starts."})

    def is_currently_valid(self, now: datetime) -> bool:
        """Whether ``now`` falls inside the half-open window [valid_from, valid_to)."""
        if self.valid_from is not None and now < self.valid_from:
            return False
        if self.valid_to is not None and now >= self.valid_to:
            return False
        return True

    @property
    def category_ids(self) -> frozenset[UUID]:
        """Ids of the categories the discount is restricted to. Empty means unrestricted."""
        if self._state.adding:
            return frozenset()
        return frozenset(category.pk for category in self.categories.all())

    @property
    def formatted_discount_amount(self) -> Decimal:
        """The fixed discount expressed in currency units."""
        return (Decimal(self.discount_amount) / 100).quantize(Decimal("0.01"))

    def discounted_price(self, price: Decimal) -> Decimal:
        if self.discount_type == self.DiscountType.PERCENTAGE:
            discount = (price * self.discount_amount / 100).quantize(Decimal("0.01"))
        elif self.discount_type == self.DiscountType.FIXED_AMOUNT:
            discount = self.formatted_discount_amount
        else:
            discount = Decimal("0")
        return max(Decimal("0.00"), price - discount)
