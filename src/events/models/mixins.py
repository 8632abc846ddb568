import typing as t
import zoneinfo

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.text import slugify


class SlugFromNameMixin(models.Model):
    class Meta:
        abstract = True

    def save(self, *args: t.Any, **kwargs: t.Any) -> None:
        """Override save to auto-create slug."""
        if not self.slug:  # type: ignore[has-type]
            self.slug = slugify(self.name)  # type: ignore[attr-defined]
        super().save(*args, **kwargs)


def validate_timezone(value: str) -> None:
    """Reject anything that is not an IANA timezone name."""
    try:
        zoneinfo.ZoneInfo(value)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"{value} is not a valid timezone.") from e
