from __future__ import annotations

from ..core.exceptions import ValidationError


def require_month(month: int) -> int:
    try:
        month = int(month)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month: {month!r}") from None
    if not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}")
    return month


def require_year(year: int) -> int:
    try:
        year = int(year)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid year: {year!r}") from None
    if not 1 <= year <= 9999:
        raise ValidationError(f"Year out of range: {year}")
    return year


def clean_text(value) -> str:
    """Cell value as trimmed text ('' for empty cells)."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()
