"""Input rules shared by the reservation, ledger and fleet services.

Every helper raises :class:`ValidationError` with a user-facing message and
the offending field, so handlers never assemble error payloads themselves.
"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
import math
from typing import Any, Iterable

from transfer_admin.core.exceptions import ValidationError

MISSING_FIELDS = "Zorunlu alanlar eksik"

# Column limits: INTEGER counts and Numeric(10, 2) money
MAX_COUNT = 2**31 - 1
MAX_MONEY = Decimal("99999999.99")
CENT = Decimal("0.01")


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(values: dict[str, Any], message: str = MISSING_FIELDS) -> None:
    missing = [name for name, v in values.items() if is_blank(v)]
    if missing:
        raise ValidationError(f"{message}: {', '.join(missing)}", field=missing[0])


def clean_optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_id(raw: Any, message: str = "Geçersiz ID") -> int:
    """Parse a path id; only positive integers are accepted."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        raise ValidationError(message, field="id")
    if value <= 0:
        raise ValidationError(message, field="id")
    return value


def check_enum(value: str, allowed: Iterable[str], message: str, field: str) -> str:
    if value not in allowed:
        raise ValidationError(message, field=field)
    return value


def passenger_names(raw: Any) -> list[str]:
    """Non-blank string entries, stripped, in submission order."""
    if not isinstance(raw, list):
        return []
    return [p.strip() for p in raw if isinstance(p, str) and p.strip()]


def coerce_count(raw: Any) -> int:
    """Coerce to a whole number in [0, MAX_COUNT], 0 when not a finite number."""
    if raw is None or isinstance(raw, bool):
        return 0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value):
        return 0
    return min(MAX_COUNT, max(0, int(value)))


def parse_decimal(raw: Any, message: str, field: str, positive: bool = False) -> Decimal:
    """Parse a money value rounded to cents; range checks apply to the rounded value."""
    if isinstance(raw, bool):
        raise ValidationError(message, field=field)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValidationError(message, field=field)
    if not math.isfinite(value):
        raise ValidationError(message, field=field)
    try:
        amount = Decimal(str(value)).quantize(CENT)
    except InvalidOperation:
        raise ValidationError(message, field=field)
    if amount < 0 or amount > MAX_MONEY or (positive and amount == 0):
        raise ValidationError(message, field=field)
    return amount


def parse_date(raw: str, field: str) -> date:
    """Accept 'YYYY-MM-DD' or a full ISO timestamp (date part kept)."""
    s = raw.strip()
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    if len(s) == 10:
        try:
            return date.fromisoformat(s)
        except ValueError:
            pass
    raise ValidationError("Geçersiz tarih", field=field)
