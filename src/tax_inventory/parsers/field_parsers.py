"""Tolerant field parsers for pasted inventory data.

Every parser here is total: malformed input produces a documented default
(None for dates, 0 for amounts, 1 for quantities) rather than an exception,
so a half-edited paste can still be previewed.
"""

import re
from datetime import datetime
from decimal import Decimal, InvalidOperation

from dateutil.parser import isoparse  # type: ignore[import-untyped]

# Date formats to try, in order
DATE_FORMATS = [
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%Y/%m/%d",
    "%d-%m-%Y",
    "%b %d, %Y",
    "%B %d, %Y",
]

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_NUMERIC_PREFIX = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")
_INTEGER_PREFIX = re.compile(r"^\s*[-+]?\d+")


def parse_flexible_date(date_str: str | None) -> str | None:
    """Parse a date string using various formats.

    Args:
        date_str: Date text such as "01/15/2025", "2025-01-15" or
            "Jan 15, 2025".

    Returns:
        ISO date string (YYYY-MM-DD) or None if no format matches.
    """
    if not date_str or not date_str.strip():
        return None

    text = date_str.strip()

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue

    try:
        return isoparse(text).date().isoformat()
    except (ValueError, OverflowError):
        return None


def parse_currency(value: str | int | float | Decimal | None) -> Decimal:
    """Parse a currency amount, handling symbols and thousands separators.

    Everything other than digits, '.' and '-' is discarded and the leading
    numeric part is used, so "$1,234.56" gives 1234.56 and "USD 12.50 ea"
    gives 12.50.

    Args:
        value: Raw text or an already-numeric value.

    Returns:
        The amount as a Decimal, or Decimal("0") when nothing parses.
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")

    if isinstance(value, (int, float)):
        try:
            parsed = Decimal(str(value))
        except InvalidOperation:
            return Decimal("0")
        return parsed if parsed.is_finite() else Decimal("0")

    cleaned = _NON_NUMERIC.sub("", value)
    match = _NUMERIC_PREFIX.match(cleaned)
    if match is None:
        return Decimal("0")

    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return Decimal("0")


def parse_quantity(value: str | int | None) -> int:
    """Parse a unit count; anything unparseable or zero counts as 1."""
    if isinstance(value, int):
        return value or 1
    if not value:
        return 1

    match = _INTEGER_PREFIX.match(value)
    if match is None:
        return 1
    return int(match.group(0)) or 1
