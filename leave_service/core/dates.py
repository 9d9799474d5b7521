"""
Date and field helpers shared by the employee directory and the leave ledger.

Everything here works at whole-day granularity and raises
``ValidationError`` for input the caller has to fix.
"""
import math
import re
from datetime import date, datetime
from typing import Any

from leave_service.core.errors import ValidationError

# YYYY-MM-DD, optionally followed by an ISO time-of-day and offset
_DAY_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)


def parse_day(value: Any, field: str = "date") -> date:
    """
    Normalize ``value`` to a calendar day.

    - ``date`` is returned as-is, ``datetime`` loses its time-of-day
    - ``YYYY-MM-DD`` strings are parsed directly
    - full ISO timestamps are truncated to their day
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        match = _DAY_RE.match(value.strip())
        if match:
            try:
                return datetime.strptime(match.group(1), "%Y-%m-%d").date()
            except ValueError:
                pass
    raise ValidationError(
        f"{field} must be a calendar date (YYYY-MM-DD)",
        code="invalid_date",
    )


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def ranges_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> bool:
    # shared boundary day counts as overlap
    return start_a <= end_b and end_a >= start_b


def require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"Missing required field: {field}",
            code="missing_fields",
        )
    return value.strip()


def require_id(value: Any, field: str) -> int:
    """
    Positive integer id. Integer strings ("3") are accepted.
    """
    if value is None or value == "":
        raise ValidationError(
            f"Missing required field: {field}",
            code="missing_fields",
        )
    invalid = ValidationError(f"{field} must be a positive integer", code="invalid_id")
    if isinstance(value, bool) or isinstance(value, float):
        raise invalid
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise invalid from None
    if parsed < 1:
        raise invalid
    return parsed


def require_balance(value: Any) -> int:
    if value is None:
        raise ValidationError(
            "Missing required field: leaveBalance",
            code="missing_fields",
        )
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            "leaveBalance must be a non-negative number",
            code="invalid_balance",
        )
    # no partial days: 10.0 is fine, 2.5 / nan / inf are not
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        raise ValidationError(
            "leaveBalance must be a whole number of days",
            code="invalid_balance",
        )
    if value < 0:
        raise ValidationError(
            "leaveBalance must be a non-negative number",
            code="invalid_balance",
        )
    return int(value)
