from datetime import date, datetime

import pytest

from leave_service.core.dates import (
    inclusive_days,
    parse_day,
    ranges_overlap,
    require_balance,
    require_id,
    require_text,
)
from leave_service.core.errors import ValidationError


@pytest.mark.parametrize(
    "value",
    [
        "2025-01-10",
        "2025-01-10T15:30:00",
        "2025-01-10T00:00:00Z",
        "2025-01-10T08:00:00.123+02:00",
        " 2025-01-10 ",
        date(2025, 1, 10),
        datetime(2025, 1, 10, 23, 59),
    ],
)
def test_parse_day_strips_time_of_day(value):
    assert parse_day(value) == date(2025, 1, 10)


@pytest.mark.parametrize(
    "value",
    [
        "not-a-date",
        "2025-13-01",
        "20250110",
        "2025-W02-5",
        "2025-01-10junk",
        "2025-01-10T25",
        20250110,
        None,
    ],
)
def test_parse_day_rejects_garbage(value):
    with pytest.raises(ValidationError) as excinfo:
        parse_day(value, "startDate")
    assert excinfo.value.code == "invalid_date"
    assert "startDate" in str(excinfo.value)


def test_inclusive_days_counts_both_endpoints():
    assert inclusive_days(date(2025, 1, 10), date(2025, 1, 12)) == 3
    assert inclusive_days(date(2025, 1, 10), date(2025, 1, 10)) == 1
    # month boundary
    assert inclusive_days(date(2025, 1, 30), date(2025, 2, 2)) == 4


def test_ranges_overlap_boundary_days_count():
    a = (date(2025, 2, 1), date(2025, 2, 5))
    assert ranges_overlap(*a, date(2025, 2, 5), date(2025, 2, 10))
    assert ranges_overlap(*a, date(2025, 1, 20), date(2025, 2, 1))
    assert ranges_overlap(*a, date(2025, 2, 2), date(2025, 2, 3))
    assert ranges_overlap(*a, date(2025, 1, 1), date(2025, 3, 1))
    assert not ranges_overlap(*a, date(2025, 2, 6), date(2025, 2, 10))
    assert not ranges_overlap(*a, date(2025, 1, 1), date(2025, 1, 31))


def test_require_text():
    assert require_text("  Ada ", "name") == "Ada"
    for value in (None, "", "   ", 5):
        with pytest.raises(ValidationError) as excinfo:
            require_text(value, "name")
        assert excinfo.value.code == "missing_fields"


def test_require_id_accepts_integer_strings():
    assert require_id(3, "employeeId") == 3
    assert require_id("3", "employeeId") == 3


@pytest.mark.parametrize("value", [None, ""])
def test_require_id_missing(value):
    with pytest.raises(ValidationError) as excinfo:
        require_id(value, "employeeId")
    assert excinfo.value.code == "missing_fields"


@pytest.mark.parametrize("value", ["abc", 0, -1, True, 1.5])
def test_require_id_malformed(value):
    with pytest.raises(ValidationError) as excinfo:
        require_id(value, "employeeId")
    assert excinfo.value.code == "invalid_id"


def test_require_balance():
    assert require_balance(0) == 0
    assert require_balance(10) == 10
    assert require_balance(10.0) == 10
    assert isinstance(require_balance(10.0), int)

    with pytest.raises(ValidationError) as excinfo:
        require_balance(None)
    assert excinfo.value.code == "missing_fields"

    for value in ("10", True, -1, 2.5, float("nan"), float("inf")):
        with pytest.raises(ValidationError) as excinfo:
            require_balance(value)
        assert excinfo.value.code == "invalid_balance"
