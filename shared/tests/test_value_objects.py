"""Date value objects shared by hotels and bookings."""

from __future__ import annotations

from datetime import date

import pytest

from shared.domain.value_objects import YearMonth


def test_parse_month_token():
    assert YearMonth.parse("2025-01") == YearMonth(2025, 1)
    assert str(YearMonth.parse("0042-07")) == "0042-07"


@pytest.mark.parametrize("token", ["2025-01\n", " 2025-01", "2025-1", "2025-13", "", None])
def test_parse_rejects_malformed_tokens(token):
    with pytest.raises(ValueError):
        YearMonth.parse(token)


def test_days_of_last_supported_month():
    days = list(YearMonth(9999, 12).days())

    assert len(days) == 31
    assert days[0] == date(9999, 12, 1)
    assert days[-1] == date(9999, 12, 31)
