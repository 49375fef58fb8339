"""
Tests for billing period parsing and arithmetic
"""

from datetime import date, datetime

import pytest

from findclo.core.exceptions import InvalidPeriodError, ValidationError
from findclo.domains.billing.models import BillingPeriod, month_bounds


class TestBillingPeriod:
    def test_single_day_period_is_valid(self):
        period = BillingPeriod(date(2024, 3, 1), date(2024, 3, 1))
        assert period.start_date == period.end_date

    def test_end_before_start_is_rejected(self):
        with pytest.raises(InvalidPeriodError) as exc_info:
            BillingPeriod(date(2024, 3, 31), date(2024, 3, 1))
        assert exc_info.value.message == "endDate must be equal to or after startDate"

    def test_period_errors_are_validation_errors(self):
        with pytest.raises(ValidationError):
            BillingPeriod(date(2024, 3, 2), date(2024, 3, 1))

    def test_datetimes_are_rejected(self):
        with pytest.raises(InvalidPeriodError):
            BillingPeriod(datetime(2024, 3, 1, 10), date(2024, 3, 31))

    def test_bounds_cover_the_whole_last_day(self):
        period = BillingPeriod(date(2024, 3, 1), date(2024, 3, 31))
        assert period.starts_at.isoformat() == "2024-03-01T00:00:00+00:00"
        assert period.ends_before.isoformat() == "2024-04-01T00:00:00+00:00"

    def test_overlap_is_symmetric_and_inclusive(self):
        march = BillingPeriod(date(2024, 3, 1), date(2024, 3, 31))
        last_day = BillingPeriod(date(2024, 3, 31), date(2024, 4, 15))
        april = BillingPeriod(date(2024, 4, 1), date(2024, 4, 30))

        assert march.overlaps(last_day)
        assert last_day.overlaps(march)
        assert not march.overlaps(april)
        assert not april.overlaps(march)

    def test_contained_period_overlaps(self):
        march = BillingPeriod(date(2024, 3, 1), date(2024, 3, 31))
        mid_march = BillingPeriod(date(2024, 3, 10), date(2024, 3, 12))
        assert march.overlaps(mid_march)
        assert mid_march.overlaps(march)

    def test_month_key_and_str(self):
        period = BillingPeriod(date(2024, 3, 1), date(2024, 3, 31))
        assert period.month_key == "2024-03"
        assert str(period) == "2024-03-01..2024-03-31"


class TestPeriodConstructors:
    def test_from_strings(self):
        period = BillingPeriod.from_strings("2024-03-01", "2024-03-31")
        assert period == BillingPeriod(date(2024, 3, 1), date(2024, 3, 31))

    def test_from_strings_accepts_timestamps(self):
        period = BillingPeriod.from_strings("2024-03-01T00:00:00Z", "2024-03-31")
        assert period.start_date == date(2024, 3, 1)

    @pytest.mark.parametrize("start, end", [(None, "2024-03-31"), ("2024-03-01", ""), (None, None)])
    def test_from_strings_missing_values(self, start, end):
        with pytest.raises(InvalidPeriodError) as exc_info:
            BillingPeriod.from_strings(start, end)
        assert exc_info.value.message == "Missing startDate or endDate parameters"

    @pytest.mark.parametrize("start, end", [("2024-13-01", "2024-03-31"), ("yesterday", "2024-03-31")])
    def test_from_strings_unparsable_values(self, start, end):
        with pytest.raises(InvalidPeriodError) as exc_info:
            BillingPeriod.from_strings(start, end)
        assert exc_info.value.message.startswith("Invalid startDate or endDate format")

    def test_previous_month(self):
        period = BillingPeriod.previous_month(date(2024, 3, 15))
        assert period == BillingPeriod(date(2024, 2, 1), date(2024, 2, 29))

    def test_previous_month_wraps_the_year(self):
        period = BillingPeriod.previous_month(date(2025, 1, 1))
        assert period == BillingPeriod(date(2024, 12, 1), date(2024, 12, 31))

    def test_month_bounds(self):
        assert month_bounds("2023-02") == BillingPeriod(date(2023, 2, 1), date(2023, 2, 28))

    @pytest.mark.parametrize("value", ["2024", "2024-3-01", "March", "2024-13", ""])
    def test_month_bounds_rejects_malformed_keys(self, value):
        with pytest.raises(InvalidPeriodError):
            month_bounds(value)
