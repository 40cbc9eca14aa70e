"""Tests for calendar period parsing, normalization and date arithmetic."""

from datetime import date, datetime

import pytest
from dateutil.relativedelta import relativedelta

from ficcbasics.schedule.period import ZERO, Period, PeriodUnit


class TestConstruction:
    """Factories and component validation."""

    def test_defaults_to_zero(self):
        assert Period() == ZERO
        assert ZERO.is_zero()

    def test_factories(self):
        assert Period.of_years(2) == Period(years=2)
        assert Period.of_months(18) == Period(months=18)
        assert Period.of_days(3) == Period(days=3)

    def test_weeks_are_stored_as_days(self):
        assert Period.of_weeks(2) == Period(days=14)

    def test_months_and_years_are_distinct(self):
        assert Period.of_months(12) != Period.of_years(1)

    @pytest.mark.parametrize("bad", [1.5, "1", None, True])
    def test_non_integer_components_rejected(self, bad):
        with pytest.raises(TypeError):
            Period(months=bad)

    def test_total_months(self):
        assert Period(2, 3, 40).to_total_months() == 27

    def test_sign_checks(self):
        assert Period(0, -1, 0).is_negative()
        assert Period(1, 0, -1).is_negative()
        assert not Period(1, 2, 3).is_negative()
        assert Period(1, -2, 3).negated() == Period(-1, 2, -3)


class TestParse:
    """ISO-8601 period grammar."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("P1Y2M3D", Period(1, 2, 3)),
            ("P3M", Period(0, 3, 0)),
            ("p3m", Period(0, 3, 0)),
            ("P2W", Period(0, 0, 14)),
            ("p2w3d", Period(0, 0, 17)),
            ("P0D", ZERO),
            ("P-3M", Period(0, -3, 0)),
            ("-P1Y2M", Period(-1, -2, 0)),
            ("+P6M", Period(0, 6, 0)),
        ],
    )
    def test_valid_text(self, text, expected):
        assert Period.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "P", "3M", "P1.5M", "PT1H", "P3M2Y", "P 3M"])
    def test_invalid_text(self, text):
        with pytest.raises(ValueError, match="cannot be parsed"):
            Period.parse(text)

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            Period.parse(None)


class TestFormat:
    """Default textual rendering."""

    @pytest.mark.parametrize(
        "period, text",
        [
            (ZERO, "P0D"),
            (Period(1, 6, 0), "P1Y6M"),
            (Period(0, 0, 14), "P14D"),
            (Period(0, -3, 0), "P-3M"),
            (Period(1, 0, 5), "P1Y5D"),
        ],
    )
    def test_str(self, period, text):
        assert str(period) == text


class TestNormalized:
    """Folding months into years."""

    def test_eighteen_months(self):
        assert Period(0, 18, 0).normalized() == Period(1, 6, 0)

    def test_days_untouched(self):
        assert Period(1, 14, 3).normalized() == Period(2, 2, 3)

    def test_negative_months_keep_sign(self):
        assert Period(0, -18, 0).normalized() == Period(-1, -6, 0)

    def test_mixed_signs_fold_to_total(self):
        assert Period(2, -18, 5).normalized() == Period(0, 6, 5)

    def test_already_normalized_returns_self(self):
        period = Period(1, 6, 0)
        assert period.normalized() is period


class TestUnits:
    """Unit access used by generic date arithmetic."""

    def test_units_exclude_weeks(self):
        assert Period.of_weeks(1).units == (PeriodUnit.YEARS, PeriodUnit.MONTHS, PeriodUnit.DAYS)

    def test_get(self):
        period = Period(1, 2, 3)
        assert period.get(PeriodUnit.YEARS) == 1
        assert period.get(PeriodUnit.MONTHS) == 2
        assert period.get(PeriodUnit.DAYS) == 3

    def test_get_weeks_unsupported(self):
        with pytest.raises(ValueError, match="Unsupported unit"):
            Period.of_weeks(2).get(PeriodUnit.WEEKS)


class TestArithmetic:
    """Calendar addition and subtraction."""

    def test_to_relativedelta(self):
        assert Period(1, 2, 3).to_relativedelta() == relativedelta(years=1, months=2, days=3)

    def test_month_end_is_clamped(self):
        assert Period.of_months(1).add_to(date(2024, 1, 31)) == date(2024, 2, 29)

    def test_months_applied_before_days(self):
        assert Period(1, 1, 1).add_to(date(2023, 1, 31)) == date(2024, 3, 1)

    def test_subtract(self):
        assert Period(0, 1, 1).subtract_from(date(2024, 3, 31)) == date(2024, 2, 28)
        assert Period.of_years(1).subtract_from(date(2024, 2, 29)) == date(2023, 2, 28)

    def test_datetime_keeps_time(self):
        result = Period.of_months(1).add_to(datetime(2024, 1, 31, 12, 30))
        assert result == datetime(2024, 2, 29, 12, 30)

    def test_year_overflow_propagates(self):
        with pytest.raises(ValueError):
            Period.of_years(10_000).add_to(date(2024, 1, 1))

    def test_day_overflow_propagates(self):
        with pytest.raises(OverflowError):
            Period.of_days(1).subtract_from(date.min)
