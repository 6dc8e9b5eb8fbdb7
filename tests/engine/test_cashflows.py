from datetime import date, datetime
from decimal import Decimal

import pytest

from ratefinder.engine.cashflows import build_series, to_date, year_fractions
from ratefinder.engine.errors import InvalidInputError


class TestBuildSeriesPeriodic:
    def test_offsets_are_period_indices(self):
        series = build_series([-100, 50, 60])
        assert series.offsets == [0.0, 1.0, 2.0]
        assert series.amounts == [-100.0, 50.0, 60.0]

    def test_accepts_decimals(self):
        series = build_series([Decimal("-100"), Decimal("110")])
        assert series.amounts == [-100.0, 110.0]

    def test_empty_rejected(self):
        with pytest.raises(InvalidInputError):
            build_series([])

    def test_invalid_input_is_value_error(self):
        """Callers catching ValueError also catch shape errors."""
        with pytest.raises(ValueError):
            build_series([])

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidInputError):
            build_series([-100, "abc"])

    def test_no_sign_change_accepted(self):
        series = build_series([1.0, 2.0, 3.0])
        assert len(series) == 3

    def test_series_is_immutable(self):
        series = build_series([-1.0, 1.0])
        with pytest.raises(AttributeError):
            series.flows = ()


class TestBuildSeriesDated:
    def test_actual_365_offsets(self, excel_xirr_cashflows, excel_xirr_dates):
        series = build_series(excel_xirr_cashflows, excel_xirr_dates)
        assert series.offsets[0] == 0.0
        # 2008 is a leap year: Jan 1 -> Mar 1 is 60 days
        assert series.offsets[1] == pytest.approx(60 / 365.0)
        assert series.offsets[-1] == pytest.approx(456 / 365.0)

    def test_reference_is_earliest_date(self):
        """Unsorted input: t=0 is the minimum date, not the first element."""
        series = build_series(
            [2750.0, -10000.0, 4250.0],
            [date(2008, 3, 1), date(2008, 1, 1), date(2008, 10, 30)],
        )
        assert series.offsets[1] == 0.0
        assert series.offsets[0] == pytest.approx(60 / 365.0)
        assert all(t >= 0 for t in series.offsets)

    def test_length_mismatch_rejected(self, excel_xirr_cashflows, excel_xirr_dates):
        with pytest.raises(InvalidInputError, match="same length"):
            build_series(excel_xirr_cashflows, excel_xirr_dates[:-1])

    def test_iso_strings_accepted(self, semiannual_cashflows, semiannual_dates):
        series = build_series(semiannual_cashflows, semiannual_dates)
        assert series.offsets[1] == pytest.approx(181 / 365.0)

    def test_bad_date_rejected(self):
        with pytest.raises(InvalidInputError):
            build_series([-1.0, 1.0], ["2025-01-01", "not-a-date"])


class TestDates:
    def test_datetime_truncated_to_date(self):
        assert to_date(datetime(2024, 5, 6, 13, 30)) == date(2024, 5, 6)

    def test_unsupported_type(self):
        with pytest.raises(InvalidInputError):
            to_date(20240506)

    def test_year_fractions_single_date(self):
        assert year_fractions([date(2024, 1, 1)]) == [0.0]
