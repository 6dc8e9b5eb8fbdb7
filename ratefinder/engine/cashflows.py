"""Cash-flow normalization: raw amounts (and dates) in, CashflowSeries out.

Pure functions. No I/O.
"""

from collections.abc import Sequence
from datetime import date, datetime

from ratefinder.engine.errors import InvalidInputError
from ratefinder.models.cashflows import CashFlow, CashflowSeries

DAYS_PER_YEAR = 365.0  # Actual/365

DateLike = date | datetime | str


def to_date(value: DateLike) -> date:
    """Coerce a date, datetime or ISO ``YYYY-MM-DD`` string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidInputError(f"Invalid date {value!r}: {e}") from e
    raise InvalidInputError(f"Unsupported date value: {value!r}")


def _to_amounts(amounts: Sequence[float]) -> list[float]:
    try:
        return [float(a) for a in amounts]
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Cash flow amounts must be numeric: {e}") from e


def year_fractions(dates: Sequence[DateLike]) -> list[float]:
    """Actual/365 offsets measured from the earliest date, not the first one."""
    parsed = [to_date(d) for d in dates]
    t0 = min(parsed)
    return [(d - t0).days / DAYS_PER_YEAR for d in parsed]


def build_series(
    amounts: Sequence[float],
    dates: Sequence[DateLike] | None = None,
) -> CashflowSeries:
    """Build a CashflowSeries for IRR (integer periods) or XIRR (dates).

    Raises InvalidInputError for an empty series, a length mismatch between
    amounts and dates, or values that cannot be read. The sign pattern is
    not checked; a series with no sign change simply fails to converge.
    """
    values = _to_amounts(amounts)
    if not values:
        raise InvalidInputError("Cash flow series is empty")

    if dates is None:
        offsets = [float(i) for i in range(len(values))]
    else:
        if len(dates) != len(values):
            raise InvalidInputError(
                f"Cash flows and dates must have the same length "
                f"({len(values)} != {len(dates)})"
            )
        offsets = year_fractions(dates)

    return CashflowSeries(
        flows=tuple(CashFlow(amount=a, offset=t) for a, t in zip(values, offsets))
    )
