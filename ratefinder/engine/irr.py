"""IRR and XIRR via the bounded Newton-Raphson solver.

Arguments left as None fall back to ``settings`` (``default_guess``,
``default_tol``, ``early_exit``). Pure functions. No I/O.
"""

from collections.abc import Sequence

from ratefinder.config import settings
from ratefinder.engine.cashflows import DateLike, build_series
from ratefinder.engine.solver import solve
from ratefinder.models.cashflows import CashflowSeries
from ratefinder.models.results import IrrResult, SolverResult, XirrResult


def _solve(
    series: CashflowSeries,
    guess: float | None,
    tol: float | None,
    early_exit: bool | None,
) -> SolverResult:
    if guess is None:
        guess = settings.default_guess
    if tol is None:
        tol = settings.default_tol
    if early_exit is None:
        early_exit = settings.early_exit
    return solve(series, guess, tol, early_exit=early_exit)


def irr(
    cashflows: Sequence[float],
    guess: float | None = None,
    tol: float | None = None,
    *,
    early_exit: bool | None = None,
) -> IrrResult:
    """Internal rate of return for evenly spaced cash flows.

    cashflows[0] is "now"; each following amount is one period later.
    Returns irr=None with converged=False when Newton's method does not
    settle within the iteration budget. Raises InvalidInputError for an
    empty series.
    """
    result = _solve(build_series(cashflows), guess, tol, early_exit)
    return IrrResult(irr=result.rate, iterations=result.iterations, converged=result.converged)


def xirr(
    cashflows: Sequence[float],
    dates: Sequence[DateLike],
    guess: float | None = None,
    tol: float | None = None,
    *,
    early_exit: bool | None = None,
) -> XirrResult:
    """Internal rate of return for date-stamped cash flows (Actual/365).

    Dates need not be sorted; time is measured from the earliest one.
    Raises InvalidInputError for an empty series or mismatched lengths.
    """
    result = _solve(build_series(cashflows, dates), guess, tol, early_exit)
    return XirrResult(xirr=result.rate, iterations=result.iterations, converged=result.converged)


def annualize_rate(rate: float, periods_per_year: int) -> float:
    """Compound a per-period rate to an annual one, e.g. monthly IRR -> annual."""
    if periods_per_year <= 0:
        raise ValueError("periods_per_year must be > 0")
    return (1.0 + rate) ** periods_per_year - 1.0
