"""Bounded Newton-Raphson solver shared by IRR and XIRR.

Each step evaluates the residual exactly once and carries (rate, f, fp)
forward as an immutable SolverState, so the convergence check at the end
reuses the last residual instead of re-scanning the series.

Pure computation apart from debug logging.
"""

import logging
import math

from ratefinder.engine.residual import evaluate
from ratefinder.models.cashflows import CashflowSeries
from ratefinder.models.results import SolverResult, SolverState

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 16
RATE_DECIMALS = 10


def initial_state(series: CashflowSeries, guess: float) -> SolverState:
    f, fp = evaluate(guess, series)
    return SolverState(rate=float(guess), residual=f, derivative=fp)


def newton_step(state: SolverState, series: CashflowSeries) -> SolverState:
    """Advance one Newton update: r' = r - f/f'.

    A zero derivative leaves the update undefined; the next rate becomes NaN
    and stays NaN for the rest of the chain.
    """
    if state.derivative == 0.0:
        next_rate = math.nan
    else:
        next_rate = state.rate - state.residual / state.derivative
    f, fp = evaluate(next_rate, series)
    return SolverState(rate=next_rate, residual=f, derivative=fp)


def is_converged(state: SolverState, tol: float) -> bool:
    # NaN compares False, so undefined states never converge
    return math.isfinite(state.rate) and abs(state.residual) < tol


def classify(state: SolverState, tol: float, iterations: int) -> SolverResult:
    """Turn the final state into a SolverResult."""
    if is_converged(state, tol):
        return SolverResult(
            rate=round(state.rate, RATE_DECIMALS),
            iterations=iterations,
            converged=True,
        )
    return SolverResult(rate=None, iterations=iterations, converged=False)


def solve(
    series: CashflowSeries,
    guess: float,
    tol: float,
    max_iterations: int = MAX_ITERATIONS,
    early_exit: bool = True,
) -> SolverResult:
    """Find the rate where the series' NPV is zero.

    With ``early_exit`` the loop stops once |f| < tol and ``iterations``
    counts the updates actually made. Without it, every one of the
    ``max_iterations`` steps runs and ``iterations`` reports that bound.
    """
    state = initial_state(series, guess)
    steps = 0
    for _ in range(max_iterations):
        if early_exit and is_converged(state, tol):
            break
        state = newton_step(state, series)
        steps += 1

    result = classify(state, tol, steps if early_exit else max_iterations)
    if not result.converged:
        logger.debug(
            "Newton solver did not converge after %d steps (guess=%s, rate=%s, residual=%s)",
            steps, guess, state.rate, state.residual,
        )
    return result
