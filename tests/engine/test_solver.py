import math

import pytest

from ratefinder.engine import solver
from ratefinder.engine.cashflows import build_series
from ratefinder.engine.residual import evaluate
from ratefinder.engine.solver import (
    MAX_ITERATIONS,
    classify,
    initial_state,
    newton_step,
    solve,
)
from ratefinder.models.results import SolverState


class TestNewtonStep:
    def test_returns_new_state(self, textbook_cashflows):
        series = build_series(textbook_cashflows)
        start = initial_state(series, 0.1)
        nxt = newton_step(start, series)
        assert nxt is not start
        assert start.rate == 0.1
        assert nxt.rate == pytest.approx(0.1 - start.residual / start.derivative)

    def test_carries_residual_at_new_rate(self, textbook_cashflows):
        series = build_series(textbook_cashflows)
        nxt = newton_step(initial_state(series, 0.1), series)
        assert (nxt.residual, nxt.derivative) == evaluate(nxt.rate, series)

    def test_zero_derivative_gives_nan_rate(self):
        series = build_series([5.0])
        nxt = newton_step(initial_state(series, 0.1), series)
        assert math.isnan(nxt.rate)
        assert math.isnan(nxt.residual)


class TestClassify:
    def test_converged_rounds_to_ten_places(self):
        state = SolverState(rate=0.123456789012345, residual=1e-9, derivative=-5.0)
        result = classify(state, tol=1e-7, iterations=4)
        assert result.converged
        assert result.rate == pytest.approx(0.123456789, abs=1e-12)
        assert result.iterations == 4

    def test_residual_above_tol(self):
        state = SolverState(rate=0.2, residual=0.5, derivative=-5.0)
        result = classify(state, tol=1e-7, iterations=16)
        assert not result.converged
        assert result.rate is None

    def test_nan_never_converges(self):
        state = SolverState(rate=math.nan, residual=math.nan, derivative=math.nan)
        assert not classify(state, tol=1.0, iterations=16).converged


class TestSolve:
    def test_early_exit_stops_before_bound(self, textbook_cashflows):
        result = solve(build_series(textbook_cashflows), 0.1, 1e-7)
        assert result.converged
        assert 0 < result.iterations < MAX_ITERATIONS

    def test_fixed_count_reports_bound(self, textbook_cashflows):
        result = solve(build_series(textbook_cashflows), 0.1, 1e-7, early_exit=False)
        assert result.converged
        assert result.iterations == MAX_ITERATIONS

    def test_both_modes_agree(self, textbook_cashflows):
        series = build_series(textbook_cashflows)
        early = solve(series, 0.1, 1e-7)
        fixed = solve(series, 0.1, 1e-7, early_exit=False)
        assert early.rate == pytest.approx(fixed.rate, abs=1e-8)

    def test_guess_already_at_root(self):
        result = solve(build_series([-100.0, 110.0]), 0.1, 1e-7)
        assert result.converged
        assert result.iterations == 0
        assert result.rate == pytest.approx(0.1)

    def test_budget_too_small(self, textbook_cashflows):
        result = solve(build_series(textbook_cashflows), 0.1, 1e-7, max_iterations=1)
        assert not result.converged
        assert result.rate is None
        assert result.iterations == 1

    def test_degenerate_derivative_completes(self):
        """A zero derivative yields a well-formed non-converged result."""
        result = solve(build_series([5.0]), 0.1, 1e-7)
        assert not result.converged
        assert result.rate is None
        assert result.iterations == MAX_ITERATIONS

    @pytest.mark.parametrize("early_exit", [True, False])
    def test_undefined_discount_factor_completes(self, early_exit):
        """A seed at or below -1 has no NPV; the NaN state runs out the budget."""
        result = solve(build_series([-100.0, 110.0]), -1.5, 1e-7, early_exit=early_exit)
        assert not result.converged
        assert result.rate is None
        assert result.iterations == MAX_ITERATIONS

    def test_overflowing_discount_factor_completes(self):
        """(1e-6) ** -401 overflows a float."""
        result = solve(build_series([-100.0] + [0.0] * 400 + [1e6]), -0.999999, 1e-7)
        assert not result.converged
        assert result.rate is None

    def test_one_evaluation_per_step(self, textbook_cashflows, monkeypatch):
        """Fixed-count mode evaluates the seed plus one residual per step, nothing more."""
        calls = []

        def counting_evaluate(rate, series):
            calls.append(rate)
            return evaluate(rate, series)

        monkeypatch.setattr(solver, "evaluate", counting_evaluate)
        solve(build_series(textbook_cashflows), 0.1, 1e-7, early_exit=False)
        assert len(calls) == MAX_ITERATIONS + 1

    def test_non_convergence_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="ratefinder.engine.solver"):
            solve(build_series([1.0, 2.0, 3.0]), 0.1, 1e-7)
        assert "did not converge" in caplog.text
