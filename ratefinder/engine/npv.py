"""Net present value family: NPV, XNPV, MIRR.

Pure functions. No I/O.
"""

import math
from collections.abc import Sequence

from ratefinder.engine.cashflows import DateLike, build_series
from ratefinder.engine.residual import evaluate


def npv(rate: float, cashflows: Sequence[float]) -> float:
    """NPV = sum( cf[t] / (1+rate)^t ), t = 0 .. N-1."""
    f, _ = evaluate(rate, build_series(cashflows))
    return f


def xnpv(rate: float, cashflows: Sequence[float], dates: Sequence[DateLike]) -> float:
    """Date-weighted NPV with Actual/365 offsets from the earliest date.

    XNPV at an XIRR result should be ~0.
    """
    f, _ = evaluate(rate, build_series(cashflows, dates))
    return f


def mirr(cashflows: Sequence[float], finance_rate: float, reinvest_rate: float) -> float:
    """Modified IRR (numpy-financial formula).

    Positive flows are compounded at ``reinvest_rate``, negative flows are
    discounted at ``finance_rate``:

        MIRR = (PV(positives) / |PV(negatives)|)^(1/(n-1)) * (1+reinvest) - 1

    NaN when the series has no positive or no negative flow.
    """
    values = [float(v) for v in cashflows]
    n = len(values)
    positives = [v if v > 0 else 0.0 for v in values]
    negatives = [v if v < 0 else 0.0 for v in values]
    if n < 2 or not any(positives) or not any(negatives):
        return math.nan

    numer = abs(npv(reinvest_rate, positives))
    denom = abs(npv(finance_rate, negatives))
    return (numer / denom) ** (1.0 / (n - 1)) * (1.0 + reinvest_rate) - 1.0
