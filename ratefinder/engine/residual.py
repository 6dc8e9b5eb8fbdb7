"""NPV residual and its derivative at a trial rate.

f(r)  = sum( cf * (1+r)^-t )
f'(r) = sum( -t * cf * (1+r)^-(t+1) )

Both sums come out of one pass over the series. Pure function. No I/O.
"""

import math

from ratefinder.models.cashflows import CashflowSeries

NAN = math.nan


def evaluate(rate: float, series: CashflowSeries) -> tuple[float, float]:
    """Return (f, fp) at ``rate``.

    A base 1+rate <= 0 (or a NaN rate) has no real power for fractional
    offsets, so the pair comes back as (nan, nan). Overflowing powers do the
    same. Callers treat NaN as "not converged".
    """
    base = 1.0 + rate
    if not base > 0.0:
        return NAN, NAN

    f = 0.0
    fp = 0.0
    try:
        for cf in series:
            discount = base ** -cf.offset
            f += cf.amount * discount
            fp -= cf.offset * cf.amount * discount / base
    except OverflowError:
        return NAN, NAN
    return f, fp
