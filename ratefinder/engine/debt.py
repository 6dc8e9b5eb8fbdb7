"""Amortization schedule computation.

Forward recurrence over the loan balance (end-of-period):

    balance[k]   = balance[k-1] * (1 + rate) + pmt
    interest[k]  = balance[k-1] * rate
    principal[k] = |pmt| - interest[k]

Pure functions: floats in, dataclass rows out. No I/O.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from ratefinder.engine.tvm import pmt as payment
from ratefinder.models.results import AmortizationRow

TWO_PLACES = Decimal("0.01")


def _money(value: float) -> Decimal:
    return Decimal(str(value)).quantize(TWO_PLACES, ROUND_HALF_UP)


def amortization_schedule(
    rate: float,
    nper: int,
    pv: float,
    fv: float = 0.0,
    when: int | str = 0,
) -> list[AmortizationRow]:
    """Per-period schedule for a loan of ``pv`` at ``rate`` per period.

    ``pv`` is the principal received (positive); the payment comes from
    ``pmt`` and is reported as a positive amount. Cumulative totals are
    summed before rounding, so they can differ from the sum of the rounded
    rows by a cent. Raises ValueError when no finite payment exists.
    """
    if nper < 1:
        return []

    pmt = payment(rate, nper, pv, fv, when)
    if not math.isfinite(pmt):
        raise ValueError(f"no finite payment amortizes this loan at rate {rate}")
    balance = float(pv)
    cum_interest = 0.0
    cum_principal = 0.0

    rows: list[AmortizationRow] = []
    for period in range(1, int(nper) + 1):
        interest = balance * rate
        principal = abs(pmt) - interest
        balance = balance * (1.0 + rate) + pmt
        cum_interest += interest
        cum_principal += principal

        rows.append(AmortizationRow(
            period=period,
            payment=_money(abs(pmt)),
            interest=_money(interest),
            principal=_money(principal),
            cumulative_interest=_money(cum_interest),
            cumulative_principal=_money(cum_principal),
            remaining_balance=_money(balance),
        ))

    return rows
