"""Closed-form time-value-of-money formulas.

Spreadsheet / numpy-financial sign convention: money paid out is negative,
money received is positive. ``when`` is 0 ("end") for payments at the end
of each period and 1 ("begin") for payments at the start.

All of them rearrange the same equation:

    fv + pv*(1+r)^n + pmt*(1+r*when)/r*((1+r)^n - 1) = 0

which degenerates to fv + pv + pmt*n = 0 when r = 0. A rate so small that
1 + r rounds to 1.0 takes the same branch. Where a formula is undefined
(a zero denominator, a negative base raised to a fractional power) the
result is NaN rather than an exception.

Pure functions. No I/O.
"""

import math

_WHEN = {"end": 0, "begin": 1, 0: 0, 1: 1}


def _when(when: int | str) -> int:
    try:
        return _WHEN[when]
    except KeyError:
        raise ValueError(f"when must be 0/'end' or 1/'begin', got {when!r}") from None


def _is_zero_rate(rate: float) -> bool:
    return 1 + rate == 1.0


def _growth(rate: float, nper: float) -> float:
    """(1 + rate) ** nper, NaN where no real value exists."""
    base = 1 + rate
    if base < 0 and not float(nper).is_integer():
        return math.nan
    if base == 0 and nper < 0:
        return math.nan
    return base ** nper


def _future_value(rate: float, nper: float, pmt: float, pv: float, w: int) -> float:
    if _is_zero_rate(rate):
        return -(pv + pmt * nper)
    growth = _growth(rate, nper)
    return -pv * growth - pmt * (1 + rate * w) / rate * (growth - 1)


def fv(rate: float, nper: float, pmt: float, pv: float, when: int | str = 0) -> float:
    """Future value of a present amount plus a stream of payments."""
    return _future_value(rate, nper, pmt, pv, _when(when))


def pv(rate: float, nper: float, pmt: float, fv: float = 0.0, when: int | str = 0) -> float:
    """Present value of a future amount plus a stream of payments."""
    w = _when(when)
    if _is_zero_rate(rate):
        return -(fv + pmt * nper)
    growth = _growth(rate, nper)
    if growth == 0:
        return math.nan
    return -(fv + pmt * (1 + rate * w) / rate * (growth - 1)) / growth


def pmt(rate: float, nper: float, pv: float, fv: float = 0.0, when: int | str = 0) -> float:
    """Fixed payment per period that amortizes ``pv`` down to ``fv``."""
    w = _when(when)
    if nper == 0:
        raise ValueError("nper must be non-zero")
    if _is_zero_rate(rate):
        return -(fv + pv) / nper
    growth = _growth(rate, nper)
    annuity = (1 + rate * w) * (growth - 1) / rate
    if annuity == 0:
        return math.nan
    return -(fv + pv * growth) / annuity


def nper(rate: float, pmt: float, pv: float, fv: float = 0.0, when: int | str = 0) -> float:
    """Number of periods, solved with logarithms. NaN when undefined."""
    w = _when(when)
    if _is_zero_rate(rate):
        if pmt == 0:
            return math.nan
        return -(fv + pv) / pmt
    if rate <= -1:
        return math.nan
    z = pmt * (1 + rate * w) / rate
    if z + pv == 0:
        return math.nan
    ratio = (z - fv) / (z + pv)
    if ratio <= 0:
        return math.nan
    return math.log(ratio) / math.log(1 + rate)


def ipmt(
    rate: float,
    per: int,
    nper: float,
    pv: float,
    fv: float = 0.0,
    when: int | str = 0,
) -> float | None:
    """Interest portion of payment number ``per`` (1-based).

    Interest is the balance left after per-1 payments times the rate. None
    for per < 1. A begin-of-period first payment carries no interest.
    """
    w = _when(when)
    if per < 1:
        return None
    if w == 1 and per == 1:
        return 0.0
    total = pmt(rate, nper, pv, fv, w)
    balance = _future_value(rate, per - 1, total, pv, w)
    interest = balance * rate
    if w == 1:
        if 1 + rate == 0:
            return math.nan
        interest /= 1 + rate
    return interest


def ppmt(
    rate: float,
    per: int,
    nper: float,
    pv: float,
    fv: float = 0.0,
    when: int | str = 0,
) -> float | None:
    """Principal portion of payment number ``per``: pmt - ipmt."""
    interest = ipmt(rate, per, nper, pv, fv, when)
    if interest is None:
        return None
    return pmt(rate, nper, pv, fv, when) - interest
