"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from ratefinder.config import settings

When = Literal[0, 1, "end", "begin"]


# ---- Request schemas ----

class IrrRequest(BaseModel):
    cashflows: list[float] = Field(..., description="Period cash flows, index 0 = now")
    guess: float = settings.default_guess
    tol: float = Field(settings.default_tol, gt=0)


class IrrBatchRequest(BaseModel):
    series: list[list[float]] = Field(..., description="Independent cash-flow series")
    guess: float = settings.default_guess
    tol: float = Field(settings.default_tol, gt=0)


class XirrRequest(BaseModel):
    cashflows: list[float]
    dates: list[date] = Field(..., description="One date per cash flow, any order")
    guess: float = settings.default_guess
    tol: float = Field(settings.default_tol, gt=0)


class NpvRequest(BaseModel):
    rate: float
    cashflows: list[float]


class XnpvRequest(BaseModel):
    rate: float
    cashflows: list[float]
    dates: list[date]


class MirrRequest(BaseModel):
    cashflows: list[float]
    finance_rate: float
    reinvest_rate: float


class FvRequest(BaseModel):
    rate: float
    nper: float
    pmt: float
    pv: float
    when: When = 0


class PvRequest(BaseModel):
    rate: float
    nper: float
    pmt: float
    fv: float = 0.0
    when: When = 0


class PmtRequest(BaseModel):
    rate: float
    nper: float
    pv: float
    fv: float = 0.0
    when: When = 0


class NperRequest(BaseModel):
    rate: float
    pmt: float
    pv: float
    fv: float = 0.0
    when: When = 0


class PaymentSplitRequest(BaseModel):
    """Shared by IPMT and PPMT."""
    rate: float
    per: int
    nper: float
    pv: float
    fv: float = 0.0
    when: When = 0


class AmortizationRequest(BaseModel):
    rate: float = Field(..., description="Rate per period, e.g. 0.075/12")
    nper: int = Field(..., ge=0)
    pv: float
    fv: float = 0.0
    when: When = 0


# ---- Response schemas ----

class IrrResponse(BaseModel):
    irr: float | None
    iterations: int
    converged: bool


class IrrBatchResponse(BaseModel):
    results: list[IrrResponse]


class XirrResponse(BaseModel):
    xirr: float | None
    iterations: int
    converged: bool


class ValueResponse(BaseModel):
    """Scalar formula result; null when the value is not a finite number."""
    value: float | None


class AmortizationRowResponse(BaseModel):
    period: int
    payment: Decimal
    interest: Decimal
    principal: Decimal
    cumulative_interest: Decimal
    cumulative_principal: Decimal
    remaining_balance: Decimal


class AmortizationResponse(BaseModel):
    rows: list[AmortizationRowResponse]
    total_interest: Decimal
    total_paid: Decimal
