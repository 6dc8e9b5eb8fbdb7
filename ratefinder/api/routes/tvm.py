"""Time-value-of-money routes and the amortization schedule."""

from decimal import Decimal

from fastapi import APIRouter, HTTPException

from ratefinder.api.routes.rates import finite_or_none
from ratefinder.api.schemas import (
    FvRequest,
    PvRequest,
    PmtRequest,
    NperRequest,
    PaymentSplitRequest,
    AmortizationRequest,
    AmortizationResponse,
    AmortizationRowResponse,
    ValueResponse,
)
from ratefinder.engine import tvm
from ratefinder.engine.debt import amortization_schedule

router = APIRouter(prefix="/api/v1", tags=["tvm"])


def _value(fn, *args) -> ValueResponse:
    try:
        value = fn(*args)
    except ArithmeticError:
        value = None
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ValueResponse(value=finite_or_none(value))


@router.post("/tvm/fv", response_model=ValueResponse)
async def future_value(req: FvRequest):
    return _value(tvm.fv, req.rate, req.nper, req.pmt, req.pv, req.when)


@router.post("/tvm/pv", response_model=ValueResponse)
async def present_value(req: PvRequest):
    return _value(tvm.pv, req.rate, req.nper, req.pmt, req.fv, req.when)


@router.post("/tvm/pmt", response_model=ValueResponse)
async def payment(req: PmtRequest):
    return _value(tvm.pmt, req.rate, req.nper, req.pv, req.fv, req.when)


@router.post("/tvm/nper", response_model=ValueResponse)
async def number_of_periods(req: NperRequest):
    return _value(tvm.nper, req.rate, req.pmt, req.pv, req.fv, req.when)


@router.post("/tvm/ipmt", response_model=ValueResponse)
async def interest_payment(req: PaymentSplitRequest):
    return _value(tvm.ipmt, req.rate, req.per, req.nper, req.pv, req.fv, req.when)


@router.post("/tvm/ppmt", response_model=ValueResponse)
async def principal_payment(req: PaymentSplitRequest):
    return _value(tvm.ppmt, req.rate, req.per, req.nper, req.pv, req.fv, req.when)


@router.post("/amortization", response_model=AmortizationResponse)
async def amortization(req: AmortizationRequest):
    """Per-period loan schedule: payment split into interest and principal."""
    try:
        rows = amortization_schedule(req.rate, req.nper, req.pv, req.fv, req.when)
    except (ValueError, ArithmeticError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    total_interest = rows[-1].cumulative_interest if rows else Decimal("0")
    total_paid = sum((r.payment for r in rows), Decimal("0"))
    return AmortizationResponse(
        rows=[
            AmortizationRowResponse(
                period=r.period,
                payment=r.payment,
                interest=r.interest,
                principal=r.principal,
                cumulative_interest=r.cumulative_interest,
                cumulative_principal=r.cumulative_principal,
                remaining_balance=r.remaining_balance,
            )
            for r in rows
        ],
        total_interest=total_interest,
        total_paid=total_paid,
    )
