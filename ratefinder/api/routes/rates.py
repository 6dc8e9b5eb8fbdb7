"""Rate routes: IRR, XIRR and the NPV family."""

import logging
import math

from fastapi import APIRouter, HTTPException

from ratefinder.api.schemas import (
    IrrRequest,
    IrrBatchRequest,
    IrrBatchResponse,
    IrrResponse,
    XirrRequest,
    XirrResponse,
    NpvRequest,
    XnpvRequest,
    MirrRequest,
    ValueResponse,
)
from ratefinder.engine.errors import InvalidInputError
from ratefinder.engine.irr import irr, xirr
from ratefinder.engine.npv import npv, xnpv, mirr

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["rates"])


def finite_or_none(value: float | None) -> float | None:
    """JSON has no NaN/inf; report them as null."""
    if value is None or not math.isfinite(value):
        return None
    return value


@router.post("/irr", response_model=IrrResponse)
async def compute_irr(req: IrrRequest):
    """IRR for evenly spaced cash flows."""
    try:
        result = irr(req.cashflows, guess=req.guess, tol=req.tol)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return IrrResponse(irr=result.irr, iterations=result.iterations, converged=result.converged)


@router.post("/irr/batch", response_model=IrrBatchResponse)
async def compute_irr_batch(req: IrrBatchRequest):
    """IRR for many independent series; one bad series fails the request."""
    results = []
    for i, cashflows in enumerate(req.series):
        try:
            result = irr(cashflows, guess=req.guess, tol=req.tol)
        except InvalidInputError as e:
            raise HTTPException(status_code=400, detail=f"series[{i}]: {e}")
        results.append(
            IrrResponse(irr=result.irr, iterations=result.iterations, converged=result.converged)
        )
    logger.info(
        "Batch IRR: %d series, %d converged",
        len(results), sum(r.converged for r in results),
    )
    return IrrBatchResponse(results=results)


@router.post("/xirr", response_model=XirrResponse)
async def compute_xirr(req: XirrRequest):
    """XIRR for date-stamped cash flows (Actual/365)."""
    try:
        result = xirr(req.cashflows, req.dates, guess=req.guess, tol=req.tol)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return XirrResponse(xirr=result.xirr, iterations=result.iterations, converged=result.converged)


@router.post("/npv", response_model=ValueResponse)
async def compute_npv(req: NpvRequest):
    try:
        value = npv(req.rate, req.cashflows)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ValueResponse(value=finite_or_none(value))


@router.post("/xnpv", response_model=ValueResponse)
async def compute_xnpv(req: XnpvRequest):
    try:
        value = xnpv(req.rate, req.cashflows, req.dates)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ValueResponse(value=finite_or_none(value))


@router.post("/mirr", response_model=ValueResponse)
async def compute_mirr(req: MirrRequest):
    return ValueResponse(value=finite_or_none(mirr(req.cashflows, req.finance_rate, req.reinvest_rate)))
