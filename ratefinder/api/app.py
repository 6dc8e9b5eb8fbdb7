"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ratefinder.api.routes import rates, tvm
from ratefinder.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Rate Finder",
    description="IRR / XIRR solver and time-value-of-money formulas",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(rates.router)
app.include_router(tvm.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
