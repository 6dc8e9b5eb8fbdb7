from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SolverState:
    rate: float
    residual: float  # NPV at rate
    derivative: float  # dNPV/drate at rate


@dataclass(frozen=True)
class SolverResult:
    rate: float | None  # None when not converged
    iterations: int
    converged: bool


@dataclass(frozen=True)
class IrrResult:
    irr: float | None
    iterations: int
    converged: bool


@dataclass(frozen=True)
class XirrResult:
    xirr: float | None
    iterations: int
    converged: bool


@dataclass(frozen=True)
class AmortizationRow:
    period: int
    payment: Decimal
    interest: Decimal
    principal: Decimal
    cumulative_interest: Decimal
    cumulative_principal: Decimal
    remaining_balance: Decimal
