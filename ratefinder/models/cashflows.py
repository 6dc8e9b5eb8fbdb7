from dataclasses import dataclass


@dataclass(frozen=True)
class CashFlow:
    amount: float  # Negative = outflow, positive = inflow
    offset: float  # Periods (IRR) or years (XIRR) from the reference point


@dataclass(frozen=True)
class CashflowSeries:
    """Ordered (amount, offset) pairs for a single solve call."""
    flows: tuple[CashFlow, ...]

    def __len__(self) -> int:
        return len(self.flows)

    def __iter__(self):
        return iter(self.flows)

    @property
    def amounts(self) -> list[float]:
        return [cf.amount for cf in self.flows]

    @property
    def offsets(self) -> list[float]:
        return [cf.offset for cf in self.flows]
