"""Canonical test fixtures used across engine and API tests.

Fixture: Excel's documented XIRR example (~37.34%) and a textbook
five-period IRR series (~28.09%).
"""

import pytest
from datetime import date


@pytest.fixture
def textbook_cashflows() -> list[float]:
    """-100 now, four uneven inflows. IRR ~ 28.09%."""
    return [-100.0, 39.0, 59.0, 55.0, 20.0]


@pytest.fixture
def excel_xirr_cashflows() -> list[float]:
    return [-10000.0, 2750.0, 4250.0, 3250.0, 2750.0]


@pytest.fixture
def excel_xirr_dates() -> list[date]:
    return [
        date(2008, 1, 1),
        date(2008, 3, 1),
        date(2008, 10, 30),
        date(2009, 2, 15),
        date(2009, 4, 1),
    ]


@pytest.fixture
def semiannual_cashflows() -> list[float]:
    """$1000 invested, five $250 returns every ~6 months."""
    return [-1000.0, 250.0, 250.0, 250.0, 250.0, 250.0]


@pytest.fixture
def semiannual_dates() -> list[str]:
    return ["2025-01-01", "2025-07-01", "2026-01-01", "2026-07-01", "2027-01-01", "2027-07-01"]
