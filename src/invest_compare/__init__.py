"""
Investment comparison toolkit.

Projects stock/ETF positions and mortgaged property ownership over a holding
period and compares each against the S&P 500 benchmark at its long-run
average return, using deterministic closed-form compounding and amortization.
"""

from .errors import InvalidInputError
from .growth import project_benchmark_growth, project_growth
from .model import compare_investment, compare_real_estate, compare_stocks
from .mortgage import monthly_payment, remaining_balance
from .real_estate import project_real_estate
from .validation import validate_input
from .schemas import (
    ComparisonResult,
    InvestmentOutcome,
    InvestmentType,
    RealEstateInvestmentInput,
    RealEstateProjection,
    StockInvestmentInput,
    Winner,
)

__all__ = [
    "ComparisonResult",
    "InvalidInputError",
    "InvestmentOutcome",
    "InvestmentType",
    "RealEstateInvestmentInput",
    "RealEstateProjection",
    "StockInvestmentInput",
    "Winner",
    "compare_investment",
    "compare_real_estate",
    "compare_stocks",
    "monthly_payment",
    "project_benchmark_growth",
    "project_growth",
    "project_real_estate",
    "remaining_balance",
    "validate_input",
]
