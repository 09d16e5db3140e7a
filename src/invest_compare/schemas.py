from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .constants import (
    DEFAULT_REAL_ESTATE_NAME,
    DEFAULT_STOCK_NAME,
    MONTHS_PER_YEAR,
)


class InvestmentType(str, Enum):
    STOCKS = "stocks"
    REAL_ESTATE = "real_estate"


class Winner(str, Enum):
    USER = "user"
    BENCHMARK = "benchmark"


@dataclass(frozen=True)
class StockInvestmentInput:
    """Stock/ETF scenario: lump sum plus monthly contributions."""

    initial_amount: float
    monthly_contribution: float
    annual_return_rate: float  # annual percentage, e.g., 7.0
    years: int
    annual_fee_rate: float = 0.0  # annual percentage, subtracted from the return
    name: str = DEFAULT_STOCK_NAME

    @property
    def effective_rate(self) -> float:
        return self.annual_return_rate - self.annual_fee_rate


@dataclass(frozen=True)
class RealEstateInvestmentInput:
    """Property purchased with a fixed-rate mortgage and held for ``years``."""

    property_value: float
    down_payment: float
    annual_mortgage_rate: float  # annual percentage
    loan_term_years: int
    years: int
    monthly_property_tax: float = 0.0
    monthly_hoa: float = 0.0
    monthly_insurance: float = 0.0
    monthly_maintenance: float = 0.0
    annual_appreciation_rate: float = 0.0  # annual percentage
    monthly_rent_savings: float = 0.0  # rent that owning avoids
    name: str = DEFAULT_REAL_ESTATE_NAME

    @property
    def loan_amount(self) -> float:
        return self.property_value - self.down_payment

    @property
    def loan_to_value(self) -> float:
        if self.property_value == 0:
            return 0.0
        return self.loan_amount / self.property_value

    @property
    def monthly_carrying_costs(self) -> float:
        return (
            self.monthly_property_tax
            + self.monthly_hoa
            + self.monthly_insurance
            + self.monthly_maintenance
        )


@dataclass(frozen=True)
class RealEstateProjection:
    property_value: float
    loan_amount: float
    monthly_mortgage: float
    future_property_value: float
    capital_gain: float
    monthly_expenses: float
    annual_expenses: float
    monthly_rent: float
    monthly_cash_flow: float
    total_cash_flow: float
    total_rent_saved: float
    total_interest_paid: float
    equity_from_paydown: float
    remaining_mortgage_balance: float
    total_equity: float
    annualized_return: float  # percent
    property_value_series: Tuple[float, ...] = ()
    equity_series: Tuple[float, ...] = ()


@dataclass(frozen=True)
class InvestmentOutcome:
    name: str
    future_value: float
    initial_investment: float
    monthly_contribution: float
    years: int
    effective_rate: float  # percent
    annualized_net_return: float  # percent
    total_return_amount: float
    details: Optional[RealEstateProjection] = None
    value_series: Tuple[float, ...] = field(default=())

    @property
    def total_contributed(self) -> float:
        return (
            self.initial_investment
            + self.monthly_contribution * MONTHS_PER_YEAR * self.years
        )


@dataclass(frozen=True)
class ComparisonResult:
    investment_type: InvestmentType
    user: InvestmentOutcome
    benchmark: InvestmentOutcome
    winner: Winner
    difference_absolute: float

    @property
    def user_wins(self) -> bool:
        return self.winner is Winner.USER

    @property
    def winner_outcome(self) -> InvestmentOutcome:
        return self.user if self.user_wins else self.benchmark

    @property
    def difference_percent(self) -> float:
        if self.benchmark.future_value == 0:
            return 0.0
        return self.difference_absolute / abs(self.benchmark.future_value) * 100.0
