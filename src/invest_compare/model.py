from __future__ import annotations

import logging

from .constants import BENCHMARK_ANNUAL_RATE, BENCHMARK_NAME, BENCHMARK_RENTING_NAME
from .errors import InvalidInputError
from .growth import (
    annualized_return,
    benchmark_growth_series,
    growth_series,
    project_benchmark_growth,
    project_growth,
)
from .real_estate import project_real_estate
from .schemas import (
    ComparisonResult,
    InvestmentOutcome,
    InvestmentType,
    RealEstateInvestmentInput,
    StockInvestmentInput,
    Winner,
)
from .validation import (
    InvestmentInput,
    validate_real_estate_input,
    validate_stock_input,
)

logger = logging.getLogger(__name__)


def compare_investment(inputs: InvestmentInput) -> ComparisonResult:
    """Dispatch to the comparison matching the type of ``inputs``."""
    if isinstance(inputs, StockInvestmentInput):
        return compare_stocks(inputs)
    if isinstance(inputs, RealEstateInvestmentInput):
        return compare_real_estate(inputs)
    raise InvalidInputError("Unknown investment type")


def compare_stocks(inputs: StockInvestmentInput) -> ComparisonResult:
    validate_stock_input(inputs)
    effective_rate = inputs.effective_rate

    user_value = project_growth(
        inputs.initial_amount, inputs.monthly_contribution, effective_rate, inputs.years
    )
    benchmark_value = project_benchmark_growth(
        inputs.initial_amount, inputs.monthly_contribution, inputs.years
    )
    logger.debug(
        "Stocks %r at %.2f%% net: %.2f vs benchmark %.2f",
        inputs.name,
        effective_rate,
        user_value,
        benchmark_value,
    )

    user = InvestmentOutcome(
        name=inputs.name,
        future_value=user_value,
        initial_investment=inputs.initial_amount,
        monthly_contribution=inputs.monthly_contribution,
        years=inputs.years,
        effective_rate=effective_rate,
        annualized_net_return=annualized_return(
            user_value, inputs.initial_amount, inputs.years
        ),
        total_return_amount=user_value - inputs.initial_amount,
        value_series=growth_series(
            inputs.initial_amount,
            inputs.monthly_contribution,
            effective_rate,
            inputs.years,
        ),
    )
    benchmark = InvestmentOutcome(
        name=BENCHMARK_NAME,
        future_value=benchmark_value,
        initial_investment=inputs.initial_amount,
        monthly_contribution=inputs.monthly_contribution,
        years=inputs.years,
        effective_rate=BENCHMARK_ANNUAL_RATE,
        annualized_net_return=annualized_return(
            benchmark_value, inputs.initial_amount, inputs.years
        ),
        total_return_amount=benchmark_value - inputs.initial_amount,
        value_series=benchmark_growth_series(
            inputs.initial_amount, inputs.monthly_contribution, inputs.years
        ),
    )
    return _build_result(InvestmentType.STOCKS, user, benchmark)


def compare_real_estate(inputs: RealEstateInvestmentInput) -> ComparisonResult:
    """
    Compare owning the property against renting and investing in the benchmark.

    The renter invests the down payment up front, then each month invests what
    owning would have cost beyond rent. When owning is cheaper than renting
    that amount is negative and acts as a monthly withdrawal.
    """
    validate_real_estate_input(inputs)
    projection = project_real_estate(inputs)

    monthly_savings_by_renting = projection.monthly_expenses - inputs.monthly_rent_savings
    benchmark_value = project_benchmark_growth(
        inputs.down_payment, monthly_savings_by_renting, inputs.years
    )
    logger.debug(
        "Real estate %r: equity %.2f vs benchmark %.2f (renter invests %.2f/month)",
        inputs.name,
        projection.total_equity,
        benchmark_value,
        monthly_savings_by_renting,
    )

    user = InvestmentOutcome(
        name=inputs.name,
        future_value=projection.total_equity,
        initial_investment=inputs.down_payment,
        monthly_contribution=0.0,
        years=inputs.years,
        effective_rate=projection.annualized_return,
        annualized_net_return=projection.annualized_return,
        total_return_amount=projection.total_equity - inputs.down_payment,
        details=projection,
        value_series=projection.equity_series,
    )
    benchmark = InvestmentOutcome(
        name=BENCHMARK_RENTING_NAME,
        future_value=benchmark_value,
        initial_investment=inputs.down_payment,
        monthly_contribution=monthly_savings_by_renting,
        years=inputs.years,
        effective_rate=BENCHMARK_ANNUAL_RATE,
        annualized_net_return=annualized_return(
            benchmark_value, inputs.down_payment, inputs.years
        ),
        total_return_amount=benchmark_value - inputs.down_payment,
        value_series=benchmark_growth_series(
            inputs.down_payment, monthly_savings_by_renting, inputs.years
        ),
    )
    return _build_result(InvestmentType.REAL_ESTATE, user, benchmark)


def _build_result(
    investment_type: InvestmentType,
    user: InvestmentOutcome,
    benchmark: InvestmentOutcome,
) -> ComparisonResult:
    # ties go to the benchmark
    winner = Winner.USER if user.future_value > benchmark.future_value else Winner.BENCHMARK
    logger.debug("%s comparison winner: %s", investment_type.value, winner.value)
    return ComparisonResult(
        investment_type=investment_type,
        user=user,
        benchmark=benchmark,
        winner=winner,
        difference_absolute=abs(user.future_value - benchmark.future_value),
    )
