from __future__ import annotations

from typing import Tuple

from .constants import BENCHMARK_ANNUAL_RATE, MONTHS_PER_YEAR


def project_growth(
    initial_amount: float,
    monthly_contribution: float,
    annual_rate_pct: float,
    years: int,
) -> float:
    """
    Future value of a lump sum plus an ordinary annuity, compounded monthly.

    A negative ``monthly_contribution`` is treated as a recurring withdrawal and
    a negative rate produces decay; neither is rejected here.
    """
    monthly_rate = annual_to_monthly_rate(annual_rate_pct)
    months = years * MONTHS_PER_YEAR
    growth_factor = (1 + monthly_rate) ** months

    lump_sum_value = initial_amount * growth_factor
    if monthly_rate == 0:
        annuity_value = monthly_contribution * months
    else:
        annuity_value = monthly_contribution * (growth_factor - 1) / monthly_rate
    return lump_sum_value + annuity_value


def project_benchmark_growth(
    initial_amount: float, monthly_contribution: float, years: int
) -> float:
    return project_growth(
        initial_amount, monthly_contribution, BENCHMARK_ANNUAL_RATE, years
    )


def growth_series(
    initial_amount: float,
    monthly_contribution: float,
    annual_rate_pct: float,
    years: int,
) -> Tuple[float, ...]:
    """Value at the end of each year ``0..years`` inclusive, for charting."""
    return tuple(
        project_growth(initial_amount, monthly_contribution, annual_rate_pct, year)
        for year in range(years + 1)
    )


def benchmark_growth_series(
    initial_amount: float, monthly_contribution: float, years: int
) -> Tuple[float, ...]:
    return growth_series(
        initial_amount, monthly_contribution, BENCHMARK_ANNUAL_RATE, years
    )


def annual_to_monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 100.0 / MONTHS_PER_YEAR


def annualized_return(future_value: float, initial_amount: float, years: int) -> float:
    """
    Constant yearly rate (percent) turning ``initial_amount`` into ``future_value``.

    A non-positive ending value means the position was wiped out, reported as
    -100%.
    """
    if future_value <= 0:
        return -100.0
    return ((future_value / initial_amount) ** (1 / years) - 1) * 100.0
