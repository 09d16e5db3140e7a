"""Tests for lump-sum plus annuity growth projections."""

from __future__ import annotations

import pytest

from invest_compare.constants import BENCHMARK_ANNUAL_RATE
from invest_compare.growth import (
    annualized_return,
    benchmark_growth_series,
    growth_series,
    project_benchmark_growth,
    project_growth,
)


def test_lump_sum_only():
    assert project_growth(1000, 0, 7, 10) == pytest.approx(2009.66, abs=0.01)


def test_monthly_contributions_dominate():
    assert project_growth(1000, 100, 7, 10) == pytest.approx(19318.14, abs=0.1)


def test_single_year():
    assert project_growth(1000, 100, 7, 1) == pytest.approx(2311.55, abs=0.1)


@pytest.mark.parametrize("rate", [0.0, 3.5, 7.0, 12.0, -4.0])
@pytest.mark.parametrize("years", [1, 10, 30])
def test_lump_sum_matches_closed_form(rate, years):
    expected = 2500 * (1 + rate / 1200) ** (years * 12)
    assert project_growth(2500, 0, rate, years) == pytest.approx(expected, rel=1e-12)


def test_zero_rate_is_linear_and_exact():
    assert project_growth(1000, 100, 0, 10) == 13000


def test_negative_contribution_is_a_withdrawal():
    assert project_growth(1000, -100, 0, 1) == -200
    with_withdrawal = project_growth(10000, -50, 7, 5)
    assert with_withdrawal < project_growth(10000, 0, 7, 5)
    assert with_withdrawal == pytest.approx(
        project_growth(10000, 0, 7, 5) - project_growth(0, 50, 7, 5)
    )


def test_negative_rate_decays():
    assert project_growth(1000, 0, -5, 10) < 1000


def test_benchmark_uses_fixed_rate():
    assert project_benchmark_growth(1000, 100, 10) == project_growth(
        1000, 100, BENCHMARK_ANNUAL_RATE, 10
    )


def test_growth_series_endpoints():
    series = growth_series(1000, 100, 7, 5)
    assert len(series) == 6
    assert series[0] == 1000
    assert series[-1] == project_growth(1000, 100, 7, 5)
    assert list(series) == sorted(series)


def test_benchmark_series_matches_growth_series():
    assert benchmark_growth_series(500, 20, 3) == growth_series(
        500, 20, BENCHMARK_ANNUAL_RATE, 3
    )


def test_annualized_return():
    assert annualized_return(2000, 1000, 1) == pytest.approx(100.0)
    assert annualized_return(1000, 1000, 10) == pytest.approx(0.0)
    assert annualized_return(0, 1000, 10) == -100.0
    assert annualized_return(-500, 1000, 10) == -100.0
