"""Tests for fixed-rate mortgage payment and balance formulas."""

from __future__ import annotations

import pytest

from invest_compare.mortgage import monthly_payment, remaining_balance, total_interest_paid


def test_thirty_year_payment():
    assert monthly_payment(400000, 4, 30) == pytest.approx(1909.66, abs=0.01)


def test_fifteen_year_payment():
    assert monthly_payment(400000, 4, 15) == pytest.approx(2958.75, abs=0.01)


@pytest.mark.parametrize(
    "principal,rate,term",
    [
        (0, 4, 30),
        (-1000, 4, 30),
        (400000, 0, 30),
        (400000, -1, 30),
        (400000, 4, 0),
    ],
)
def test_degenerate_loans_pay_nothing(principal, rate, term):
    assert monthly_payment(principal, rate, term) == 0


def test_payment_increases_with_rate():
    payments = [monthly_payment(250000, rate, 30) for rate in (0.5, 1, 2.5, 4, 6, 9)]
    assert payments == sorted(payments)
    assert len(set(payments)) == len(payments)


@pytest.mark.parametrize("rate", [0.0, 2.0, 4.0, 7.5])
@pytest.mark.parametrize("term", [1, 15, 30])
def test_balance_endpoints(rate, term):
    assert remaining_balance(300000, rate, term, term) == 0
    assert remaining_balance(300000, rate, term, 0) == pytest.approx(300000)


def test_balance_clamped_after_payoff():
    assert remaining_balance(300000, 4, 15, 20) == 0


def test_balance_declines_over_time():
    balances = [remaining_balance(400000, 4, 30, year) for year in range(31)]
    assert balances == sorted(balances, reverse=True)
    assert all(balance >= 0 for balance in balances)


def test_zero_rate_balance_is_linear():
    assert remaining_balance(120000, 0, 10, 5) == pytest.approx(60000)


def test_interest_over_full_term():
    payment = monthly_payment(400000, 4, 30)
    assert total_interest_paid(400000, 4, 30, 30) == pytest.approx(
        payment * 360 - 400000
    )


def test_interest_stops_at_payoff():
    assert total_interest_paid(200000, 5, 10, 15) == pytest.approx(
        total_interest_paid(200000, 5, 10, 10)
    )


def test_interest_on_partial_term():
    paid = total_interest_paid(400000, 4, 30, 10)
    principal_repaid = 400000 - remaining_balance(400000, 4, 30, 10)
    assert paid == pytest.approx(monthly_payment(400000, 4, 30) * 120 - principal_repaid)
    assert paid > 0


def test_zero_rate_has_no_interest():
    assert total_interest_paid(400000, 0, 30, 10) == 0
    assert total_interest_paid(400000, 4, 30, 0) == 0
