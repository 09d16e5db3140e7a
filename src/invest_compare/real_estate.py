from __future__ import annotations

from typing import Tuple

from .constants import MONTHS_PER_YEAR
from .growth import annualized_return
from .mortgage import monthly_payment, remaining_balance, total_interest_paid
from .schemas import RealEstateInvestmentInput, RealEstateProjection


def project_real_estate(inputs: RealEstateInvestmentInput) -> RealEstateProjection:
    """
    Project equity and cash flow for owning ``inputs`` over its holding period.

    No validation happens here: a zero down payment divides by zero in the
    annualized return. Use ``validation.validate_real_estate_input`` first.
    """
    loan_amount = inputs.loan_amount
    years = inputs.years

    monthly_mortgage = monthly_payment(
        loan_amount, inputs.annual_mortgage_rate, inputs.loan_term_years
    )
    monthly_expenses = monthly_mortgage + inputs.monthly_carrying_costs
    # positive when owning is cheaper than the comparable rent
    monthly_cash_flow = inputs.monthly_rent_savings - monthly_expenses
    total_cash_flow = monthly_cash_flow * MONTHS_PER_YEAR * years

    future_property_value = appreciated_value(
        inputs.property_value, inputs.annual_appreciation_rate, years
    )
    capital_gain = future_property_value - inputs.property_value

    remaining = remaining_balance(
        loan_amount, inputs.annual_mortgage_rate, inputs.loan_term_years, years
    )
    equity_from_paydown = loan_amount - remaining
    total_equity = inputs.down_payment + capital_gain + equity_from_paydown

    annualized = annualized_return(total_equity, inputs.down_payment, years)

    return RealEstateProjection(
        property_value=inputs.property_value,
        loan_amount=loan_amount,
        monthly_mortgage=monthly_mortgage,
        future_property_value=future_property_value,
        capital_gain=capital_gain,
        monthly_expenses=monthly_expenses,
        annual_expenses=monthly_expenses * MONTHS_PER_YEAR,
        monthly_rent=inputs.monthly_rent_savings,
        monthly_cash_flow=monthly_cash_flow,
        total_cash_flow=total_cash_flow,
        total_rent_saved=inputs.monthly_rent_savings * MONTHS_PER_YEAR * years,
        total_interest_paid=total_interest_paid(
            loan_amount, inputs.annual_mortgage_rate, inputs.loan_term_years, years
        ),
        equity_from_paydown=equity_from_paydown,
        remaining_mortgage_balance=remaining,
        total_equity=total_equity,
        annualized_return=annualized,
        property_value_series=property_value_series(inputs),
        equity_series=equity_series(inputs),
    )


def appreciated_value(property_value: float, annual_rate_pct: float, years: int) -> float:
    return property_value * (1 + annual_rate_pct / 100.0) ** years


def property_value_series(inputs: RealEstateInvestmentInput) -> Tuple[float, ...]:
    return tuple(
        appreciated_value(inputs.property_value, inputs.annual_appreciation_rate, year)
        for year in range(inputs.years + 1)
    )


def equity_series(inputs: RealEstateInvestmentInput) -> Tuple[float, ...]:
    """Owner equity at the end of each year ``0..years``."""
    loan_amount = inputs.loan_amount
    series = []
    for year in range(inputs.years + 1):
        value = appreciated_value(
            inputs.property_value, inputs.annual_appreciation_rate, year
        )
        balance = remaining_balance(
            loan_amount, inputs.annual_mortgage_rate, inputs.loan_term_years, year
        )
        series.append(
            inputs.down_payment
            + (value - inputs.property_value)
            + (loan_amount - balance)
        )
    return tuple(series)
