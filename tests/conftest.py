"""Shared input records for the comparison tests."""

from __future__ import annotations

import pytest

from invest_compare.schemas import RealEstateInvestmentInput, StockInvestmentInput


@pytest.fixture
def stock_input() -> StockInvestmentInput:
    return StockInvestmentInput(
        name="NASDAQ 100",
        initial_amount=10000.0,
        monthly_contribution=500.0,
        annual_return_rate=10.0,
        annual_fee_rate=0.2,
        years=10,
    )


@pytest.fixture
def real_estate_input() -> RealEstateInvestmentInput:
    return RealEstateInvestmentInput(
        name="Test Property",
        property_value=500000.0,
        down_payment=100000.0,
        annual_mortgage_rate=4.0,
        loan_term_years=30,
        monthly_property_tax=150.0,
        monthly_hoa=250.0,
        monthly_insurance=150.0,
        monthly_maintenance=75.0,
        annual_appreciation_rate=3.0,
        monthly_rent_savings=1800.0,
        years=10,
    )
