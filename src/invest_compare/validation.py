"""
Input checks run before any comparison.

The projection functions trust their inputs; these checks are what keeps
them inside their domain (positive amounts and holding periods, a down
payment no larger than the property value, non-negative rates). The upper
limits keep every compounding factor within float range.
"""

from __future__ import annotations

import logging
import math
from typing import Union

from .constants import VALIDATION_LIMITS
from .errors import InvalidInputError
from .schemas import RealEstateInvestmentInput, StockInvestmentInput

logger = logging.getLogger(__name__)

InvestmentInput = Union[StockInvestmentInput, RealEstateInvestmentInput]


def validate_input(inputs: InvestmentInput) -> None:
    if isinstance(inputs, StockInvestmentInput):
        validate_stock_input(inputs)
    elif isinstance(inputs, RealEstateInvestmentInput):
        validate_real_estate_input(inputs)
    else:
        raise InvalidInputError("Unknown investment type")


def validate_stock_input(inputs: StockInvestmentInput) -> None:
    _require_finite(
        inputs,
        "initial_amount",
        "monthly_contribution",
        "annual_return_rate",
        "annual_fee_rate",
    )
    max_investment = VALIDATION_LIMITS["max_investment"]
    if not 0 < inputs.initial_amount <= max_investment:
        _fail("initial_amount", "Please enter a valid initial amount")
    _require_whole_years(
        inputs.years,
        "years",
        "Please enter a valid number of years",
        VALIDATION_LIMITS["min_years"],
        VALIDATION_LIMITS["max_years"],
    )
    _require_rate(inputs.annual_return_rate, "annual_return_rate", "Return rate")
    _require_rate(inputs.annual_fee_rate, "annual_fee_rate", "Fee rate")
    if inputs.monthly_contribution < 0:
        _fail("monthly_contribution", "Monthly contribution cannot be negative")
    if inputs.monthly_contribution > max_investment:
        _fail("monthly_contribution", "Monthly contribution is too large")


def validate_real_estate_input(inputs: RealEstateInvestmentInput) -> None:
    _require_finite(
        inputs,
        "property_value",
        "down_payment",
        "annual_mortgage_rate",
        "monthly_property_tax",
        "monthly_hoa",
        "monthly_insurance",
        "monthly_maintenance",
        "annual_appreciation_rate",
        "monthly_rent_savings",
    )
    if not 0 < inputs.property_value <= VALIDATION_LIMITS["max_property_value"]:
        _fail("property_value", "Please enter a valid property value")
    if inputs.down_payment <= 0:
        _fail("down_payment", "Please enter a valid down payment")
    if inputs.down_payment > inputs.property_value:
        _fail("down_payment", "Down payment cannot exceed property value")
    _require_whole_years(
        inputs.years,
        "years",
        "Please enter a valid holding period",
        VALIDATION_LIMITS["min_years"],
        VALIDATION_LIMITS["max_years"],
    )
    _require_whole_years(
        inputs.loan_term_years,
        "loan_term_years",
        "Please enter a valid loan term",
        VALIDATION_LIMITS["min_loan_term_years"],
        VALIDATION_LIMITS["max_loan_term_years"],
    )
    _require_rate(inputs.annual_mortgage_rate, "annual_mortgage_rate", "Mortgage rate")
    _require_rate(
        inputs.annual_appreciation_rate, "annual_appreciation_rate", "Annual appreciation"
    )
    for name in (
        "monthly_property_tax",
        "monthly_hoa",
        "monthly_insurance",
        "monthly_maintenance",
    ):
        if getattr(inputs, name) < 0:
            _fail(name, f"{name.replace('_', ' ').capitalize()} cannot be negative")
    if inputs.monthly_rent_savings < 0:
        _fail("monthly_rent_savings", "Rent savings cannot be negative")


def _require_whole_years(
    years: int, field: str, message: str, minimum: float, maximum: float
) -> None:
    # bool is an int subclass but never a count of years
    if not isinstance(years, int) or isinstance(years, bool):
        _fail(field, message)
    if not minimum <= years <= maximum:
        _fail(field, message)


def _require_rate(rate: float, field: str, label: str) -> None:
    if rate < 0:
        _fail(field, f"{label} cannot be negative")
    if rate > VALIDATION_LIMITS["max_rate"]:
        _fail(field, f"{label} cannot exceed {VALIDATION_LIMITS['max_rate']:g}%")


def _require_finite(inputs: InvestmentInput, *fields: str) -> None:
    for name in fields:
        value = getattr(inputs, name)
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or not math.isfinite(value)
        ):
            _fail(name, f"{name} must be a finite number")


def _fail(field: str, message: str) -> None:
    logger.info("Rejected input field %s: %s", field, message)
    raise InvalidInputError(message, field=field)
