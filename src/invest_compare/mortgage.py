"""
Fixed-rate amortizing loan math.

Rates are annual percentages (``4.0`` means 4%/year) converted to a monthly
rate; terms and elapsed time are whole years expanded to months.

A non-positive rate yields a monthly payment of exactly 0 rather than the
``principal / months`` a real interest-free loan would amortize at. Callers
rely on this simplification, so it is kept.
"""

from __future__ import annotations

from .constants import MONTHS_PER_YEAR
from .growth import annual_to_monthly_rate


def monthly_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    if principal <= 0 or annual_rate_pct <= 0 or term_years <= 0:
        return 0.0
    monthly_rate = annual_to_monthly_rate(annual_rate_pct)
    term_months = term_years * MONTHS_PER_YEAR
    compound = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * compound / (compound - 1)


def remaining_balance(
    principal: float, annual_rate_pct: float, term_years: int, elapsed_years: int
) -> float:
    """Outstanding principal after ``elapsed_years``, clamped at payoff."""
    term_months = term_years * MONTHS_PER_YEAR
    elapsed_months = min(elapsed_years, term_years) * MONTHS_PER_YEAR
    if elapsed_months >= term_months:
        return 0.0

    monthly_rate = annual_to_monthly_rate(annual_rate_pct)
    if monthly_rate == 0:
        # limit of the closed form as the rate goes to zero
        return principal * (term_months - elapsed_months) / term_months
    compound_term = (1 + monthly_rate) ** term_months
    compound_elapsed = (1 + monthly_rate) ** elapsed_months
    return principal * (compound_term - compound_elapsed) / (compound_term - 1)


def total_interest_paid(
    principal: float, annual_rate_pct: float, term_years: int, elapsed_years: int
) -> float:
    """Interest portion of the payments made during ``elapsed_years``."""
    payment = monthly_payment(principal, annual_rate_pct, term_years)
    if payment == 0:
        return 0.0
    months_paid = min(elapsed_years, term_years) * MONTHS_PER_YEAR
    principal_repaid = principal - remaining_balance(
        principal, annual_rate_pct, term_years, elapsed_years
    )
    return max(payment * months_paid - principal_repaid, 0.0)
