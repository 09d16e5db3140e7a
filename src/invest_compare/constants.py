from __future__ import annotations

from typing import Dict, List

MONTHS_PER_YEAR = 12

# Historical average annual return of the S&P 500, in percent.
BENCHMARK_ANNUAL_RATE = 7.0
BENCHMARK_NAME = "S&P 500"
BENCHMARK_RENTING_NAME = "S&P 500 (Renting)"

DEFAULT_STOCK_NAME = "Your Investment"
DEFAULT_REAL_ESTATE_NAME = "Real Estate"

INVESTMENT_PRESETS: List[Dict[str, object]] = [
    {
        "name": "S&P 500 Index Fund",
        "return_rate": 7.0,
        "fee_rate": 0.1,
        "description": "Low-cost broad market index",
    },
    {
        "name": "NASDAQ 100",
        "return_rate": 10.0,
        "fee_rate": 0.2,
        "description": "Tech-heavy growth index",
    },
    {
        "name": "Conservative Bonds",
        "return_rate": 4.0,
        "fee_rate": 0.5,
        "description": "Stable fixed income",
    },
    {
        "name": "High Growth Tech",
        "return_rate": 12.0,
        "fee_rate": 0.8,
        "description": "Aggressive growth strategy",
    },
    {
        "name": "Dividend Aristocrats",
        "return_rate": 8.0,
        "fee_rate": 0.3,
        "description": "Stable dividend payers",
    },
]

REAL_ESTATE_DEFAULTS: Dict[str, float] = {
    "property_value": 500000.0,
    "down_payment_percent": 20.0,
    "mortgage_rate": 4.0,  # annual percentage
    "loan_term_years": 30,
    "monthly_property_tax": 150.0,
    "monthly_hoa": 250.0,
    "monthly_insurance": 150.0,
    "monthly_maintenance": 75.0,
    "appreciation_rate": 3.0,  # annual percentage
    "monthly_rent_savings": 1800.0,
}

VALIDATION_LIMITS: Dict[str, float] = {
    "min_years": 1,
    "max_years": 50,
    "min_loan_term_years": 1,
    "max_loan_term_years": 50,
    "max_rate": 50.0,  # annual percentage
    "max_investment": 10_000_000.0,
    "max_property_value": 50_000_000.0,
}


def find_preset(name: str) -> Dict[str, object]:
    """Look up an investment preset by name, ignoring case."""
    for preset in INVESTMENT_PRESETS:
        if str(preset["name"]).lower() == name.lower():
            return preset
    known = ", ".join(str(p["name"]) for p in INVESTMENT_PRESETS)
    raise KeyError(f"Unknown preset '{name}'. Known presets: {known}")
