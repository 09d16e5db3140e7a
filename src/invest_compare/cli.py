from __future__ import annotations

import json
import logging
import os
from typing import Optional

import typer

from .constants import (
    DEFAULT_REAL_ESTATE_NAME,
    DEFAULT_STOCK_NAME,
    INVESTMENT_PRESETS,
    REAL_ESTATE_DEFAULTS,
    find_preset,
)
from .errors import InvalidInputError
from .formatting import format_currency, format_percentage, result_to_dict, year_labels
from .model import compare_real_estate, compare_stocks
from .schemas import (
    ComparisonResult,
    InvestmentOutcome,
    RealEstateInvestmentInput,
    StockInvestmentInput,
)

app = typer.Typer(help="Compare an investment against the S&P 500 benchmark.")


def _default_log_level() -> str:
    return os.environ.get("INVEST_COMPARE_LOG_LEVEL", "WARNING")


@app.callback()
def main(
    log_level: str = typer.Option(
        default_factory=_default_log_level,
        help="Logging level (env INVEST_COMPARE_LOG_LEVEL if omitted).",
    ),
) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown logging level '{log_level}'.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def stocks(
    name: Optional[str] = typer.Argument(None, help="Label for the investment."),
    initial: float = typer.Option(10000.0, help="Initial lump sum."),
    monthly: float = typer.Option(500.0, help="Monthly contribution."),
    return_rate: float = typer.Option(
        7.0, help="Expected annual return in percent (e.g., 7 for 7%)."
    ),
    fee_rate: float = typer.Option(0.0, help="Annual fees in percent."),
    years: int = typer.Option(10, help="Holding period in years."),
    preset: Optional[str] = typer.Option(
        None, help="Fill name, return and fee rate from a named preset."
    ),
    as_json: bool = typer.Option(False, "--json", help="Dump the result as JSON."),
    show_series: bool = typer.Option(
        False, help="If set, print the year-by-year values."
    ),
) -> None:
    """
    Project a stock/ETF position with monthly contributions against the S&P 500.
    """
    if preset is not None:
        try:
            chosen = find_preset(preset)
        except KeyError as exc:
            raise typer.BadParameter(str(exc.args[0]), param_hint="--preset") from exc
        name = name or str(chosen["name"])
        return_rate = float(chosen["return_rate"])
        fee_rate = float(chosen["fee_rate"])

    inputs = StockInvestmentInput(
        name=name or DEFAULT_STOCK_NAME,
        initial_amount=initial,
        monthly_contribution=monthly,
        annual_return_rate=return_rate,
        annual_fee_rate=fee_rate,
        years=years,
    )
    result = _run(compare_stocks, inputs)
    if as_json:
        typer.echo(json.dumps(result_to_dict(result), indent=2))
        return

    _echo_outcome(result.user)
    typer.echo("")
    _echo_outcome(result.benchmark)
    typer.echo("")
    _echo_verdict(result)
    if show_series:
        _echo_series(result)


@app.command("real-estate")
def real_estate(
    name: str = typer.Argument(DEFAULT_REAL_ESTATE_NAME, help="Label for the property."),
    property_value: float = typer.Option(
        REAL_ESTATE_DEFAULTS["property_value"], help="Purchase price."
    ),
    down_payment: Optional[float] = typer.Option(
        None, help="Cash down payment (defaults to 20% of the property value)."
    ),
    mortgage_rate: float = typer.Option(
        REAL_ESTATE_DEFAULTS["mortgage_rate"], help="Annual mortgage rate in percent."
    ),
    loan_term: int = typer.Option(
        int(REAL_ESTATE_DEFAULTS["loan_term_years"]), help="Loan term in years."
    ),
    property_tax: float = typer.Option(
        REAL_ESTATE_DEFAULTS["monthly_property_tax"], help="Monthly property tax."
    ),
    hoa: float = typer.Option(REAL_ESTATE_DEFAULTS["monthly_hoa"], help="Monthly HOA."),
    insurance: float = typer.Option(
        REAL_ESTATE_DEFAULTS["monthly_insurance"], help="Monthly insurance."
    ),
    maintenance: float = typer.Option(
        REAL_ESTATE_DEFAULTS["monthly_maintenance"], help="Monthly maintenance."
    ),
    appreciation: float = typer.Option(
        REAL_ESTATE_DEFAULTS["appreciation_rate"],
        help="Annual appreciation in percent.",
    ),
    rent: float = typer.Option(
        REAL_ESTATE_DEFAULTS["monthly_rent_savings"],
        help="Monthly rent that owning avoids.",
    ),
    years: int = typer.Option(10, help="Holding period in years."),
    as_json: bool = typer.Option(False, "--json", help="Dump the result as JSON."),
    show_series: bool = typer.Option(
        False, help="If set, print the year-by-year property value and equity."
    ),
) -> None:
    """
    Compare buying a property with a mortgage against renting and investing.
    """
    if down_payment is None:
        down_payment = property_value * REAL_ESTATE_DEFAULTS["down_payment_percent"] / 100

    inputs = RealEstateInvestmentInput(
        name=name,
        property_value=property_value,
        down_payment=down_payment,
        annual_mortgage_rate=mortgage_rate,
        loan_term_years=loan_term,
        monthly_property_tax=property_tax,
        monthly_hoa=hoa,
        monthly_insurance=insurance,
        monthly_maintenance=maintenance,
        annual_appreciation_rate=appreciation,
        monthly_rent_savings=rent,
        years=years,
    )
    result = _run(compare_real_estate, inputs)
    if as_json:
        typer.echo(json.dumps(result_to_dict(result), indent=2))
        return

    details = result.user.details
    typer.echo(f"Property: {inputs.name}")
    typer.echo(f"Loan-to-value: {format_percentage(inputs.loan_to_value * 100)}")
    typer.echo(f"Monthly mortgage payment: {format_currency(details.monthly_mortgage)}")
    typer.echo(f"Monthly ownership cost: {format_currency(details.monthly_expenses)}")
    typer.echo(f"Monthly rent: {format_currency(details.monthly_rent)}")
    typer.echo(f"Monthly cash flow: {format_currency(details.monthly_cash_flow)}")
    typer.echo(
        f"Future property value: {format_currency(details.future_property_value)}"
    )
    typer.echo(f"Capital gain: {format_currency(details.capital_gain)}")
    typer.echo(f"Equity from paydown: {format_currency(details.equity_from_paydown)}")
    typer.echo(
        f"Remaining mortgage: {format_currency(details.remaining_mortgage_balance)}"
    )
    typer.echo(f"Interest paid: {format_currency(details.total_interest_paid)}")
    typer.echo(f"Rent saved: {format_currency(details.total_rent_saved)}")
    typer.echo("")
    _echo_outcome(result.user)
    typer.echo("")
    _echo_outcome(result.benchmark)
    typer.echo("")
    _echo_verdict(result)
    if show_series:
        typer.echo("")
        for label, value in zip(year_labels(inputs.years), details.property_value_series):
            typer.echo(f"{label}: property value {format_currency(value)}")
        _echo_series(result)


@app.command()
def presets() -> None:
    """List the built-in investment presets."""
    for preset in INVESTMENT_PRESETS:
        typer.echo(
            f"{preset['name']}: {format_percentage(float(preset['return_rate']))} return, "
            f"{format_percentage(float(preset['fee_rate']))} fees - {preset['description']}"
        )


def _run(compare, inputs) -> ComparisonResult:
    try:
        return compare(inputs)
    except InvalidInputError as exc:
        typer.echo(f"Invalid input: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _echo_outcome(outcome: InvestmentOutcome) -> None:
    typer.echo(f"{outcome.name}")
    typer.echo(f"  Future value: {format_currency(outcome.future_value)}")
    typer.echo(f"  Initial investment: {format_currency(outcome.initial_investment)}")
    if outcome.monthly_contribution:
        typer.echo(
            f"  Monthly contribution: {format_currency(outcome.monthly_contribution)}"
        )
        typer.echo(f"  Total contributed: {format_currency(outcome.total_contributed)}")
    typer.echo(f"  Total return: {format_currency(outcome.total_return_amount)}")
    typer.echo(
        f"  Annualized return: {format_percentage(outcome.annualized_net_return)}"
    )


def _echo_verdict(result: ComparisonResult) -> None:
    typer.echo(f"Better outcome: {result.winner_outcome.name}")
    typer.echo(
        f"Difference: {format_currency(result.difference_absolute)} "
        f"({format_percentage(result.difference_percent)})"
    )


def _echo_series(result: ComparisonResult) -> None:
    labels = year_labels(result.user.years)
    for label, user_value, benchmark_value in zip(
        labels, result.user.value_series, result.benchmark.value_series
    ):
        typer.echo(
            f"{label}: {result.user.name} {format_currency(user_value)}, "
            f"{result.benchmark.name} {format_currency(benchmark_value)}"
        )


if __name__ == "__main__":
    app()
