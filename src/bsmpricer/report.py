"""Console report: inputs, a method/value results table and run timing."""

from __future__ import annotations

import datetime as dt
from typing import TextIO, Union

from .config import OptionInputs
from .core import PricingResult
from .dates import format_long_date

__all__ = [
    "COLUMN_WIDTHS",
    "format_value",
    "format_rate",
    "format_inputs",
    "format_row",
    "format_elapsed",
    "write_report",
]

COLUMN_WIDTHS = (35, 14)

Cell = Union[str, float]


def format_value(value: Cell) -> str:
    """Strings pass through; numbers print with 6 significant digits."""
    if isinstance(value, str):
        return value
    return f"{value:g}"


def format_rate(value: float) -> str:
    """Rates and volatilities as fixed-point percentages: ``6.000000 %``."""
    return f"{value * 100:.6f} %"


def format_inputs(inputs: OptionInputs) -> str:
    lines = [
        f"Option type = {inputs.kind.capitalize()}",
        f"Maturity = {format_long_date(inputs.maturity)}",
        f"Underlying price = {format_value(inputs.underlying)}",
        f"Strike = {format_value(inputs.strike)}",
        f"Risk-free interest rate = {format_rate(inputs.risk_free_rate)}",
        f"Dividend yield = {format_rate(inputs.dividend_yield)}",
        f"Volatility = {format_rate(inputs.volatility)}",
        f"Day Counter = {inputs.day_counter}",
    ]
    return "\n".join(lines) + "\n\n"


def format_row(method: str, value: Cell) -> str:
    w_method, w_value = COLUMN_WIDTHS
    return f"{method:<{w_method}}{format_value(value):<{w_value}}".rstrip()


def format_elapsed(seconds: float) -> str:
    """``1 h 2 m 3.00000 s``; hours and minutes only when non-zero."""
    hours = int(seconds / 3600)
    seconds -= hours * 3600
    minutes = int(seconds / 60)
    seconds -= minutes * 60
    out = "Run completed in "
    if hours > 0:
        out += f"{hours} h "
    if hours > 0 or minutes > 0:
        out += f"{minutes} m "
    return out + f"{seconds:.5f} s"


def write_report(
    out: TextIO,
    inputs: OptionInputs,
    evaluation_date: dt.date,
    result: PricingResult,
) -> None:
    """Print the inputs, the valuation date and the results table."""
    out.write("\n")
    out.write(format_inputs(inputs))
    out.write("\n")
    out.write(f"Today's Date : {format_long_date(evaluation_date)}\n\n")
    out.write(format_row("Method", "European") + "\n")
    out.write(format_row("Black-Scholes", result.npv) + "\n")
    if result.has_greeks:
        for name in ("delta", "gamma", "vega", "theta", "rho"):
            out.write(format_row(name.capitalize(), getattr(result, name)) + "\n")
