"""Dated option inputs and the built-in equity-option example."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, replace

from .core import OptionSpec, MarketData, PUT
from .dates import day_counter, time_to_maturity


@dataclass(frozen=True)
class OptionInputs:
    """Option and market inputs as a desk would quote them: with dates."""
    kind: str
    underlying: float
    strike: float
    dividend_yield: float
    risk_free_rate: float
    volatility: float
    maturity: dt.date
    day_counter: str = "Actual/365 (Fixed)"

    def with_overrides(self, **changes) -> "OptionInputs":
        """Copy with every non-``None`` keyword replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_pricing_inputs(
        self,
        evaluation_date: dt.date,
        settlement_date: dt.date | None = None,
    ) -> tuple[OptionSpec, MarketData]:
        """Resolve the dates into a time to maturity and build the value types."""
        T = time_to_maturity(
            self.maturity,
            evaluation_date,
            settlement_date=settlement_date,
            day_counter=day_counter(self.day_counter),
        )
        spec = OptionSpec(kind=self.kind, strike=self.strike, T=T)
        market = MarketData(
            spot=self.underlying,
            rate=self.risk_free_rate,
            sigma=self.volatility,
            q=self.dividend_yield,
        )
        return spec, market


# European put on a non-dividend-paying stock, valued on 15 May 1998 with
# curves anchored at the 17 May 1998 settlement date.
EQUITY_OPTION_EXAMPLE = OptionInputs(
    kind=PUT,
    underlying=36.0,
    strike=40.0,
    dividend_yield=0.00,
    risk_free_rate=0.06,
    volatility=0.20,
    maturity=dt.date(1999, 5, 17),
)
EXAMPLE_EVALUATION_DATE = dt.date(1998, 5, 15)
EXAMPLE_SETTLEMENT_DATE = dt.date(1998, 5, 17)
