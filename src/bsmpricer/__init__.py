# bsmpricer: closed-form Black-Scholes-Merton pricing of European options
# Public API

from .core import OptionSpec, MarketData, PricingResult, InvalidInputError, CALL, PUT
from .black_scholes import price as bs_price, greeks as bs_greeks, intrinsic_value
from .black_scholes import call_put_symmetric
from .dates import Actual365Fixed, day_counter, time_to_maturity
from .config import OptionInputs, EQUITY_OPTION_EXAMPLE

__all__ = [
    "OptionSpec", "MarketData", "PricingResult", "InvalidInputError", "CALL", "PUT",
    "bs_price", "bs_greeks", "intrinsic_value", "call_put_symmetric",
    "Actual365Fixed", "day_counter", "time_to_maturity",
    "OptionInputs", "EQUITY_OPTION_EXAMPLE",
]

__version__ = "0.1.0"
