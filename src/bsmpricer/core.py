from __future__ import annotations
import math
from dataclasses import dataclass, asdict
from typing import Optional


CALL = "call"
PUT  = "put"


class InvalidInputError(ValueError):
    """Raised when option or market parameters violate a pricing precondition."""


def _check_finite(name: str, value: float) -> None:
    try:
        finite = math.isfinite(value)
    except TypeError:
        raise InvalidInputError(f"{name} must be a real number, got {value!r}") from None
    if not finite:
        raise InvalidInputError(f"{name} must be finite, got {value}")


# ---------------------------------------------------------------------------
# Instrument / market data separation
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionSpec:
    """What the contract *is*: a European vanilla option.

    Parameters
    ----------
    kind : str
        ``"call"`` or ``"put"``.
    strike : float
        Strike price, strictly positive.
    T : float
        Time to maturity in years.  Zero means the option expires now.
    """
    kind: str
    strike: float
    T: float          # years

    def __post_init__(self):
        if self.kind not in (CALL, PUT):
            raise InvalidInputError(f"kind must be 'call' or 'put', got {self.kind!r}")
        _check_finite("strike", self.strike)
        _check_finite("T", self.T)
        if self.strike <= 0:
            raise InvalidInputError(f"strike must be positive, got {self.strike}")
        if self.T < 0:
            raise InvalidInputError(f"T must be non-negative, got {self.T}")


@dataclass(frozen=True)
class MarketData:
    """Flat market state the option is priced against.

    Parameters
    ----------
    spot : float
        Current underlying price.
    rate : float
        Continuously-compounded risk-free rate.
    sigma : float
        Annualised Black volatility.
    q : float
        Continuous dividend yield (default 0).
    """
    spot: float
    rate: float
    sigma: float
    q: float = 0.0    # continuous dividend yield

    def __post_init__(self):
        for name in ("spot", "rate", "sigma", "q"):
            _check_finite(name, getattr(self, name))
        if self.spot <= 0:
            raise InvalidInputError(f"spot must be positive, got {self.spot}")
        if self.sigma < 0:
            raise InvalidInputError(f"sigma must be non-negative, got {self.sigma}")

    def forward(self, T: float) -> float:
        """Forward price of the underlying for delivery in ``T`` years."""
        return self.spot * math.exp((self.rate - self.q) * T)


@dataclass(frozen=True)
class PricingResult:
    """NPV plus the sensitivities, when they were asked for."""
    npv: float
    delta: Optional[float] = None
    gamma: Optional[float] = None
    vega: Optional[float] = None
    theta: Optional[float] = None
    rho: Optional[float] = None

    @property
    def has_greeks(self) -> bool:
        return self.delta is not None

    def to_dict(self) -> dict:
        return asdict(self)
