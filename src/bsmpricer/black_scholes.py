# black_scholes.py
# Closed-form Black-Scholes-Merton pricing of European vanilla options
# with flat rate, dividend yield and volatility.

from __future__ import annotations
import logging
from math import log, sqrt, exp, isfinite
from typing import Dict

from scipy.stats import norm

from .core import OptionSpec, MarketData, PricingResult, InvalidInputError, CALL, PUT

logger = logging.getLogger(__name__)

_N = norm.cdf   # standard-normal CDF
_n = norm.pdf   # standard-normal PDF


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _check_inputs(spec, market) -> None:
    if not isinstance(spec, OptionSpec):
        raise InvalidInputError(f"expected OptionSpec, got {type(spec).__name__}")
    if not isinstance(market, MarketData):
        raise InvalidInputError(f"expected MarketData, got {type(market).__name__}")


def _d1_d2(S, K, T, r, q, sigma):
    rt = sigma * sqrt(T)
    d1 = (log(S / K) + (r - q + 0.5 * sigma * sigma) * T) / rt
    d2 = d1 - rt
    return d1, d2


def intrinsic_value(kind: str, S: float, K: float) -> float:
    """Payoff of the option if exercised at underlying price ``S``."""
    if kind == CALL:
        return max(S - K, 0.0)
    return max(K - S, 0.0)


def _is_degenerate(spec: OptionSpec, market: MarketData) -> bool:
    # a tiny positive sigma can still underflow sigma * sqrt(T) to zero
    return spec.T == 0.0 or market.sigma * sqrt(spec.T) == 0.0


def _deterministic_price(spec: OptionSpec, market: MarketData) -> float:
    S, K, T = market.spot, spec.strike, spec.T
    if T == 0.0:
        return intrinsic_value(spec.kind, S, K)
    # no diffusion: the underlying grows at r - q with certainty
    disc_r = exp(-market.rate * T)
    return disc_r * intrinsic_value(spec.kind, market.forward(T), K)


def _deterministic_greeks(spec: OptionSpec, market: MarketData) -> Dict[str, float]:
    """Greeks of the riskless payoff; zero curvature and zero vol exposure."""
    S, K, T = market.spot, spec.strike, spec.T
    r, q = market.rate, market.q
    disc_r = exp(-r * T)
    disc_q = exp(-q * T)

    fwd_value = disc_q * S - disc_r * K
    if spec.kind == CALL:
        itm = fwd_value > 0.0
        sign = 1.0
    else:
        itm = fwd_value < 0.0
        sign = -1.0

    if not itm:
        return {"delta": 0.0, "gamma": 0.0, "vega": 0.0, "theta": 0.0, "rho": 0.0}
    return {
        "delta": sign * disc_q,
        "gamma": 0.0,
        "vega":  0.0,
        "theta": sign * (q * S * disc_q - r * K * disc_r),
        "rho":   sign * K * T * disc_r,
    }


def _analytic_greeks(spec: OptionSpec, market: MarketData) -> Dict[str, float]:
    if _is_degenerate(spec, market):
        return _deterministic_greeks(spec, market)

    S, K, T = market.spot, spec.strike, spec.T
    r, q, sigma = market.rate, market.q, market.sigma
    d1, d2 = _d1_d2(S, K, T, r, q, sigma)
    n_d1   = float(_n(d1))
    disc_r = exp(-r * T)
    disc_q = exp(-q * T)
    sqrt_T = sqrt(T)

    # Common
    gamma_denom = S * sigma * sqrt_T
    gamma = disc_q * n_d1 / gamma_denom if gamma_denom > 0.0 else 0.0
    vega  = S * disc_q * n_d1 * sqrt_T

    if spec.kind == CALL:
        N_d1, N_d2 = float(_N(d1)), float(_N(d2))
        delta = disc_q * N_d1
        theta = (-S * disc_q * n_d1 * sigma / (2 * sqrt_T)
                 - r * K * disc_r * N_d2
                 + q * S * disc_q * N_d1)
        rho   = K * T * disc_r * N_d2
    else:
        N_md1, N_md2 = float(_N(-d1)), float(_N(-d2))
        delta = -disc_q * N_md1
        theta = (-S * disc_q * n_d1 * sigma / (2 * sqrt_T)
                 + r * K * disc_r * N_md2
                 - q * S * disc_q * N_md1)
        rho   = -K * T * disc_r * N_md2

    return {"delta": delta, "gamma": gamma, "vega": vega, "theta": theta, "rho": rho}


def _analytic_npv(spec: OptionSpec, market: MarketData) -> float:
    if _is_degenerate(spec, market):
        return _deterministic_price(spec, market)

    S, K, T = market.spot, spec.strike, spec.T
    r, q, sigma = market.rate, market.q, market.sigma
    d1, d2 = _d1_d2(S, K, T, r, q, sigma)
    disc_r = exp(-r * T)
    disc_q = exp(-q * T)
    if spec.kind == CALL:
        npv = disc_q * S * float(_N(d1)) - disc_r * K * float(_N(d2))
    else:
        npv = disc_r * K * float(_N(-d2)) - disc_q * S * float(_N(-d1))
    # cancellation deep out of the money can leave a tiny negative residue
    return max(npv, 0.0)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def greeks(spec: OptionSpec, market: MarketData) -> Dict[str, float]:
    """Returns greeks with sigma in absolute units (vega is dPrice/dSigma, not per 1%).

    Theta is the calendar-time decay per year, rho is per unit of rate.
    """
    _check_inputs(spec, market)
    try:
        return _analytic_greeks(spec, market)
    except OverflowError as exc:
        raise InvalidInputError(f"rates and maturity overflow the discount factors: {exc}") from exc


def price(spec: OptionSpec, market: MarketData, *, compute_greeks: bool = False) -> PricingResult:
    """Analytic Black-Scholes-Merton value of a European vanilla option.

    Parameters
    ----------
    spec : OptionSpec
        Option kind, strike and time to maturity.
    market : MarketData
        Spot, flat rate, dividend yield and volatility.
    compute_greeks : bool
        Also compute delta, gamma, vega, theta and rho.

    Returns
    -------
    PricingResult
        NPV, with sensitivities filled in when ``compute_greeks`` is set.

    Raises
    ------
    InvalidInputError
        If either argument is not the expected value type, or the rates and
        maturity are too extreme for a finite value.  Range checks happen
        when the value types are constructed.
    """
    _check_inputs(spec, market)
    try:
        npv = _analytic_npv(spec, market)
    except OverflowError as exc:
        raise InvalidInputError(f"rates and maturity overflow the discount factors: {exc}") from exc
    if not isfinite(npv):
        raise InvalidInputError(f"no finite value for {spec} under {market}")

    logger.debug("BSM %s K=%g T=%g S=%g r=%g q=%g sigma=%g -> %.10f",
                 spec.kind, spec.strike, spec.T, market.spot,
                 market.rate, market.q, market.sigma, npv)

    if not compute_greeks:
        return PricingResult(npv=npv)
    g = greeks(spec, market)
    return PricingResult(npv=npv, **g)


def call_put_symmetric(spec: OptionSpec, market: MarketData) -> tuple[OptionSpec, MarketData]:
    """Map an option onto its call-put symmetric counterpart.

    Swaps the kind, exchanges spot with strike and rate with dividend yield.
    Under Black-Scholes-Merton the two contracts have the same value.
    """
    _check_inputs(spec, market)
    kind = PUT if spec.kind == CALL else CALL
    return (
        OptionSpec(kind=kind, strike=market.spot, T=spec.T),
        MarketData(spot=spec.strike, rate=market.q, sigma=market.sigma, q=market.rate),
    )
