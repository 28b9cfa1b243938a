import argparse
import logging
import sys
import time

from .core import CALL, PUT, InvalidInputError
from .black_scholes import price as bs_price
from .config import EQUITY_OPTION_EXAMPLE, EXAMPLE_EVALUATION_DATE, EXAMPLE_SETTLEMENT_DATE
from .dates import parse_date
from .report import write_report, format_elapsed

logger = logging.getLogger(__name__)


def _kind(s: str):
    s = s.lower()
    if s in {"call", "c"}:
        return CALL
    if s in {"put", "p"}:
        return PUT
    raise argparse.ArgumentTypeError("kind must be 'call' or 'put'")


def _date(s: str):
    try:
        return parse_date(s)
    except InvalidInputError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bsmpricer",
        description="Black-Scholes-Merton price of a European option. "
                    "Flags override the built-in 1998 equity put example.",
    )
    p.add_argument("--kind", type=_kind, default=None, help="call|put")
    p.add_argument("--spot", dest="underlying", type=float, default=None)
    p.add_argument("--strike", type=float, default=None)
    p.add_argument("--rate", dest="risk_free_rate", type=float, default=None,
                   help="cont. risk-free")
    p.add_argument("--dividend-yield", dest="dividend_yield", type=float, default=None,
                   help="cont. dividend yield")
    p.add_argument("--vol", dest="volatility", type=float, default=None)
    p.add_argument("--maturity", type=_date, default=None, help="YYYY-MM-DD")
    p.add_argument("--day-counter", dest="day_counter", default=None)
    p.add_argument("--evaluation-date", type=_date, default=EXAMPLE_EVALUATION_DATE,
                   help="YYYY-MM-DD")
    p.add_argument("--settlement-date", type=_date, default=None,
                   help="YYYY-MM-DD; curves are anchored here "
                        "(default: example settlement when no evaluation date is "
                        "given, else the evaluation date)")
    p.add_argument("--greeks", action="store_true", help="also report sensitivities")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def run(args, out=None) -> int:
    out = out or sys.stdout
    inputs = EQUITY_OPTION_EXAMPLE.with_overrides(
        kind=args.kind,
        underlying=args.underlying,
        strike=args.strike,
        risk_free_rate=args.risk_free_rate,
        dividend_yield=args.dividend_yield,
        volatility=args.volatility,
        maturity=args.maturity,
        day_counter=args.day_counter,
    )
    settlement = args.settlement_date
    if settlement is None and args.evaluation_date == EXAMPLE_EVALUATION_DATE:
        settlement = EXAMPLE_SETTLEMENT_DATE

    try:
        spec, market = inputs.to_pricing_inputs(args.evaluation_date, settlement)
        result = bs_price(spec, market, compute_greeks=args.greeks)
    except InvalidInputError as exc:
        logger.error("invalid input: %s", exc)
        print(exc, file=out)
        return 1

    logger.debug("priced %s with T=%.6f", spec, spec.T)
    write_report(out, inputs, args.evaluation_date, result)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    start = time.perf_counter()
    status = run(args)
    if status == 0:
        print(f" \n{format_elapsed(time.perf_counter() - start)}\n")
    return status


if __name__ == "__main__":
    sys.exit(main())
