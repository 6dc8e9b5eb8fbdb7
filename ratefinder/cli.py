"""Command-line front end for the rate solver.

Usage:
    python -m ratefinder.cli irr -100 39 59 55 20
    python -m ratefinder.cli irr -5 10.5 1 -8 1 --guess 0.05 --percent
    python -m ratefinder.cli xirr 2008-01-01:-10000 2008-03-01:2750 2008-10-30:4250
    python -m ratefinder.cli npv 0.08 -40000 5000 8000 12000 30000
    python -m ratefinder.cli amortize 0.00625 180 200000 --limit 12
"""

import argparse
import logging
import sys

from ratefinder.config import settings
from ratefinder.engine.cashflows import to_date
from ratefinder.engine.debt import amortization_schedule
from ratefinder.engine.errors import InvalidInputError
from ratefinder.engine.irr import irr, xirr
from ratefinder.engine.npv import npv


def format_rate(rate: float | None, percent: bool) -> str:
    if rate is None:
        return "N/A"
    if percent:
        return f"{rate * 100:.4f}%"
    return f"{rate:.10f}"


def print_result(label: str, rate: float | None, iterations: int, converged: bool, percent: bool) -> None:
    print(f"  {label + ':':<12}{format_rate(rate, percent)}")
    print(f"  {'Iterations:':<12}{iterations}")
    print(f"  {'Converged:':<12}{'Yes' if converged else 'No'}")


def print_schedule(rows, limit: int | None) -> None:
    print(f"  {'Period':>6}  {'Payment':>12}  {'Interest':>12}  {'Principal':>12}  {'Balance':>14}")
    for row in rows[:limit] if limit else rows:
        print(
            f"  {row.period:>6}  {row.payment:>12,}  {row.interest:>12,}  "
            f"{row.principal:>12,}  {row.remaining_balance:>14,}"
        )
    if rows:
        print(f"\n  Total interest: {rows[-1].cumulative_interest:,}")


def parse_flow(text: str) -> tuple[str, float]:
    """Parse a DATE:AMOUNT pair, e.g. 2008-01-01:-10000."""
    date_part, sep, amount_part = text.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected DATE:AMOUNT, got {text!r}")
    try:
        to_date(date_part)
        return date_part, float(amount_part)
    except (InvalidInputError, ValueError) as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ratefinder", description="IRR / XIRR rate solver")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)

    def solver_options(p: argparse.ArgumentParser) -> None:
        p.add_argument("--guess", type=float, default=settings.default_guess, help="Starting rate (default: %(default)s)")
        p.add_argument("--tol", type=float, default=settings.default_tol, help="NPV tolerance (default: %(default)s)")
        p.add_argument("--percent", action="store_true", help="Print the rate as a percentage")

    p_irr = sub.add_parser("irr", help="IRR of evenly spaced cash flows")
    p_irr.add_argument("cashflows", nargs="+", type=float, help="Cash flows, first one is period 0")
    solver_options(p_irr)

    p_xirr = sub.add_parser("xirr", help="XIRR of dated cash flows")
    p_xirr.add_argument("flows", nargs="+", type=parse_flow, help="DATE:AMOUNT pairs")
    solver_options(p_xirr)

    p_npv = sub.add_parser("npv", help="NPV at a given rate")
    p_npv.add_argument("rate", type=float)
    p_npv.add_argument("cashflows", nargs="+", type=float)

    p_amort = sub.add_parser("amortize", help="Loan amortization schedule")
    p_amort.add_argument("rate", type=float, help="Rate per period")
    p_amort.add_argument("nper", type=int, help="Number of periods")
    p_amort.add_argument("pv", type=float, help="Loan principal")
    p_amort.add_argument("--limit", type=int, default=None, help="Only print the first N periods")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        if args.command == "irr":
            result = irr(args.cashflows, guess=args.guess, tol=args.tol)
            print_result("IRR", result.irr, result.iterations, result.converged, args.percent)
            return 0 if result.converged else 1

        if args.command == "xirr":
            dates = [d for d, _ in args.flows]
            amounts = [a for _, a in args.flows]
            result = xirr(amounts, dates, guess=args.guess, tol=args.tol)
            print_result("XIRR", result.xirr, result.iterations, result.converged, args.percent)
            return 0 if result.converged else 1

        if args.command == "npv":
            print(f"  NPV: {npv(args.rate, args.cashflows):,.6f}")
            return 0

        if args.command == "amortize":
            print_schedule(amortization_schedule(args.rate, args.nper, args.pv), args.limit)
            return 0
    except InvalidInputError as e:
        parser.error(str(e))

    parser.error(f"unknown command {args.command!r}")


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
