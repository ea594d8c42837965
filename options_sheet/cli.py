#!/usr/bin/env python
"""
Command-line interface for the options_sheet formulas.

Example usage:
    options-sheet price call 100 105 30 0.25
    options-sheet price put 100 95 30 0.25 --rate 0.04
    options-sheet greeks call 100 100 90 0.2
    options-sheet sequence 0 10 5
    options-sheet formula BSMODEL call 100 100 0.05 30 0.2
"""

import argparse
import sys
from dataclasses import asdict
from typing import List, Optional

import yaml

from options_sheet.config import PricingConfig, SheetConfig, get_default_config
from options_sheet.errors import OptionsSheetError
from options_sheet.logger import configure_logging, get_logger
from options_sheet.pricing.black_scholes import BlackScholesCalculator
from options_sheet.pricing.normal import normal_cdf
from options_sheet.sequence import set_sequence
from options_sheet.sheet import FormulaError, evaluate

logger = get_logger(__name__)


def _precision(value: str) -> int:
    places = int(value)
    if places < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {places}")
    return places


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per formula family."""
    parser = argparse.ArgumentParser(
        prog="options-sheet",
        description="Black-Scholes pricing and sequence formulas",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--config", type=str, default=None, help="YAML configuration file")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override the configured log level",
    )
    parser.add_argument("--precision", type=_precision, default=6, help="Decimal places in output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    cdf = subparsers.add_parser("cdf", help="Standard normal CDF")
    cdf.add_argument("x", type=float)
    cdf.set_defaults(handler=_run_cdf)

    for name, handler, help_text in (
        ("price", _run_price, "Black-Scholes premium"),
        ("greeks", _run_greeks, "Black-Scholes Greeks"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("option_type", type=str.lower, choices=["call", "put"])
        sub.add_argument("spot", type=float, help="Underlying price")
        sub.add_argument("strike", type=float, help="Strike price")
        sub.add_argument("days", type=float, help="Time to maturity in days")
        sub.add_argument("volatility", type=float, help="Annual volatility, e.g. 0.2")
        sub.add_argument("--rate", type=float, default=None,
                         help="Risk-free rate (default: configured rate)")
        sub.set_defaults(handler=handler)

    sequence = subparsers.add_parser("sequence", help="Evenly spaced values")
    sequence.add_argument("start", type=float)
    sequence.add_argument("end", type=float)
    sequence.add_argument("rows", type=float, help="Number of intervals")
    sequence.set_defaults(handler=_run_sequence)

    formula = subparsers.add_parser("formula", help="Evaluate a sheet formula by name")
    formula.add_argument("name", type=str, help="Formula name, e.g. BSMODEL")
    formula.add_argument("args", nargs="*", help="Cell values")
    formula.set_defaults(handler=_run_formula)

    return parser


def _format(value, precision: int) -> str:
    if isinstance(value, float):
        return f"{value:.{precision}f}"
    return str(value)


def _calculator(args: argparse.Namespace, config: SheetConfig) -> BlackScholesCalculator:
    rate = args.rate if args.rate is not None else config.pricing.risk_free_rate
    return BlackScholesCalculator(
        PricingConfig(risk_free_rate=rate, days_per_year=config.pricing.days_per_year)
    )


def _run_cdf(args: argparse.Namespace, config: SheetConfig) -> List[str]:
    return [_format(normal_cdf(args.x), args.precision)]


def _run_price(args: argparse.Namespace, config: SheetConfig) -> List[str]:
    price = _calculator(args, config).price(
        args.option_type, args.spot, args.strike, args.days, args.volatility
    )
    return [_format(price, args.precision)]


def _run_greeks(args: argparse.Namespace, config: SheetConfig) -> List[str]:
    greeks = _calculator(args, config).greeks(
        args.option_type, args.spot, args.strike, args.days, args.volatility
    )
    return [f"{name}: {_format(value, args.precision)}" for name, value in asdict(greeks).items()]


def _run_sequence(args: argparse.Namespace, config: SheetConfig) -> List[str]:
    values = set_sequence(args.start, args.end, args.rows)
    if config.sequence.orientation == 'row':
        return ["\t".join(_format(value, args.precision) for value in values)]
    return [_format(value, args.precision) for value in values]


def _run_formula(args: argparse.Namespace, config: SheetConfig) -> List[str]:
    result = evaluate(args.name, *args.args, config=config)
    if isinstance(result, FormulaError):
        raise OptionsSheetError(f"{result.code} {result.message}")
    if isinstance(result, list):
        return ["\t".join(_format(cell, args.precision) for cell in row) for row in result]
    return [_format(result, args.precision)]


def _load_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> SheetConfig:
    if args.config is None:
        config = get_default_config()
    else:
        try:
            config = SheetConfig.load(args.config)
        except (OSError, yaml.YAMLError, AssertionError, TypeError, ValueError) as e:
            parser.error(f"invalid config {args.config}: {e}")
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = _load_config(parser, args)
    configure_logging(config)
    logger.debug(f"Running '{args.command}' with config: {config}")

    try:
        lines = args.handler(args, config)
    except OptionsSheetError as e:
        logger.debug(f"'{args.command}' failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
