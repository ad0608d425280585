"""Command line entry point: price one swaption and print the premium.

With no arguments the reference scenario from SwaptionConfig is priced:

    $ swaption-price
    The price of the swaption is: $950000.00
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Optional, Sequence

from swaption.config import SwaptionConfig
from swaption.errors import PricingError
from swaption.pricing import quote_swaption

logger = logging.getLogger("swaption")


def build_parser() -> argparse.ArgumentParser:
    defaults = SwaptionConfig()
    parser = argparse.ArgumentParser(
        prog="swaption-price",
        description="Price a European swaption with a Svensson curve and Black's model.",
    )
    deal = parser.add_argument_group("swaption")
    deal.add_argument("--notional", type=float, default=defaults.notional)
    deal.add_argument("--strike-rate", type=float, default=defaults.strike_rate)
    deal.add_argument(
        "--option-maturity-years", type=float, default=defaults.option_maturity_years
    )
    deal.add_argument("--volatility", type=float, default=defaults.volatility)
    side = deal.add_mutually_exclusive_group()
    side.add_argument("--payer", dest="is_payer", action="store_true", help="right to pay fixed (default)")
    side.add_argument("--receiver", dest="is_payer", action="store_false", help="right to receive fixed")
    parser.set_defaults(is_payer=defaults.is_payer)
    deal.add_argument(
        "--swap-maturity-periods", type=int, default=defaults.swap_maturity_periods
    )

    curve = parser.add_argument_group("svensson curve")
    for field in ("beta0", "beta1", "beta2", "beta3", "tau1", "tau2"):
        curve.add_argument(f"--{field}", type=float, default=getattr(defaults, field))

    parser.add_argument(
        "--json", action="store_true", help="print the full quote as a JSON object"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SwaptionConfig:
    return SwaptionConfig(
        notional=args.notional,
        strike_rate=args.strike_rate,
        option_maturity_years=args.option_maturity_years,
        volatility=args.volatility,
        is_payer=args.is_payer,
        swap_maturity_periods=args.swap_maturity_periods,
        beta0=args.beta0,
        beta1=args.beta1,
        beta2=args.beta2,
        beta3=args.beta3,
        tau1=args.tau1,
        tau2=args.tau2,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)
    try:
        quote = quote_swaption(config.swaption(), config.market())
    except PricingError as exc:
        logger.error("Pricing failed (%s): %s", type(exc).__name__, exc)
        return 1

    if args.json:
        print(json.dumps(asdict(quote)))
    else:
        print(f"The price of the swaption is: ${quote.premium:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
