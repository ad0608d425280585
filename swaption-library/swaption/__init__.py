"""Swaption library: Svensson curve, swap legs, Black '76 pricer and engine."""

__version__ = "0.1.0"

from swaption.config import SwaptionConfig
from swaption.curves import SvenssonCurve, discount_factor, spot_rate
from swaption.engine import PricingEngine, create_default_engine
from swaption.errors import (
    DivisionByZero,
    InvalidCurveParameter,
    InvalidInputDomain,
    PricingError,
)
from swaption.interfaces import Curve, Instrument, Pricer
from swaption.market import Market
from swaption.pricers import BasePricer, SwapPricer, SwaptionPricer, SwaptionQuote
from swaption.pricers.swap_pricer import (
    fixed_leg_pv,
    floating_leg_pv,
    forward_swap_rate,
    leg_pv,
    swap_rate_from_legs,
)
from swaption.pricers.swaption_pricer import black_swaption_price, norm_cdf
from swaption.pricing import Trade, price, quote_swaption
from swaption.products.swap import FixedFloatSwap
from swaption.products.swaption import EuropeanSwaption

__all__ = [
    "Curve",
    "Instrument",
    "Pricer",
    "SvenssonCurve",
    "spot_rate",
    "discount_factor",
    "PricingEngine",
    "create_default_engine",
    "Market",
    "BasePricer",
    "SwapPricer",
    "SwaptionPricer",
    "SwaptionQuote",
    "leg_pv",
    "fixed_leg_pv",
    "floating_leg_pv",
    "forward_swap_rate",
    "swap_rate_from_legs",
    "black_swaption_price",
    "norm_cdf",
    "price",
    "quote_swaption",
    "Trade",
    "FixedFloatSwap",
    "EuropeanSwaption",
    "SwaptionConfig",
    "PricingError",
    "InvalidCurveParameter",
    "DivisionByZero",
    "InvalidInputDomain",
]
