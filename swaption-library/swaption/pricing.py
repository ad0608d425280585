"""
Pricing entrypoint.

Most users of the library should only need `price(trade, market)` or, for the
intermediate values, `quote_swaption(swaption, market)`. Both delegate to a
default `PricingEngine` / `SwaptionPricer`.
"""

from typing import TypeAlias

from swaption.engine import create_default_engine
from swaption.market import Market
from swaption.pricers.swaption_pricer import SwaptionPricer, SwaptionQuote
from swaption.products.swap import FixedFloatSwap
from swaption.products.swaption import EuropeanSwaption


Trade: TypeAlias = FixedFloatSwap | EuropeanSwaption

_default_engine = create_default_engine()


def price(trade: Trade, market: Market) -> float:
    """Return present value of trade (via default registry-based engine)."""
    return _default_engine.npv(trade, market)


def quote_swaption(swaption: EuropeanSwaption, market: Market) -> SwaptionQuote:
    """Return premium, forward swap rate and leg PVs for a swaption."""
    return SwaptionPricer.quote(swaption, market)
