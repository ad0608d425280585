"""Pricer implementations for the registry-based pricing engine."""

from swaption.pricers.base import BasePricer
from swaption.pricers.swap_pricer import SwapPricer
from swaption.pricers.swaption_pricer import SwaptionPricer, SwaptionQuote

__all__ = [
    "BasePricer",
    "SwapPricer",
    "SwaptionPricer",
    "SwaptionQuote",
]
