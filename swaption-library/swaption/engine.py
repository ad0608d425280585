"""
Pricing engine: computes NPV for instruments given a market snapshot.

Instruments/products are **data only**; this engine keeps a **registry of
pricers** and dispatches to the first one that accepts the instrument, so a
new product or model is added by registering a pricer, not by editing here.
"""

from __future__ import annotations

import logging

from swaption.interfaces import Instrument, Pricer
from swaption.market import Market

logger = logging.getLogger(__name__)


class PricingEngine:
    """
    Registry-based pricing engine.

    Pricers are dispatched based on can_price() checks. First matching pricer wins.
    Any object satisfying the Pricer protocol can be registered; BasePricer
    subclasses are the built-in ones.
    """

    def __init__(self) -> None:
        self._pricers: list[Pricer] = []

    def register(self, pricer: Pricer) -> None:
        """Register a pricer for dispatch. Order matters: first match wins."""
        self._pricers.append(pricer)

    def npv(self, instrument: Instrument, market: Market) -> float:
        """Dispatch to appropriate pricer."""
        for pricer in self._pricers:
            if pricer.can_price(instrument):
                logger.debug("Pricing %s with %s", type(instrument).__name__, type(pricer).__name__)
                return pricer.npv(instrument, market)
        raise ValueError(
            f"No pricer registered for {type(instrument).__name__}. "
            "Register a pricer with engine.register(pricer)."
        )


def create_default_engine() -> PricingEngine:
    """Factory for default engine with the swap and swaption pricers registered."""
    from swaption.pricers import SwapPricer, SwaptionPricer

    engine = PricingEngine()
    engine.register(SwapPricer())
    engine.register(SwaptionPricer())
    return engine
