"""Abstract pricer shared by the swap and swaption pricers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from swaption.interfaces import Instrument
from swaption.market import Market


class BasePricer(ABC):
    """Abstract base class for pricers registered with the PricingEngine.

    A subclass accepts one product type in can_price() and values it against
    the named curve of a Market snapshot in npv().
    """

    @abstractmethod
    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer accepts the product."""
        ...

    @abstractmethod
    def npv(self, instrument: Instrument, market: Market) -> float:
        """Value the product in its notional's currency."""
        ...
