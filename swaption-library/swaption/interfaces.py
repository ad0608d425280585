"""
Protocol-based interfaces for the extension points of the swaption library.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance, so a
new curve family or pricer can be plugged in without touching core code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from swaption.market import Market


@runtime_checkable
class Curve(Protocol):
    """Protocol for spot-rate curve implementations.

    Any class implementing zero_rate_cc() and df() can be used as a curve,
    so a Nelson-Siegel or spline curve can replace SvenssonCurve.
    """

    name: str

    def zero_rate_cc(self, t: float) -> float:
        """Return the continuously compounded spot rate at time t."""
        ...

    def df(self, t: float) -> float:
        """Return discount factor to time t (year-fraction)."""
        ...


@runtime_checkable
class Instrument(Protocol):
    """Marker protocol for all priceable instruments.

    Instruments are data-only; pricing logic lives in Pricer implementations.
    """

    pass


class Pricer(Protocol):
    """Protocol for instrument pricing implementations."""

    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the given instrument type."""
        ...

    def npv(self, instrument: Instrument, market: Market) -> float:
        """Compute present value in the notional's currency."""
        ...
