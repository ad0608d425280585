"""Leg valuation and pricer for annual fixed-float swaps (single curve)."""

from __future__ import annotations

import logging

from swaption.errors import DivisionByZero
from swaption.interfaces import Curve, Instrument
from swaption.market import Market
from swaption.pricers.base import BasePricer
from swaption.products.swap import FixedFloatSwap

logger = logging.getLogger(__name__)


def leg_pv(notional: float, coupon_rate: float, maturity_periods: int, c: Curve) -> float:
    """
    PV of a leg paying `notional * coupon_rate` at t = 1..maturity_periods.
    PV = sum_t notional * coupon_rate * DF(t).
    """
    pv = 0.0
    for t in range(1, maturity_periods + 1):
        pv += notional * coupon_rate * c.df(t)
    return pv


def fixed_leg_pv(notional: float, fixed_rate: float, maturity_periods: int, c: Curve) -> float:
    """Fixed leg PV at the given coupon."""
    return leg_pv(notional, fixed_rate, maturity_periods, c)


def floating_leg_pv(notional: float, maturity_periods: int, c: Curve) -> float:
    """
    Floating leg PV, valued as a full notional per period (coupon 1.0).

    This is a simplification, not a reset-based floating leg: a textbook par
    leg would be notional * (1 - DF(T)). Forward rates and swaption prices are
    defined relative to this convention, so it is kept as is.
    """
    return leg_pv(notional, 1.0, maturity_periods, c)


def swap_rate_from_legs(floating: float, annuity: float) -> float:
    """
    Forward swap rate from already valued legs: floating PV / unit-coupon fixed PV.

    Raises DivisionByZero when the annuity is zero (zero notional or no periods).
    """
    if annuity == 0:
        raise DivisionByZero("fixed leg PV is zero; forward swap rate undefined")
    fwd = floating / annuity
    logger.debug(
        "Forward swap rate %.10f (floating PV %.6f / annuity %.6f)", fwd, floating, annuity
    )
    return fwd


def forward_swap_rate(notional: float, maturity_periods: int, c: Curve) -> float:
    """Forward swap rate = floating leg PV / fixed leg PV at unit coupon."""
    return swap_rate_from_legs(
        floating_leg_pv(notional, maturity_periods, c),
        fixed_leg_pv(notional, 1.0, maturity_periods, c),
    )


class SwapPricer(BasePricer):
    """Pricer for annual fixed-float swaps (single curve)."""

    def can_price(self, instrument: Instrument) -> bool:
        return isinstance(instrument, FixedFloatSwap)

    def npv(self, instrument: Instrument, market: Market) -> float:
        """
        Convention: receive float, pay fixed. PV = PV(float leg) - PV(fixed leg).
        """
        assert isinstance(instrument, FixedFloatSwap)
        swap = instrument
        c = market.curve(swap.curve)
        pv_fixed = fixed_leg_pv(swap.notional, swap.fixed_rate, swap.maturity_periods, c)
        pv_float = floating_leg_pv(swap.notional, swap.maturity_periods, c)
        logger.debug("Swap legs on %s: float %.6f fixed %.6f", swap.curve, pv_float, pv_fixed)
        return pv_float - pv_fixed
