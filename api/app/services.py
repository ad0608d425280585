"""Service layer: convert GraphQL inputs to swaption library objects and run pricing."""

from __future__ import annotations

import logging

from swaption.curves import SvenssonCurve
from swaption.market import Market
from swaption.pricing import price, quote_swaption
from swaption.products.swap import FixedFloatSwap
from swaption.products.swaption import EuropeanSwaption

from app.types import (
    MarketInput,
    PricingResult,
    SvenssonCurveInput,
    SwapInput,
    SwaptionInput,
    SwaptionResult,
)

logger = logging.getLogger(__name__)


def curve_from_input(c: SvenssonCurveInput) -> SvenssonCurve:
    """Build SvenssonCurve from GraphQL SvenssonCurveInput."""
    return SvenssonCurve(
        name=c.name,
        beta0=c.beta0,
        beta1=c.beta1,
        beta2=c.beta2,
        beta3=c.beta3,
        tau1=c.tau1,
        tau2=c.tau2,
    )


def market_from_input(m: MarketInput) -> Market:
    """Build Market from GraphQL MarketInput."""
    if not m.curves:
        raise ValueError("market.curves must not be empty")
    curves: dict[str, SvenssonCurve] = {}
    for c in m.curves:
        curves[c.name] = curve_from_input(c)
    return Market(curves=curves)


def _validate_curve_in_market(market: Market, curve_name: str, context: str) -> None:
    if curve_name not in market.curves:
        raise ValueError(
            f"{context}: curve '{curve_name}' not found in market. "
            f"Available curves: {list(market.curves.keys())}"
        )


def spot_rates(curve: SvenssonCurveInput, times: list[float]) -> list[float]:
    """Spot rates of a Svensson curve at the requested times (all > 0)."""
    c = curve_from_input(curve)
    return [c.zero_rate_cc(t) for t in times]


def price_swap(swap: SwapInput, market: MarketInput) -> PricingResult:
    """Price an annual fixed-float swap."""
    if swap.maturity_periods < 1:
        raise ValueError("swap.maturity_periods must be >= 1")
    m = market_from_input(market)
    _validate_curve_in_market(m, swap.curve, "FixedFloatSwap")
    instrument = FixedFloatSwap(
        curve=swap.curve,
        notional=swap.notional,
        fixed_rate=swap.fixed_rate,
        maturity_periods=swap.maturity_periods,
    )
    return PricingResult(npv=price(instrument, m))


def price_swaption(swaption: SwaptionInput, market: MarketInput) -> SwaptionResult:
    """Price a European swaption and return the forward rate and leg PVs with it."""
    if swaption.swap_maturity_periods < 1:
        raise ValueError("swaption.swap_maturity_periods must be >= 1")
    m = market_from_input(market)
    _validate_curve_in_market(m, swaption.curve, "EuropeanSwaption")
    instrument = EuropeanSwaption(
        curve=swaption.curve,
        notional=swaption.notional,
        strike=swaption.strike,
        expiry=swaption.expiry,
        volatility=swaption.volatility,
        swap_maturity_periods=swaption.swap_maturity_periods,
        is_payer=swaption.is_payer,
    )
    quote = quote_swaption(instrument, m)
    logger.info("priceSwaption on %s -> %.2f", swaption.curve, quote.premium)
    return SwaptionResult(
        premium=quote.premium,
        forward_swap_rate=quote.forward_swap_rate,
        fixed_leg_pv=quote.fixed_leg_pv,
        floating_leg_pv=quote.floating_leg_pv,
    )
