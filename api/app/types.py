"""GraphQL types for the swaption pricing API."""

from __future__ import annotations

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class SvenssonCurveInput:
    """Svensson curve: level/slope/hump loadings and two decay times (years)."""

    name: str
    beta0: float
    beta1: float
    beta2: float
    beta3: float
    tau1: float
    tau2: float


@strawberry.input
class MarketInput:
    """Market snapshot: named Svensson curves."""

    curves: list[SvenssonCurveInput]


@strawberry.input
class SwapInput:
    """Annual fixed-float swap (receive float, pay fixed)."""

    curve: str
    notional: float
    fixed_rate: float
    maturity_periods: int


@strawberry.input
class SwaptionInput:
    """European swaption priced with Black's model on the forward swap rate."""

    curve: str
    notional: float
    strike: float
    expiry: float
    volatility: float
    swap_maturity_periods: int
    is_payer: bool = True


# --- Output types (response payloads) ---


@strawberry.type
class PricingResult:
    """Pricing result: NPV in the notional's currency."""

    npv: float


@strawberry.type
class SwaptionResult:
    """Swaption premium and the intermediate pipeline values."""

    premium: float
    forward_swap_rate: float
    fixed_leg_pv: float
    floating_leg_pv: float
