"""Fixed-float interest rate swap on annual periods (instrument data only; pricing via PricingEngine)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FixedFloatSwap:
    """
    Fixed vs float swap paying once a year for `maturity_periods` years.
    Receive float, pay fixed.
    PV = PV_float_leg - PV_fixed_leg (computed by PricingEngine).
    """

    curve: str
    notional: float
    fixed_rate: float
    maturity_periods: int
