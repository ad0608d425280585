"""European swaption on an annual fixed-float swap (instrument data only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EuropeanSwaption:
    """
    Option to enter a swap of `swap_maturity_periods` annual periods at `strike`.

    - `expiry`: option maturity in years.
    - `volatility`: annualised Black volatility of the forward swap rate.
    - `is_payer`: True for the right to pay fixed, False for a receiver.
    """

    curve: str
    notional: float
    strike: float
    expiry: float
    volatility: float
    swap_maturity_periods: int
    is_payer: bool = True
