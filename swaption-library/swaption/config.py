"""
Run configuration for pricing a single swaption.

`SwaptionConfig` collects every input of one pricing run. Its defaults are the
reference scenario (1,000,000 notional 2Y-into-5Y payer at 5%, 20% vol, on the
curve b = (0.02, -0.01, 0.03, -0.02), tau = (2, 10)).
"""

from __future__ import annotations

from dataclasses import dataclass

from swaption.curves import SvenssonCurve
from swaption.market import Market
from swaption.products.swaption import EuropeanSwaption

DEFAULT_CURVE_NAME = "SVENSSON"


@dataclass(frozen=True)
class SwaptionConfig:
    """Inputs for one swaption pricing run."""

    notional: float = 1_000_000.0
    strike_rate: float = 0.05
    option_maturity_years: float = 2.0
    volatility: float = 0.2
    is_payer: bool = True
    swap_maturity_periods: int = 5
    beta0: float = 0.02
    beta1: float = -0.01
    beta2: float = 0.03
    beta3: float = -0.02
    tau1: float = 2.0
    tau2: float = 10.0
    curve_name: str = DEFAULT_CURVE_NAME

    def curve(self) -> SvenssonCurve:
        """Build the Svensson curve. Raises InvalidCurveParameter on bad taus."""
        return SvenssonCurve(
            name=self.curve_name,
            beta0=self.beta0,
            beta1=self.beta1,
            beta2=self.beta2,
            beta3=self.beta3,
            tau1=self.tau1,
            tau2=self.tau2,
        )

    def market(self) -> Market:
        return Market(curves={self.curve_name: self.curve()})

    def swaption(self) -> EuropeanSwaption:
        return EuropeanSwaption(
            curve=self.curve_name,
            notional=self.notional,
            strike=self.strike_rate,
            expiry=self.option_maturity_years,
            volatility=self.volatility,
            swap_maturity_periods=self.swap_maturity_periods,
            is_payer=self.is_payer,
        )
