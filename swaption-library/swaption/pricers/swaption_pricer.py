"""Black '76 pricer for European swaptions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from swaption.errors import InvalidInputDomain
from swaption.interfaces import Instrument
from swaption.market import Market
from swaption.pricers.base import BasePricer
from swaption.pricers.swap_pricer import (
    fixed_leg_pv,
    floating_leg_pv,
    swap_rate_from_legs,
)
from swaption.products.swaption import EuropeanSwaption

logger = logging.getLogger(__name__)


def norm_cdf(x: float) -> float:
    """Standard normal CDF via the error function: N(x) = 0.5 * (1 + erf(x / sqrt(2)))."""
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def black_swaption_price(
    notional: float,
    strike: float,
    forward: float,
    expiry: float,
    volatility: float,
    is_payer: bool = True,
) -> float:
    r"""
    Black '76 premium on the forward swap rate F.

    d1 = (ln(F/K) + 0.5 * sigma^2 * T) / (sigma * sqrt(T)), d2 = d1 - sigma * sqrt(T)
    payer    = notional * (F * N(d1) - K * N(d2))
    receiver = notional * (K * (1 - N(d2)) - F * (1 - N(d1)))

    The notional multiplies the bracket where market convention would use the
    annuity (PVBP); callers comparing against quoted premiums must rescale.
    """
    for label, value in (
        ("forward", forward),
        ("strike", strike),
        ("volatility", volatility),
        ("expiry", expiry),
    ):
        if not 0 < value < math.inf:
            raise InvalidInputDomain(f"{label} must be > 0 and finite (got {value})")

    vol_sqrt_t = volatility * math.sqrt(expiry)
    d1 = (math.log(forward / strike) + 0.5 * volatility * volatility * expiry) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    nd1 = norm_cdf(d1)
    nd2 = norm_cdf(d2)
    logger.debug("Black d1=%.8f d2=%.8f N(d1)=%.8f N(d2)=%.8f", d1, d2, nd1, nd2)

    if is_payer:
        return notional * (forward * nd1 - strike * nd2)
    return notional * (strike * (1.0 - nd2) - forward * (1.0 - nd1))


@dataclass(frozen=True)
class SwaptionQuote:
    """Premium together with the intermediate pipeline values."""

    forward_swap_rate: float
    fixed_leg_pv: float
    floating_leg_pv: float
    premium: float


class SwaptionPricer(BasePricer):
    """Pricer for European swaptions (Svensson forward + Black '76)."""

    def can_price(self, instrument: Instrument) -> bool:
        return isinstance(instrument, EuropeanSwaption)

    def npv(self, instrument: Instrument, market: Market) -> float:
        assert isinstance(instrument, EuropeanSwaption)
        return self.quote(instrument, market).premium

    @staticmethod
    def quote(swaption: EuropeanSwaption, market: Market) -> SwaptionQuote:
        """Run the full pipeline: legs -> forward swap rate -> Black premium."""
        c = market.curve(swaption.curve)
        n = swaption.swap_maturity_periods
        annuity = fixed_leg_pv(swaption.notional, 1.0, n, c)
        floating = floating_leg_pv(swaption.notional, n, c)
        fwd = swap_rate_from_legs(floating, annuity)
        premium = black_swaption_price(
            notional=swaption.notional,
            strike=swaption.strike,
            forward=fwd,
            expiry=swaption.expiry,
            volatility=swaption.volatility,
            is_payer=swaption.is_payer,
        )
        logger.info(
            "Priced %s swaption on %s: forward %.8f strike %.6f premium %.2f",
            "payer" if swaption.is_payer else "receiver",
            swaption.curve,
            fwd,
            swaption.strike,
            premium,
        )
        return SwaptionQuote(
            forward_swap_rate=fwd,
            fixed_leg_pv=annuity,
            floating_leg_pv=floating,
            premium=premium,
        )
