"""
Svensson yield-curve primitives.

Conventions kept deliberately simple:
- Times are **year fractions** (e.g. 2.0 = 2Y from the curve reference).
- Rates are **continuously compounded spot (zero) rates**.
- The curve is fully parametric (no pillars, no interpolation):

      r(t) = b0 + b1*g(t/tau1) + b2*(g(t/tau1) - exp(-t/tau1))
                + b3*(g(t/tau2) - exp(-t/tau2)),    g(x) = (1 - exp(-x)) / x

There is no small-t expansion: the formula is only defined for t > 0, and
evaluating at t <= 0 is rejected rather than approximated.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from swaption.errors import InvalidCurveParameter

logger = logging.getLogger(__name__)


def _g(x: float) -> float:
    return (1.0 - math.exp(-x)) / x


def spot_rate(
    t: float,
    beta0: float,
    beta1: float,
    beta2: float,
    beta3: float,
    tau1: float,
    tau2: float,
) -> float:
    """
    Continuously compounded Svensson spot rate at time t (year-fraction).

    Raises InvalidCurveParameter if t, tau1 or tau2 is not finite and strictly
    positive, or if a beta is not finite.
    """
    if not 0 < tau1 < math.inf or not 0 < tau2 < math.inf:
        raise InvalidCurveParameter(
            f"tau1 and tau2 must be > 0 and finite (got tau1={tau1}, tau2={tau2})"
        )
    if not 0 < t < math.inf:
        raise InvalidCurveParameter(f"t must be > 0 and finite (got t={t})")
    if not all(math.isfinite(b) for b in (beta0, beta1, beta2, beta3)):
        raise InvalidCurveParameter(
            f"betas must be finite (got {beta0}, {beta1}, {beta2}, {beta3})"
        )
    x1 = t / tau1
    x2 = t / tau2
    g1 = _g(x1)
    g2 = _g(x2)
    return (
        beta0
        + beta1 * g1
        + beta2 * (g1 - math.exp(-x1))
        + beta3 * (g2 - math.exp(-x2))
    )


def discount_factor(rate: float, t: float) -> float:
    r"""
    Discount factor for a CC rate over t years: DF = exp(-rate*t).

    Negative rates are valid and give DF > 1.
    """
    return math.exp(-rate * t)


@dataclass(frozen=True)
class SvenssonCurve:
    """
    Svensson spot-rate curve defined by six shape parameters.

    - `beta0` is the long-run level, `beta1` the short-end slope.
    - `beta2`, `beta3` add humps with decay times `tau1`, `tau2`.

    Implements the Curve protocol structurally (no explicit inheritance).
    """

    name: str
    beta0: float
    beta1: float
    beta2: float
    beta3: float
    tau1: float
    tau2: float

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not 0 < self.tau1 < math.inf:
            raise InvalidCurveParameter(f"tau1 must be > 0 and finite (got {self.tau1})")
        if not 0 < self.tau2 < math.inf:
            raise InvalidCurveParameter(f"tau2 must be > 0 and finite (got {self.tau2})")
        for label in ("beta0", "beta1", "beta2", "beta3"):
            if not math.isfinite(getattr(self, label)):
                raise InvalidCurveParameter(f"{label} must be finite (got {getattr(self, label)})")

    @property
    def params(self) -> tuple[float, float, float, float, float, float]:
        """(beta0, beta1, beta2, beta3, tau1, tau2)."""
        return (self.beta0, self.beta1, self.beta2, self.beta3, self.tau1, self.tau2)

    def zero_rate_cc(self, t: float) -> float:
        """Continuously compounded spot rate at time t. t must be > 0."""
        r = spot_rate(t, *self.params)
        if r < 0:
            logger.warning("Curve %s has a negative spot rate %.6f at t=%s", self.name, r, t)
        return r

    def df(self, t: float) -> float:
        """Discount factor to time t: DF(t) = exp(-r(t)*t)."""
        return discount_factor(self.zero_rate_cc(t), t)
