"""Typed errors raised when pricing inputs fall outside a formula's domain.

All of them derive from `ValueError`, so callers that already guard pricing
calls with `except ValueError` keep working.
"""


class PricingError(ValueError):
    """Base class for domain errors raised by the pricing library."""

    pass


class InvalidCurveParameter(PricingError):
    """Raised when a Svensson decay constant or evaluation time is not > 0."""

    pass


class DivisionByZero(PricingError):
    """Raised when the fixed-leg annuity is zero and no forward rate exists."""

    pass


class InvalidInputDomain(PricingError):
    """Raised when Black's formula gets a non-positive forward, strike, vol or expiry."""

    pass
