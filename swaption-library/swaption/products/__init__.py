"""Products: annual fixed-float swap and European swaption."""

from swaption.products.swap import FixedFloatSwap
from swaption.products.swaption import EuropeanSwaption

__all__ = ["FixedFloatSwap", "EuropeanSwaption"]
