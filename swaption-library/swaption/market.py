"""
Market snapshot container.

`Market` is a *simple* in-memory snapshot of the curves needed for pricing,
keyed by name (e.g. "USD_SVENSSON"). Products reference curves by name so they
stay data-only, and pricing functions stay pure (market in -> number out).
"""

from __future__ import annotations

from swaption.interfaces import Curve


class Market:
    """Market snapshot: spot-rate curves by name."""

    def __init__(self, curves: dict[str, Curve] | None = None) -> None:
        # Copy so the caller's dict and the snapshot cannot mutate each other.
        self.curves: dict[str, Curve] = curves.copy() if curves else {}

    def curve(self, name: str) -> Curve:
        """Return curve by name. Raises KeyError if not found."""
        return self.curves[name]
