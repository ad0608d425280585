"""GraphQL schema: curve and pricing queries."""

import strawberry

from swaption import __version__

from app.services import price_swap, price_swaption, spot_rates
from app.types import (
    MarketInput,
    PricingResult,
    SvenssonCurveInput,
    SwapInput,
    SwaptionInput,
    SwaptionResult,
)


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return __version__

    @strawberry.field
    def spot_rates(self, curve: SvenssonCurveInput, times: list[float]) -> list[float]:
        """Continuously compounded spot rates of a Svensson curve at each time (> 0)."""
        return spot_rates(curve=curve, times=times)

    @strawberry.field
    def price_swap(self, swap: SwapInput, market: MarketInput) -> PricingResult:
        """Price an annual fixed-float swap (receive float, pay fixed)."""
        return price_swap(swap=swap, market=market)

    @strawberry.field
    def price_swaption(self, swaption: SwaptionInput, market: MarketInput) -> SwaptionResult:
        """Price a European swaption with Black's model on the Svensson forward swap rate."""
        return price_swaption(swaption=swaption, market=market)


schema = strawberry.Schema(query=Query)
