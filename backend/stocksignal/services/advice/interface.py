"""
Advice Service Interface

Defines the contract for the portfolio advice layer.
"""

from abc import abstractmethod

from stocksignal.services.base import BaseService
from stocksignal.schemas.portfolio import (
    Holding,
    HoldingAdvice,
    HoldingsSummary,
    PriceKind,
    PriceBounds,
    PriceOverrideResult,
    PortfolioSummary,
)


class AdviceServiceInterface(BaseService[list[HoldingAdvice], list[HoldingAdvice]]):
    """
    Advice Service Contract.

    INPUT: list[HoldingAdvice]
        - One record per holding, created by the upstream advice source

    OUTPUT: list[HoldingAdvice]
        - Same records, ordered SELL > BUY_MORE > REDUCE > HOLD,
          then by confidence descending (stable)

    PRICE OVERRIDES:
        stop_loss       0.70x - 0.95x current price
        add_more_price  0.80x - 0.98x current price
        target_price    1.02x - 1.50x current price

    Out-of-range overrides are rejected and leave the record unchanged.
    """

    @property
    def name(self) -> str:
        return "AdviceService"

    @abstractmethod
    async def execute(self, input_data: list[HoldingAdvice]) -> list[HoldingAdvice]:
        """Return advice in priority order."""
        pass

    @abstractmethod
    def get_price_bounds(self, current_price: float, kind: PriceKind) -> PriceBounds:
        """Acceptance interval for a price kind."""
        pass

    @abstractmethod
    def override_price(
        self,
        advice_list: list[HoldingAdvice],
        symbol: str,
        kind: PriceKind,
        proposed: float,
        current_price: float,
    ) -> PriceOverrideResult:
        """Validate and apply a user price override."""
        pass

    @abstractmethod
    def override_holding_price(
        self,
        advice_list: list[HoldingAdvice],
        holding: Holding,
        kind: PriceKind,
        proposed: float,
    ) -> PriceOverrideResult:
        """Price override for a held position at its current price."""
        pass

    @abstractmethod
    def summarize(self, advice_list: list[HoldingAdvice]) -> PortfolioSummary:
        """Aggregate view over the advice list."""
        pass

    @abstractmethod
    def summarize_holdings(self, holdings: list[Holding]) -> HoldingsSummary:
        """Cost, value and P&L totals over the held positions."""
        pass
