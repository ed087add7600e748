"""
Advice Service Implementation

Prioritizes holding advice and validates user price overrides.
PURE PYTHON - deterministic and auditable.
"""

import logging
from typing import Optional

from stocksignal.schemas.portfolio import (
    Holding,
    HoldingAdvice,
    HoldingsSummary,
    PriceKind,
    PriceBounds,
    PriceOverrideResult,
    PortfolioSummary,
)
from stocksignal.services.base import (
    AdviceNotFoundError,
    PriceOutOfRangeError,
    ValidationError,
)
from stocksignal.services.advice.interface import AdviceServiceInterface
from stocksignal.services.advice.prioritizer import prioritize_advice, prioritize_advice_in_place
from stocksignal.services.advice.price_bounds import compute_price_bounds, check_price_override
from stocksignal.services.advice.summary import summarize_portfolio, summarize_holdings

logger = logging.getLogger(__name__)


class AdviceService(AdviceServiceInterface):
    """
    Advice Service.

    Works on advice lists owned by the caller. Overrides mutate the
    matching record in place; concurrent edits to one list must be
    serialized by the caller.
    """

    @property
    def name(self) -> str:
        return "AdviceService"

    async def execute(self, input_data: list[HoldingAdvice]) -> list[HoldingAdvice]:
        """Return advice in priority order."""
        ordered = prioritize_advice(input_data)
        logger.debug(f"Prioritized {len(ordered)} advice records")
        return ordered

    def prioritize_in_place(self, advice_list: list[HoldingAdvice]) -> None:
        """Reorder the caller's advice list in place."""
        prioritize_advice_in_place(advice_list)

    def get_price_bounds(self, current_price: float, kind: PriceKind) -> PriceBounds:
        """Acceptance interval for a price kind."""
        self._require_positive_price(current_price)
        return compute_price_bounds(current_price, kind)

    def apply_price_override(
        self,
        advice_list: list[HoldingAdvice],
        symbol: str,
        kind: PriceKind,
        proposed: float,
        current_price: float,
    ) -> PriceOverrideResult:
        """
        Validate and apply a price override.

        Raises:
            AdviceNotFoundError: No advice record for symbol
            PriceOutOfRangeError: Proposed price outside the interval
            ValidationError: Non-positive current price
        """
        advice = self._find_advice(advice_list, symbol)
        self._require_positive_price(current_price)

        is_valid, message, bounds = check_price_override(current_price, kind, proposed)
        if not is_valid:
            raise PriceOutOfRangeError(self.name, message, bounds=bounds, proposed=proposed)

        previous = getattr(advice, kind.value)
        setattr(advice, kind.value, proposed)

        logger.info(f"{advice.symbol}: {kind.value} {previous:.2f} -> {proposed:.2f}")
        return PriceOverrideResult(
            symbol=advice.symbol,
            kind=kind,
            proposed=proposed,
            accepted=True,
            bounds=bounds,
            previous=previous,
            message=message,
        )

    def override_price(
        self,
        advice_list: list[HoldingAdvice],
        symbol: str,
        kind: PriceKind,
        proposed: float,
        current_price: float,
    ) -> PriceOverrideResult:
        """
        Validate and apply a user price override.

        Out-of-range values come back as a rejected result carrying the
        bounds, so the caller can show the allowed interval.
        """
        try:
            return self.apply_price_override(advice_list, symbol, kind, proposed, current_price)
        except PriceOutOfRangeError as e:
            logger.warning(f"Rejected {kind.value} override for {symbol}: {e.message}")
            return PriceOverrideResult(
                symbol=symbol,
                kind=kind,
                proposed=proposed,
                accepted=False,
                bounds=e.bounds,
                message=e.message,
            )

    def override_holding_price(
        self,
        advice_list: list[HoldingAdvice],
        holding: Holding,
        kind: PriceKind,
        proposed: float,
    ) -> PriceOverrideResult:
        """override_price() for a held position, priced at its current price."""
        return self.override_price(
            advice_list, holding.symbol, kind, proposed, holding.current_price
        )

    def summarize(self, advice_list: list[HoldingAdvice]) -> PortfolioSummary:
        """Aggregate view over the advice list."""
        return summarize_portfolio(advice_list)

    def summarize_holdings(self, holdings: list[Holding]) -> HoldingsSummary:
        """Cost, value and P&L totals over the held positions."""
        return summarize_holdings(holdings)

    def _require_positive_price(self, current_price: float) -> None:
        if current_price <= 0:
            raise ValidationError(
                self.name,
                f"Current price must be positive, got {current_price}",
                details={"current_price": current_price},
            )

    def _find_advice(self, advice_list: list[HoldingAdvice], symbol: str) -> HoldingAdvice:
        wanted = symbol.upper()
        for advice in advice_list:
            if advice.symbol.upper() == wanted:
                return advice
        raise AdviceNotFoundError(self.name, f"No advice found for {symbol}")


# Singleton instance
_service_instance: Optional[AdviceService] = None


def get_advice_service() -> AdviceService:
    """Get or create advice service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AdviceService()
    return _service_instance
