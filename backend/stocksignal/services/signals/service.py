"""
Signal Service Implementation

Scores precomputed indicator snapshots with the canonical rule set.
Pure computation - no market data access.
"""

import logging
from typing import Optional

from stocksignal.schemas.signals import IndicatorSnapshot, CompositeSignal
from stocksignal.services.signals.interface import SignalServiceInterface
from stocksignal.services.signals.rules import score_snapshot

logger = logging.getLogger(__name__)


class SignalService(SignalServiceInterface):
    """
    Signal Scoring Service.

    Wraps the pure rules in the service contract used by the rest of the
    application. Holds no state between calls.
    """

    @property
    def name(self) -> str:
        return "SignalService"

    async def execute(self, input_data: IndicatorSnapshot) -> CompositeSignal:
        """Score a single snapshot."""
        composite = score_snapshot(input_data)

        logger.debug(
            f"Scored {input_data.symbol or 'snapshot'}: "
            f"{composite.recommendation.value} "
            f"(bull {composite.bullish_percent}% / bear {composite.bearish_percent}%, "
            f"total {composite.total_signal_score:.1f}/10)"
        )
        return composite

    async def score_many(
        self, snapshots: dict[str, IndicatorSnapshot]
    ) -> dict[str, CompositeSignal]:
        """Score several instruments; each evaluation is independent."""
        results = {}
        for symbol, snapshot in snapshots.items():
            results[symbol] = await self.execute(snapshot)

        logger.info(f"Scored {len(results)} instruments")
        return results


# Singleton instance
_service_instance: Optional[SignalService] = None


def get_signal_service() -> SignalService:
    """Get or create signal service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = SignalService()
    return _service_instance
