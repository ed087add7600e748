"""
Signal Service Interface

Defines the contract for the signal scoring layer.
"""

from abc import abstractmethod

from stocksignal.services.base import BaseService
from stocksignal.schemas.signals import IndicatorSnapshot, CompositeSignal


class SignalServiceInterface(BaseService[IndicatorSnapshot, CompositeSignal]):
    """
    Signal Scoring Service Contract.

    INPUT: IndicatorSnapshot
        - current_price: Latest traded price
        - rsi, ma50, ma200, macd, bollinger_bands: each optional

    OUTPUT: CompositeSignal
        - macd / rsi / ma / bollinger: per-indicator SignalResult
        - bullish_percent / bearish_percent: strength-weighted split
        - total_signal_score: sum of scores (0-10)
        - recommendation: BUY / SELL / HOLD

    RULES:
        - Missing indicators score 0 and carry no weight
        - Same snapshot always yields the same CompositeSignal
    """

    @property
    def name(self) -> str:
        return "SignalService"

    @abstractmethod
    async def execute(self, input_data: IndicatorSnapshot) -> CompositeSignal:
        """Score a single snapshot."""
        pass

    @abstractmethod
    async def score_many(
        self, snapshots: dict[str, IndicatorSnapshot]
    ) -> dict[str, CompositeSignal]:
        """
        Score several instruments at once.

        Args:
            snapshots: symbol -> IndicatorSnapshot

        Returns:
            symbol -> CompositeSignal
        """
        pass
