"""
CONTRACT 1: Signal Scoring Engine

Input: IndicatorSnapshot (precomputed indicator values + current price)
Output: CompositeSignal

This module defines the data shapes only.
All scoring rules live in stocksignal.services.signals.rules.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field


# Per-indicator ceiling for SignalResult.score (four indicators -> 10 total)
MAX_INDICATOR_SCORE = 2.5
MAX_STRENGTH = 10.0
MAX_TOTAL_SCORE = 10.0


# =============================================================================
# ENUMS
# =============================================================================


class SignalStatus(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class Recommendation(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class IndicatorName(str, Enum):
    MACD = "MACD"
    RSI = "RSI"
    MA = "MA"
    BOLLINGER = "BOLLINGER"


# =============================================================================
# INPUT: IndicatorSnapshot
# =============================================================================


class MACDValues(BaseModel):
    """MACD triple. histogram = macd - signal."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    macd: float
    signal: float
    histogram: float


class BollingerBandValues(BaseModel):
    """Bollinger envelope around a moving average."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    upper: float
    middle: float
    lower: float


class IndicatorSnapshot(BaseModel):
    """
    Precomputed indicators for one instrument.
    Sent by: upstream indicator computation
    Received by: Signal Service

    Every indicator is optional and evaluated independently.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    symbol: Optional[str] = None
    current_price: float = Field(..., ge=0)
    rsi: Optional[float] = Field(default=None, ge=0, le=100)
    ma50: Optional[float] = None
    ma200: Optional[float] = None
    macd: Optional[MACDValues] = None
    bollinger_bands: Optional[BollingerBandValues] = None


# =============================================================================
# OUTPUT: SignalResult / CompositeSignal
# =============================================================================


class SignalResult(BaseModel):
    """
    Classification of a single indicator.

    score feeds the 0-10 total; strength only weights the
    bullish/bearish split.
    """

    model_config = ConfigDict(frozen=True)

    indicator: IndicatorName
    status: SignalStatus
    score: float = Field(..., ge=0, le=MAX_INDICATOR_SCORE)
    strength: float = Field(..., ge=0, le=MAX_STRENGTH)
    text: str
    detail: Optional[str] = None

    @computed_field
    @property
    def score_percent(self) -> float:
        """Score as a percentage of the per-indicator ceiling."""
        return self.score / MAX_INDICATOR_SCORE * 100


class CompositeSignal(BaseModel):
    """
    Aggregate of the four indicator signals.
    Returned by: Signal Service
    Consumed by: Advice records, Report/Prompt formatter
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "bullish_weight": 9.0,
                "bearish_weight": 5.0,
                "bullish_percent": 64,
                "bearish_percent": 36,
                "total_signal_score": 6.7,
                "recommendation": "BUY",
            }
        },
    )

    bullish_weight: float = Field(..., ge=0)
    bearish_weight: float = Field(..., ge=0)
    bullish_percent: int = Field(..., ge=0, le=100)
    bearish_percent: int = Field(..., ge=0, le=100)
    total_signal_score: float = Field(..., ge=0, le=MAX_TOTAL_SCORE)
    recommendation: Recommendation

    macd: SignalResult
    rsi: SignalResult
    ma: SignalResult
    bollinger: SignalResult

    @property
    def signals(self) -> list[SignalResult]:
        """The four indicator results in display order."""
        return [self.macd, self.rsi, self.ma, self.bollinger]
