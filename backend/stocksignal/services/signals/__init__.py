"""
Signal Scoring Service

CONTRACT:
    Input:  IndicatorSnapshot (precomputed indicators + current price)
    Output: CompositeSignal

RESPONSIBILITIES:
    - Classify MACD, RSI, moving averages and Bollinger Bands
    - Score each indicator (0-2.5) and weight its direction (0-10)
    - Combine into a bullish/bearish split and BUY / SELL / HOLD

PURE PYTHON - No LLM involvement.
One canonical rule set shared by display, portfolio and prompt paths.
"""

from stocksignal.services.signals.interface import SignalServiceInterface
from stocksignal.services.signals.service import SignalService, get_signal_service
from stocksignal.services.signals.rules import (
    evaluate_macd,
    evaluate_rsi,
    evaluate_moving_averages,
    evaluate_bollinger,
    bollinger_bandwidth,
    combine_signals,
    determine_recommendation,
    score_snapshot,
)

__all__ = [
    "SignalServiceInterface",
    "SignalService",
    "get_signal_service",
    "evaluate_macd",
    "evaluate_rsi",
    "evaluate_moving_averages",
    "evaluate_bollinger",
    "bollinger_bandwidth",
    "combine_signals",
    "determine_recommendation",
    "score_snapshot",
]
