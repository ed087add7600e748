"""
StockSignal Schema Contracts

This module defines all data contracts between the engine and its collaborators.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from stocksignal.schemas.signals import (
    IndicatorSnapshot,
    MACDValues,
    BollingerBandValues,
    SignalResult,
    SignalStatus,
    CompositeSignal,
    Recommendation,
    IndicatorName,
)
from stocksignal.schemas.portfolio import (
    Holding,
    HoldingAdvice,
    HoldingAction,
    PriceKind,
    PriceBounds,
    PriceOverrideResult,
    PortfolioSummary,
    HoldingsSummary,
    ConfidenceTier,
)
from stocksignal.schemas.market import (
    Quote,
    NewsItem,
    MarketContext,
)

__all__ = [
    # Signals
    "IndicatorSnapshot",
    "MACDValues",
    "BollingerBandValues",
    "SignalResult",
    "SignalStatus",
    "CompositeSignal",
    "Recommendation",
    "IndicatorName",
    # Portfolio
    "Holding",
    "HoldingAdvice",
    "HoldingAction",
    "PriceKind",
    "PriceBounds",
    "PriceOverrideResult",
    "PortfolioSummary",
    "HoldingsSummary",
    "ConfidenceTier",
    # Market context
    "Quote",
    "NewsItem",
    "MarketContext",
]
