"""
Shared pytest fixtures for the StockSignal test suite.

Provides:
  - ``config``: a Settings instance with fixed formatting values.
  - ``full_snapshot``: an IndicatorSnapshot with every indicator present.
  - ``empty_snapshot``: an IndicatorSnapshot with only a price.
  - ``make_advice``: factory for HoldingAdvice records.
"""

from __future__ import annotations

from typing import Callable

import pytest

from stocksignal.core.config import Settings
from stocksignal.schemas import (
    BollingerBandValues,
    HoldingAction,
    HoldingAdvice,
    IndicatorSnapshot,
    MACDValues,
)


@pytest.fixture
def config() -> Settings:
    return Settings(
        currency_symbol="$",
        prompt_max_news_items=5,
        prompt_news_summary_chars=200,
        scenario_move_percent=5.0,
        high_confidence_threshold=80.0,
        medium_confidence_threshold=60.0,
    )


@pytest.fixture
def full_snapshot() -> IndicatorSnapshot:
    """Price 120 with a golden cross, mild MACD cross and overbought RSI.

    Expected: MACD bullish (0.25 / 1.0), RSI bearish (1.0 / 5/3),
    MA bullish (2.5 / 8), Bollinger upper half (1.5) -> BUY, 5.25 total.
    """
    return IndicatorSnapshot(
        symbol="ACME",
        current_price=120.0,
        rsi=75.0,
        ma50=110.0,
        ma200=100.0,
        macd=MACDValues(macd=1.5, signal=1.0, histogram=0.5),
        bollinger_bands=BollingerBandValues(upper=130.0, middle=115.0, lower=100.0),
    )


@pytest.fixture
def empty_snapshot() -> IndicatorSnapshot:
    return IndicatorSnapshot(symbol="EMPTY", current_price=100.0)


@pytest.fixture
def make_advice() -> Callable[..., HoldingAdvice]:
    def _make(
        symbol: str = "ACME",
        action: HoldingAction = HoldingAction.HOLD,
        confidence: float = 50.0,
        stop_loss: float = 85.0,
        add_more_price: float = 92.0,
        target_price: float = 120.0,
    ) -> HoldingAdvice:
        return HoldingAdvice(
            symbol=symbol,
            action=action,
            confidence=confidence,
            stop_loss=stop_loss,
            add_more_price=add_more_price,
            target_price=target_price,
        )

    return _make
