"""
Signal Scoring Rules

Canonical, deterministic rule set for classifying precomputed indicators.
Pure functions over pydantic inputs - no I/O, no hidden state.

Each evaluator returns a SignalResult:
    score     0-2.5, contributes to the 0-10 total
    strength  0-10, only weights the bullish/bearish split
"""

import math
from typing import Optional

from stocksignal.schemas.signals import (
    IndicatorSnapshot,
    MACDValues,
    BollingerBandValues,
    SignalResult,
    SignalStatus,
    CompositeSignal,
    Recommendation,
    IndicatorName,
    MAX_INDICATOR_SCORE,
    MAX_STRENGTH,
)

# RSI zones (strict comparisons: 70 and 30 stay neutral)
RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0
RSI_MIDLINE = 50.0

# Fixed weights for regime-style signals
MA_CROSS_STRENGTH = 8.0
BAND_BREAK_STRENGTH = 7.0
NEUTRAL_STRENGTH = 5.0

# Directional weight must exceed the opposite side by this factor
RECOMMENDATION_MARGIN = 1.5

NO_DATA_TEXT = "No data"


def _absent(indicator: IndicatorName) -> SignalResult:
    """Zero-weight neutral result for a missing indicator."""
    return SignalResult(
        indicator=indicator,
        status=SignalStatus.NEUTRAL,
        score=0.0,
        strength=0.0,
        text=NO_DATA_TEXT,
    )


# =============================================================================
# INDICATOR EVALUATORS
# =============================================================================


def evaluate_macd(macd: Optional[MACDValues]) -> SignalResult:
    """Classify MACD line vs signal line, confirmed by histogram sign."""
    if macd is None:
        return _absent(IndicatorName.MACD)

    hist = abs(macd.histogram)

    if macd.macd > macd.signal and macd.histogram > 0:
        return SignalResult(
            indicator=IndicatorName.MACD,
            status=SignalStatus.BULLISH,
            score=min(MAX_INDICATOR_SCORE, hist * 0.5),
            strength=min(MAX_STRENGTH, hist * 2),
            text=f"Bullish crossover (MACD {macd.macd:.2f} > signal {macd.signal:.2f})",
        )

    if macd.macd < macd.signal and macd.histogram < 0:
        return SignalResult(
            indicator=IndicatorName.MACD,
            status=SignalStatus.BEARISH,
            score=max(0.5, MAX_INDICATOR_SCORE - hist * 0.5),
            strength=min(MAX_STRENGTH, hist * 2),
            text=f"Bearish crossover (MACD {macd.macd:.2f} < signal {macd.signal:.2f})",
        )

    return SignalResult(
        indicator=IndicatorName.MACD,
        status=SignalStatus.NEUTRAL,
        score=1.5,
        strength=NEUTRAL_STRENGTH,
        text=f"Wait and see (histogram {macd.histogram:.2f})",
    )


def evaluate_rsi(rsi: Optional[float]) -> SignalResult:
    """Classify RSI into overbought / oversold / relatively strong / relatively weak."""
    if rsi is None:
        return _absent(IndicatorName.RSI)

    if rsi > RSI_OVERBOUGHT:
        # Floor at 0: the formula goes negative above RSI 85
        return SignalResult(
            indicator=IndicatorName.RSI,
            status=SignalStatus.BEARISH,
            score=max(0.0, 0.5 + (80 - rsi) / 10),
            strength=min(MAX_STRENGTH, (rsi - RSI_OVERBOUGHT) / 3),
            text=f"Overbought ({rsi:.1f})",
        )

    if rsi < RSI_OVERSOLD:
        return SignalResult(
            indicator=IndicatorName.RSI,
            status=SignalStatus.BULLISH,
            score=MAX_INDICATOR_SCORE,
            strength=min(MAX_STRENGTH, (RSI_OVERSOLD - rsi) / 3),
            text=f"Oversold ({rsi:.1f})",
        )

    if rsi >= RSI_MIDLINE:
        return SignalResult(
            indicator=IndicatorName.RSI,
            status=SignalStatus.NEUTRAL,
            score=1.5 + (rsi - RSI_MIDLINE) / 20,
            strength=(rsi - RSI_MIDLINE) / 5,
            text=f"Relatively strong ({rsi:.1f})",
        )

    return SignalResult(
        indicator=IndicatorName.RSI,
        status=SignalStatus.NEUTRAL,
        score=1.0 + rsi / 50,
        strength=(RSI_MIDLINE - rsi) / 5,
        text=f"Relatively weak ({rsi:.1f})",
    )


def _price_vs_average(price: float, average: float, label: str) -> str:
    # Only a price strictly above the average counts as a pass
    if price > average:
        return f"Price > {label} ✓"
    if price == average:
        return f"Price = {label} ✗"
    return f"Price < {label} ✗"


def evaluate_moving_averages(
    ma50: Optional[float],
    ma200: Optional[float],
    current_price: float,
) -> SignalResult:
    """Golden cross / death cross regime, scored by price position."""
    if ma50 is None or ma200 is None:
        return _absent(IndicatorName.MA)

    detail = " | ".join([
        _price_vs_average(current_price, ma50, "MA50"),
        _price_vs_average(current_price, ma200, "MA200"),
    ])

    if ma50 > ma200:
        # Above MA50 implies above MA200 in this regime, so two cases suffice
        if current_price > ma50:
            score, text = 2.5, "Golden cross (MA50 > MA200)"
        else:
            score, text = 1.2, "Golden cross (but price below the averages)"
        status = SignalStatus.BULLISH
    else:
        if current_price < ma50 and current_price < ma200:
            score, text = 0.5, "Death cross (MA50 < MA200)"
        elif current_price > ma200:
            score, text = 1.5, "Death cross (but price above MA200)"
        else:
            score, text = 1.0, "Death cross"
        status = SignalStatus.BEARISH

    return SignalResult(
        indicator=IndicatorName.MA,
        status=status,
        score=score,
        strength=MA_CROSS_STRENGTH,
        text=text,
        detail=detail,
    )


def bollinger_bandwidth(bands: BollingerBandValues) -> float:
    """Band width as a percentage of the middle band (informational)."""
    if bands.middle == 0:
        return 0.0
    return (bands.upper - bands.lower) / bands.middle * 100


def evaluate_bollinger(
    bands: Optional[BollingerBandValues],
    current_price: float,
) -> SignalResult:
    """Classify price position relative to the Bollinger envelope."""
    if bands is None:
        return _absent(IndicatorName.BOLLINGER)

    detail = f"Bandwidth: {bollinger_bandwidth(bands):.2f}%"

    if current_price > bands.upper:
        status = SignalStatus.BEARISH
        score, strength = 0.8, BAND_BREAK_STRENGTH
        text = f"Broke above upper band ({current_price:.2f} > {bands.upper:.2f})"
    elif current_price < bands.lower:
        status = SignalStatus.BULLISH
        score, strength = 2.5, BAND_BREAK_STRENGTH
        text = f"Broke below lower band ({current_price:.2f} < {bands.lower:.2f})"
    elif current_price > bands.middle:
        status = SignalStatus.NEUTRAL
        score, strength = 1.5, NEUTRAL_STRENGTH
        text = f"Upper half ({detail.lower()})"
    else:
        status = SignalStatus.NEUTRAL
        score, strength = 1.2, NEUTRAL_STRENGTH
        text = f"Lower half ({detail.lower()})"

    return SignalResult(
        indicator=IndicatorName.BOLLINGER,
        status=status,
        score=score,
        strength=strength,
        text=text,
        detail=detail,
    )


# =============================================================================
# COMPOSITE SCORER
# =============================================================================


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def determine_recommendation(bullish_weight: float, bearish_weight: float) -> Recommendation:
    """Strict 1.5x margin rule; anything closer is HOLD."""
    if bullish_weight > bearish_weight * RECOMMENDATION_MARGIN:
        return Recommendation.BUY
    if bearish_weight > bullish_weight * RECOMMENDATION_MARGIN:
        return Recommendation.SELL
    return Recommendation.HOLD


def combine_signals(
    macd: SignalResult,
    rsi: SignalResult,
    ma: SignalResult,
    bollinger: SignalResult,
) -> CompositeSignal:
    """Aggregate four indicator results into a CompositeSignal."""
    signals = [macd, rsi, ma, bollinger]

    bullish_weight = sum(s.strength for s in signals if s.status == SignalStatus.BULLISH)
    bearish_weight = sum(s.strength for s in signals if s.status == SignalStatus.BEARISH)
    total_weight = bullish_weight + bearish_weight

    if total_weight > 0:
        bullish_percent = _round_half_up(bullish_weight / total_weight * 100)
        bearish_percent = 100 - bullish_percent
    else:
        bullish_percent = bearish_percent = 50

    return CompositeSignal(
        bullish_weight=bullish_weight,
        bearish_weight=bearish_weight,
        bullish_percent=bullish_percent,
        bearish_percent=bearish_percent,
        total_signal_score=sum(s.score for s in signals),
        recommendation=determine_recommendation(bullish_weight, bearish_weight),
        macd=macd,
        rsi=rsi,
        ma=ma,
        bollinger=bollinger,
    )


def score_snapshot(snapshot: IndicatorSnapshot) -> CompositeSignal:
    """Evaluate all four indicators of a snapshot and combine them."""
    return combine_signals(
        macd=evaluate_macd(snapshot.macd),
        rsi=evaluate_rsi(snapshot.rsi),
        ma=evaluate_moving_averages(snapshot.ma50, snapshot.ma200, snapshot.current_price),
        bollinger=evaluate_bollinger(snapshot.bollinger_bands, snapshot.current_price),
    )
