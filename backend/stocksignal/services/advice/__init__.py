"""
Portfolio Advice Service

CONTRACT:
    Input:  list[HoldingAdvice] (from the upstream advice source)
    Output: prioritized list[HoldingAdvice]

RESPONSIBILITIES:
    - Order advice by action urgency, then confidence
    - Compute acceptance intervals for stop loss / add-more / target prices
    - Validate and apply user price overrides
    - Summarize actions and confidence across the portfolio

PURE PYTHON - No LLM involvement.
Rejected overrides never modify the advice record.
"""

from stocksignal.services.advice.interface import AdviceServiceInterface
from stocksignal.services.advice.service import AdviceService, get_advice_service
from stocksignal.services.advice.prioritizer import (
    ACTION_PRIORITY,
    prioritize_advice,
    prioritize_advice_in_place,
)
from stocksignal.services.advice.price_bounds import (
    PRICE_BOUND_FACTORS,
    PRICE_DECIMALS,
    compute_price_bounds,
    check_price_override,
    price_distance_percent,
)
from stocksignal.services.advice.summary import (
    confidence_tier,
    summarize_portfolio,
    summarize_holdings,
)

__all__ = [
    "AdviceServiceInterface",
    "AdviceService",
    "get_advice_service",
    "ACTION_PRIORITY",
    "prioritize_advice",
    "prioritize_advice_in_place",
    "PRICE_BOUND_FACTORS",
    "PRICE_DECIMALS",
    "compute_price_bounds",
    "check_price_override",
    "price_distance_percent",
    "confidence_tier",
    "summarize_portfolio",
    "summarize_holdings",
]
