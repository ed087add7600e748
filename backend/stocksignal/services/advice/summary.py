"""
Portfolio Summary

Aggregate counts and a one-line suggestion over a portfolio's advice list,
plus position totals over the holdings themselves.
"""

from typing import Optional

from stocksignal.core.config import Settings, get_settings
from stocksignal.schemas.portfolio import (
    Holding,
    HoldingAdvice,
    HoldingAction,
    HoldingsSummary,
    ConfidenceTier,
    PortfolioSummary,
)


def confidence_tier(confidence: float, config: Optional[Settings] = None) -> ConfidenceTier:
    """Bucket a 0-100 confidence into HIGH / MEDIUM / LOW."""
    config = config or get_settings()
    if confidence >= config.high_confidence_threshold:
        return ConfidenceTier.HIGH
    if confidence >= config.medium_confidence_threshold:
        return ConfidenceTier.MEDIUM
    return ConfidenceTier.LOW


def _build_suggestion(actions_count: dict[HoldingAction, int], total: int) -> str:
    if total == 0:
        return "No holdings to analyze"

    sell = actions_count[HoldingAction.SELL]
    reduce = actions_count[HoldingAction.REDUCE]
    buy_more = actions_count[HoldingAction.BUY_MORE]

    if sell:
        return f"Review {sell} position(s) flagged to sell before adding exposure elsewhere"
    if reduce:
        return f"Consider trimming {reduce} position(s); keep stop losses in place"
    if buy_more:
        return f"{buy_more} position(s) look like add-on opportunities near the add-more price"
    return "Portfolio looks stable - keep holding and monitor stop losses"


def summarize_portfolio(advice_list: list[HoldingAdvice]) -> PortfolioSummary:
    """Summarize actions and confidence across all advice records."""
    actions_count = {action: 0 for action in HoldingAction}
    for advice in advice_list:
        actions_count[advice.action] += 1

    total = len(advice_list)
    avg_confidence = (
        int(round(sum(a.confidence for a in advice_list) / total)) if total else 0
    )

    return PortfolioSummary(
        total_holdings=total,
        actions_count=actions_count,
        avg_confidence=avg_confidence,
        need_action=total - actions_count[HoldingAction.HOLD],
        high_risk=actions_count[HoldingAction.SELL] + actions_count[HoldingAction.REDUCE],
        opportunities=actions_count[HoldingAction.BUY_MORE],
        suggestion=_build_suggestion(actions_count, total),
    )


def summarize_holdings(holdings: list[Holding]) -> HoldingsSummary:
    """Total cost, market value and P&L, with the best and worst performer."""
    total_cost = sum(h.total_cost for h in holdings)
    total_value = sum(h.market_value for h in holdings)
    total_pnl = total_value - total_cost

    return HoldingsSummary(
        total_holdings=len(holdings),
        total_cost=total_cost,
        total_value=total_value,
        total_pnl=total_pnl,
        total_pnl_percent=total_pnl / total_cost * 100 if total_cost > 0 else 0.0,
        best_performer=max(holdings, key=lambda h: h.pnl_percent, default=None),
        worst_performer=min(holdings, key=lambda h: h.pnl_percent, default=None),
    )
