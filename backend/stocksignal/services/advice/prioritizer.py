"""
Advice Prioritization

Orders holding advice by action urgency, then confidence.
SELL > BUY_MORE > REDUCE > HOLD; higher confidence first within a tier.
Python sorts are stable, so full ties keep their input order.
"""

from stocksignal.schemas.portfolio import HoldingAdvice, HoldingAction

ACTION_PRIORITY: dict[HoldingAction, int] = {
    HoldingAction.SELL: 0,
    HoldingAction.BUY_MORE: 1,
    HoldingAction.REDUCE: 2,
    HoldingAction.HOLD: 3,
}


def advice_sort_key(advice: HoldingAdvice) -> tuple[int, float]:
    return ACTION_PRIORITY[advice.action], -advice.confidence


def prioritize_advice(advice_list: list[HoldingAdvice]) -> list[HoldingAdvice]:
    """Return a new, prioritized list. The input list is left untouched."""
    return sorted(advice_list, key=advice_sort_key)


def prioritize_advice_in_place(advice_list: list[HoldingAdvice]) -> None:
    """Reorder the caller's list in place."""
    advice_list.sort(key=advice_sort_key)
