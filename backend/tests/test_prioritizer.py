"""
Tests for stocksignal/services/advice/prioritizer.py.

What we test
------------
  - SELL > BUY_MORE > REDUCE > HOLD, confidence descending within an action.
  - Full ties keep input order.
  - prioritize_advice() returns a new list; the in-place variant reorders.
  - AdviceService.execute() delegates to the pure ordering.
"""

from __future__ import annotations

import asyncio

from stocksignal.schemas import HoldingAction
from stocksignal.services.advice import (
    AdviceService,
    prioritize_advice,
    prioritize_advice_in_place,
)


def _order(advice_list):
    return [(a.action, a.confidence) for a in advice_list]


class TestPrioritizeAdvice:
    def test_action_then_confidence(self, make_advice):
        advice = [
            make_advice("A", HoldingAction.HOLD, 60),
            make_advice("B", HoldingAction.SELL, 40),
            make_advice("C", HoldingAction.BUY_MORE, 90),
            make_advice("D", HoldingAction.SELL, 80),
        ]

        ordered = prioritize_advice(advice)

        assert _order(ordered) == [
            (HoldingAction.SELL, 80),
            (HoldingAction.SELL, 40),
            (HoldingAction.BUY_MORE, 90),
            (HoldingAction.HOLD, 60),
        ]

    def test_reduce_between_buy_more_and_hold(self, make_advice):
        advice = [
            make_advice("A", HoldingAction.HOLD, 99),
            make_advice("B", HoldingAction.REDUCE, 95),
            make_advice("C", HoldingAction.BUY_MORE, 10),
        ]

        assert [a.symbol for a in prioritize_advice(advice)] == ["C", "B", "A"]

    def test_ties_keep_input_order(self, make_advice):
        advice = [
            make_advice("FIRST", HoldingAction.HOLD, 50),
            make_advice("SECOND", HoldingAction.HOLD, 50),
            make_advice("THIRD", HoldingAction.HOLD, 50),
        ]

        assert [a.symbol for a in prioritize_advice(advice)] == ["FIRST", "SECOND", "THIRD"]

    def test_input_untouched(self, make_advice):
        advice = [
            make_advice("A", HoldingAction.HOLD, 60),
            make_advice("B", HoldingAction.SELL, 40),
        ]

        ordered = prioritize_advice(advice)

        assert [a.symbol for a in advice] == ["A", "B"]
        assert [a.symbol for a in ordered] == ["B", "A"]
        assert ordered is not advice

    def test_in_place(self, make_advice):
        advice = [
            make_advice("A", HoldingAction.HOLD, 60),
            make_advice("B", HoldingAction.SELL, 40),
        ]

        assert prioritize_advice_in_place(advice) is None
        assert [a.symbol for a in advice] == ["B", "A"]

    def test_empty(self):
        assert prioritize_advice([]) == []


class TestAdviceServiceExecute:
    def test_execute_orders(self, make_advice):
        advice = [
            make_advice("A", HoldingAction.HOLD, 60),
            make_advice("B", HoldingAction.REDUCE, 70),
        ]

        ordered = asyncio.run(AdviceService().execute(advice))

        assert [a.symbol for a in ordered] == ["B", "A"]

    def test_prioritize_in_place(self, make_advice):
        advice = [
            make_advice("A", HoldingAction.BUY_MORE, 20),
            make_advice("B", HoldingAction.BUY_MORE, 80),
        ]

        AdviceService().prioritize_in_place(advice)

        assert [a.symbol for a in advice] == ["B", "A"]
