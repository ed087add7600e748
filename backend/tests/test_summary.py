"""
Tests for stocksignal/services/advice/summary.py and the Holding schema.

What we test
------------
confidence_tier:
  - HIGH >= 80, MEDIUM >= 60, LOW below; thresholds come from Settings.

summarize_portfolio:
  - Per-action counts, average confidence, need_action / high_risk /
    opportunities.
  - Suggestion text follows the most urgent action present.
  - Empty portfolio -> zeros and a "no holdings" suggestion.

summarize_holdings:
  - Total cost, market value, P&L and P&L percent over total cost.
  - Best / worst performer by pnl_percent, first holding wins ties.
  - Empty and all-loss portfolios; zero cost basis -> 0 percent.

Holding:
  - total_cost, market_value, pnl and pnl_percent.
"""

from __future__ import annotations

import pytest

from stocksignal.schemas import ConfidenceTier, Holding, HoldingAction
from stocksignal.services.advice import (
    AdviceService,
    confidence_tier,
    summarize_holdings,
    summarize_portfolio,
)


class TestConfidenceTier:
    @pytest.mark.parametrize(
        "confidence, expected",
        [
            (100, ConfidenceTier.HIGH),
            (80, ConfidenceTier.HIGH),
            (79.9, ConfidenceTier.MEDIUM),
            (60, ConfidenceTier.MEDIUM),
            (59, ConfidenceTier.LOW),
            (0, ConfidenceTier.LOW),
        ],
    )
    def test_tiers(self, config, confidence, expected):
        assert confidence_tier(confidence, config) == expected

    def test_custom_thresholds(self, config):
        strict = config.model_copy(update={"high_confidence_threshold": 95.0})
        assert confidence_tier(90, strict) == ConfidenceTier.MEDIUM


class TestSummarizePortfolio:
    def test_counts(self, make_advice):
        advice = [
            make_advice("A", HoldingAction.SELL, 80),
            make_advice("B", HoldingAction.REDUCE, 70),
            make_advice("C", HoldingAction.BUY_MORE, 90),
            make_advice("D", HoldingAction.HOLD, 60),
            make_advice("E", HoldingAction.HOLD, 55),
        ]

        summary = summarize_portfolio(advice)

        assert summary.total_holdings == 5
        assert summary.actions_count == {
            HoldingAction.HOLD: 2,
            HoldingAction.BUY_MORE: 1,
            HoldingAction.REDUCE: 1,
            HoldingAction.SELL: 1,
        }
        assert summary.avg_confidence == 71
        assert summary.need_action == 3
        assert summary.high_risk == 2
        assert summary.opportunities == 1
        assert "sell" in summary.suggestion.lower()

    def test_reduce_suggestion(self, make_advice):
        summary = summarize_portfolio([
            make_advice("A", HoldingAction.REDUCE, 70),
            make_advice("B", HoldingAction.BUY_MORE, 70),
        ])
        assert summary.suggestion.startswith("Consider trimming 1 position(s)")

    def test_buy_more_suggestion(self, make_advice):
        summary = summarize_portfolio([make_advice("A", HoldingAction.BUY_MORE, 70)])
        assert "add-on opportunities" in summary.suggestion

    def test_all_hold(self, make_advice):
        summary = summarize_portfolio([make_advice("A"), make_advice("B")])
        assert summary.need_action == 0
        assert summary.high_risk == 0
        assert "stable" in summary.suggestion

    def test_empty(self):
        summary = summarize_portfolio([])

        assert summary.total_holdings == 0
        assert summary.avg_confidence == 0
        assert all(count == 0 for count in summary.actions_count.values())
        assert summary.suggestion == "No holdings to analyze"

    def test_service_summarize(self, make_advice):
        advice = [make_advice("A", HoldingAction.SELL, 40)]
        assert AdviceService().summarize(advice) == summarize_portfolio(advice)


class TestHolding:
    def test_profit(self):
        holding = Holding(symbol="ACME", quantity=10, buy_price=100.0, current_price=120.0)
        assert holding.pnl == pytest.approx(200.0)
        assert holding.pnl_percent == pytest.approx(20.0)

    def test_loss(self):
        holding = Holding(symbol="ACME", quantity=4, buy_price=50.0, current_price=40.0)
        assert holding.pnl == pytest.approx(-40.0)
        assert holding.pnl_percent == pytest.approx(-20.0)

    def test_zero_cost_basis(self):
        holding = Holding(symbol="GIFT", quantity=1, buy_price=0.0, current_price=10.0)
        assert holding.pnl_percent == 0.0

    def test_computed_fields_serialized(self):
        holding = Holding(symbol="ACME", quantity=1, buy_price=10.0, current_price=11.0)
        dumped = holding.model_dump()
        assert "pnl" in dumped
        assert "pnl_percent" in dumped

    def test_cost_and_value(self):
        holding = Holding(symbol="ACME", quantity=10, buy_price=100.0, current_price=120.0)
        assert holding.total_cost == pytest.approx(1000.0)
        assert holding.market_value == pytest.approx(1200.0)


def _holding(symbol: str, quantity: float, buy: float, current: float) -> Holding:
    return Holding(symbol=symbol, quantity=quantity, buy_price=buy, current_price=current)


class TestSummarizeHoldings:
    def test_mixed_portfolio(self):
        summary = summarize_holdings([
            _holding("WIN", 10, 100.0, 120.0),
            _holding("LOSE", 5, 50.0, 40.0),
            _holding("FLAT", 2, 200.0, 210.0),
        ])

        assert summary.total_holdings == 3
        assert summary.total_cost == pytest.approx(1650.0)
        assert summary.total_value == pytest.approx(1820.0)
        assert summary.total_pnl == pytest.approx(170.0)
        assert summary.total_pnl_percent == pytest.approx(170.0 / 1650.0 * 100)
        assert summary.best_performer.symbol == "WIN"
        assert summary.worst_performer.symbol == "LOSE"

    def test_all_loss(self):
        summary = summarize_holdings([
            _holding("A", 10, 100.0, 90.0),
            _holding("B", 4, 50.0, 30.0),
        ])

        assert summary.total_cost == pytest.approx(1200.0)
        assert summary.total_value == pytest.approx(1020.0)
        assert summary.total_pnl == pytest.approx(-180.0)
        assert summary.total_pnl_percent == pytest.approx(-15.0)
        assert summary.best_performer.symbol == "A"
        assert summary.worst_performer.symbol == "B"

    def test_empty(self):
        summary = summarize_holdings([])

        assert summary.total_holdings == 0
        assert summary.total_cost == 0
        assert summary.total_value == 0
        assert summary.total_pnl == 0
        assert summary.total_pnl_percent == 0.0
        assert summary.best_performer is None
        assert summary.worst_performer is None

    def test_zero_cost(self):
        summary = summarize_holdings([_holding("GIFT", 3, 0.0, 10.0)])

        assert summary.total_pnl == pytest.approx(30.0)
        assert summary.total_pnl_percent == 0.0

    def test_ties_keep_first(self):
        summary = summarize_holdings([
            _holding("FIRST", 1, 100.0, 110.0),
            _holding("SECOND", 2, 50.0, 55.0),
        ])

        assert summary.best_performer.symbol == "FIRST"
        assert summary.worst_performer.symbol == "FIRST"

    def test_service_summarize_holdings(self):
        holdings = [_holding("A", 1, 10.0, 12.0)]
        assert AdviceService().summarize_holdings(holdings) == summarize_holdings(holdings)
