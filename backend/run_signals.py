"""
Quick engine demo script.
Run with: python run_signals.py
"""

import asyncio
import os

from dotenv import load_dotenv

backend_dir = os.path.dirname(os.path.abspath(__file__))
load_dotenv(os.path.join(backend_dir, ".env"))


async def run_demo():
    """Score a sample snapshot and prioritize a sample portfolio."""
    from stocksignal.core.logging import setup_logging
    from stocksignal.schemas import (
        IndicatorSnapshot,
        MACDValues,
        BollingerBandValues,
        Holding,
        HoldingAdvice,
        HoldingAction,
        PriceKind,
    )
    from stocksignal.services.signals import get_signal_service
    from stocksignal.services.advice import get_advice_service
    from stocksignal.services.reporting import (
        format_signal_report,
        format_holding_card,
        format_holdings_summary,
        format_portfolio_summary,
    )

    setup_logging()

    print("\n" + "=" * 60)
    print("STOCKSIGNAL - ENGINE DEMO")
    print("=" * 60)

    # [1] Single instrument
    print("\n[1] Scoring AAPL snapshot...")
    print("-" * 40)
    snapshot = IndicatorSnapshot(
        symbol="AAPL",
        current_price=189.5,
        rsi=58.2,
        ma50=184.1,
        ma200=176.3,
        macd=MACDValues(macd=1.42, signal=0.97, histogram=0.45),
        bollinger_bands=BollingerBandValues(upper=195.0, middle=186.0, lower=177.0),
    )
    signal_service = get_signal_service()
    composite = await signal_service.execute(snapshot)
    print(format_signal_report(composite))

    # [2] Portfolio advice
    print("\n[2] Prioritizing portfolio advice...")
    print("-" * 40)
    holdings = {
        "AAPL": Holding(symbol="AAPL", quantity=20, buy_price=171.2, current_price=189.5),
        "TSLA": Holding(symbol="TSLA", quantity=8, buy_price=265.0, current_price=242.0),
        "NVDA": Holding(symbol="NVDA", quantity=40, buy_price=98.4, current_price=121.0),
    }
    advice = [
        HoldingAdvice(symbol="AAPL", action=HoldingAction.HOLD, confidence=72,
                      stop_loss=170.0, add_more_price=180.0, target_price=210.0,
                      technical_signals=composite),
        HoldingAdvice(symbol="TSLA", action=HoldingAction.SELL, confidence=65,
                      stop_loss=200.0, add_more_price=220.0, target_price=270.0),
        HoldingAdvice(symbol="NVDA", action=HoldingAction.BUY_MORE, confidence=84,
                      stop_loss=100.0, add_more_price=115.0, target_price=150.0),
    ]
    advice_service = get_advice_service()
    ordered = await advice_service.execute(advice)
    for item in ordered:
        print(format_holding_card(item, holdings[item.symbol]))
    print()
    print(format_portfolio_summary(advice_service.summarize(ordered)))
    print(format_holdings_summary(advice_service.summarize_holdings(list(holdings.values()))))

    # [3] Price override
    print("\n[3] Overriding NVDA stop loss...")
    print("-" * 40)
    for proposed in (80.0, 105.0):
        result = advice_service.override_holding_price(
            ordered, holdings["NVDA"], PriceKind.STOP_LOSS, proposed
        )
        status = "ACCEPTED" if result.accepted else "REJECTED"
        print(f"{proposed:.2f}: {status} - {result.message}")

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    asyncio.run(run_demo())
