"""
Signal Report and Prompt Templates

Turns the engine's CompositeSignal into display text and AI prompts.

CRITICAL RULES:
- Never re-derive classifications - every status, score and
  recommendation shown here comes from the CompositeSignal
- Prompts ask the model to compare against the system signal,
  not to recompute it
"""

from typing import Optional

from stocksignal.core.config import Settings, get_settings
from stocksignal.schemas.market import MarketContext, NewsItem
from stocksignal.schemas.portfolio import (
    Holding,
    HoldingAdvice,
    HoldingsSummary,
    PriceKind,
    PortfolioSummary,
)
from stocksignal.schemas.signals import (
    CompositeSignal,
    IndicatorSnapshot,
    IndicatorName,
    Recommendation,
    SignalResult,
    MAX_INDICATOR_SCORE,
)
from stocksignal.services.advice.price_bounds import price_distance_percent
from stocksignal.services.advice.summary import confidence_tier

INDICATOR_LABELS: dict[IndicatorName, str] = {
    IndicatorName.MACD: "MACD",
    IndicatorName.RSI: "RSI",
    IndicatorName.MA: "Moving Averages",
    IndicatorName.BOLLINGER: "Bollinger Bands",
}

RECOMMENDATION_LABELS: dict[Recommendation, str] = {
    Recommendation.BUY: "Consider buying",
    Recommendation.SELL: "Consider selling",
    Recommendation.HOLD: "Wait and see",
}

SEPARATOR = "-" * 40


# =============================================================================
# AI ANALYSIS PROMPTS
# =============================================================================

ANALYSIS_SYSTEM_PROMPT = """You are a technical analyst assistant reviewing a stock for a retail investor.

YOUR ROLE:
- Compare your view with the system signal analysis you are given
- Point out factors the system does not consider (fundamentals, sentiment, news)
- Explain clearly when and why you disagree with the system

CRITICAL RULES:
1. NEVER recalculate indicators - all numbers are provided to you.
2. Use hedged language ("could consider", "worth watching"), never direct orders to buy or sell.
3. ALWAYS mention what could go wrong.
4. NEVER claim certainty or guaranteed profits.

REMEMBER: You are providing analysis, not financial advice."""

ANALYSIS_USER_PROMPT_TEMPLATE = """Analyze the following stock, paying close attention to the system signal analysis.

SYSTEM SIGNAL ANALYSIS:
{separator}
{signal_block}
{separator}

STOCK: {symbol} - {company_name}

MARKET DATA:
- Current: {currency}{current_price:.2f}
- Change today: {change_percent:+.2f}%
- High/Low: {high} / {low}

TECHNICAL INDICATORS:
- RSI: {rsi}
- Trend: {trend}
- MA50: {ma50}
- MA200: {ma200}
{macd_section}{bollinger_section}{news_section}
IMPORTANT:
1. Compare your analysis with the system recommendation ({recommendation}).
2. If your view differs, explain why.
3. Name the factors the system may have missed.{news_rule}

Structure your answer as:

## AI Analysis vs System Signal

### Technical confirmation
(Do you agree with "{recommendation}"? Why?)

### Factors the system did not consider
{news_heading}#### Fundamentals
#### Macro environment

### Three scenarios
1. Optimistic: breaks above {currency}{upside:.2f}
2. Pessimistic: falls below {currency}{downside:.2f}
3. Neutral: trades sideways

### Final view

### One-line summary"""


def _money(value: Optional[float], currency: str) -> str:
    return f"{currency}{value:.2f}" if value is not None else "N/A"


def format_signal_line(result: SignalResult) -> str:
    """One indicator as shown inside a prompt: text and directional strength."""
    label = INDICATOR_LABELS[result.indicator]
    return f"{label}: {result.text} (strength: {result.strength:.1f}/10)"


def format_signal_block(composite: CompositeSignal) -> str:
    """System signal block embedded at the top of an AI prompt."""
    lines = [
        f"Overall: {RECOMMENDATION_LABELS[composite.recommendation]} ({composite.recommendation.value})",
        f"   Bullish: {composite.bullish_percent}% | Bearish: {composite.bearish_percent}%",
        "",
    ]
    lines.extend(format_signal_line(s) for s in composite.signals)
    return "\n".join(lines)


def _price_position(price: float, average: Optional[float], currency: str) -> str:
    if average is None:
        return "N/A"
    side = "price above ✓" if price > average else "price below ✗"
    return f"{currency}{average:.2f} ({side})"


def _format_news(news: list[NewsItem], config: Settings) -> str:
    items = news[: config.prompt_max_news_items]
    if not items:
        return ""

    lines = [SEPARATOR, f"LATEST NEWS ({len(items)} items) - analyze each one:"]
    for i, item in enumerate(items, start=1):
        summary = (item.summary or "(no summary)")[: config.prompt_news_summary_chars]
        lines.extend([
            f"{i}. \"{item.headline}\"",
            f"   Source: {item.source}",
            f"   Time: {item.timestamp:%b %d %H:%M}",
            f"   Summary: {summary}",
        ])
    lines.append(SEPARATOR)
    return "\n" + "\n".join(lines) + "\n"


def format_analysis_prompt(
    composite: CompositeSignal,
    snapshot: IndicatorSnapshot,
    context: Optional[MarketContext] = None,
    config: Optional[Settings] = None,
) -> str:
    """Format the AI analysis prompt around an already-scored snapshot."""
    config = config or get_settings()
    currency = config.currency_symbol
    price = snapshot.current_price
    quote = context.quote if context else None

    macd_section = ""
    if snapshot.macd is not None:
        macd_section = (
            "\nMACD VALUES:\n"
            f"- MACD line: {snapshot.macd.macd:.2f}\n"
            f"- Signal line: {snapshot.macd.signal:.2f}\n"
            f"- Histogram: {snapshot.macd.histogram:.2f}\n"
        )

    bollinger_section = ""
    if snapshot.bollinger_bands is not None:
        bands = snapshot.bollinger_bands
        bollinger_section = (
            "\nBOLLINGER BANDS:\n"
            f"- Upper: {currency}{bands.upper:.2f}\n"
            f"- Middle: {currency}{bands.middle:.2f}\n"
            f"- Lower: {currency}{bands.lower:.2f}\n"
        )

    news = context.news if context else []
    news_section = _format_news(news, config)
    shown_news = min(len(news), config.prompt_max_news_items)
    news_rule = (
        f"\n4. Analyze each of the {shown_news} news items above: bullish or bearish, "
        "how strongly, and how it changes your view."
        if news_section
        else ""
    )
    news_heading = "#### News impact (item by item)\n" if news_section else ""

    move = config.scenario_move_percent / 100

    return ANALYSIS_USER_PROMPT_TEMPLATE.format(
        separator=SEPARATOR,
        signal_block=format_signal_block(composite),
        symbol=snapshot.symbol or (quote.symbol if quote else "UNKNOWN"),
        company_name=(context.company_name if context else None) or "N/A",
        currency=currency,
        current_price=price,
        change_percent=quote.change_percent if quote else 0.0,
        high=_money(quote.high if quote else None, currency),
        low=_money(quote.low if quote else None, currency),
        rsi=f"{snapshot.rsi:.2f}" if snapshot.rsi is not None else "N/A",
        trend=(context.trend if context else None) or "N/A",
        ma50=_price_position(price, snapshot.ma50, currency),
        ma200=_price_position(price, snapshot.ma200, currency),
        macd_section=macd_section,
        bollinger_section=bollinger_section,
        news_section=news_section,
        recommendation=RECOMMENDATION_LABELS[composite.recommendation],
        news_rule=news_rule,
        news_heading=news_heading,
        upside=price * (1 + move),
        downside=price * (1 - move),
    )


# =============================================================================
# DISPLAY REPORTS
# =============================================================================


def format_signal_report(composite: CompositeSignal) -> str:
    """Display text: recommendation, split, total score and per-indicator scores."""
    lines = [
        f"Trading Signal Analysis    Total: {composite.total_signal_score:.1f}/10",
        f"Recommendation: {RECOMMENDATION_LABELS[composite.recommendation]}",
        f"Bullish {composite.bullish_percent}% | Bearish {composite.bearish_percent}%",
        SEPARATOR,
    ]
    for result in composite.signals:
        lines.append(
            f"{INDICATOR_LABELS[result.indicator]:<16} {result.score:.1f}/{MAX_INDICATOR_SCORE} "
            f"({result.score_percent:.0f}%)  [{result.status.value}] {result.text}"
        )
        if result.detail:
            lines.append(f"{'':<16} {result.detail}")
    return "\n".join(lines)


def format_holding_advice(
    advice: HoldingAdvice,
    current_price: float,
    config: Optional[Settings] = None,
) -> str:
    """Per-holding advice card as plain text."""
    config = config or get_settings()
    currency = config.currency_symbol
    tier = confidence_tier(advice.confidence, config)

    lines = [
        f"{advice.symbol}: {advice.action.value} "
        f"(confidence {advice.confidence:.0f}%, {tier.value})",
    ]
    for kind in PriceKind:
        price = getattr(advice, kind.value)
        label = kind.value.replace("_", " ").title()
        lines.append(
            f"  {label}: {currency}{price:.2f} "
            f"({price_distance_percent(price, current_price):+.1f}%)"
        )

    signals = advice.technical_signals
    if signals is not None:
        lines.append(f"  Technical score: {signals.total_signal_score:.1f}/10")
        for result in signals.signals:
            lines.append(
                f"    {INDICATOR_LABELS[result.indicator]}: "
                f"{result.score:.1f}/{MAX_INDICATOR_SCORE} - {result.text}"
            )
        lines.append(f"    Overall: {RECOMMENDATION_LABELS[signals.recommendation]}")

    if advice.reasoning:
        lines.append(f"  Reasoning: {advice.reasoning}")
    return "\n".join(lines)


def format_portfolio_summary(summary: PortfolioSummary) -> str:
    """Portfolio-level summary block."""
    counts = ", ".join(
        f"{action.value}: {count}" for action, count in summary.actions_count.items()
    )
    return "\n".join([
        f"Holdings: {summary.total_holdings} | Avg confidence: {summary.avg_confidence}%",
        f"High risk: {summary.high_risk} | Opportunities: {summary.opportunities} "
        f"| Need action: {summary.need_action}",
        counts,
        summary.suggestion,
    ])


def _signed_money(value: float, currency: str) -> str:
    sign = "-" if value < 0 else "+"
    return f"{sign}{currency}{abs(value):,.2f}"


def format_holding_card(
    advice: HoldingAdvice,
    holding: Holding,
    config: Optional[Settings] = None,
) -> str:
    """Advice card for a held position, with its cost basis and P&L."""
    config = config or get_settings()
    currency = config.currency_symbol

    header, _, body = format_holding_advice(advice, holding.current_price, config).partition("\n")
    position = (
        f"  Position: {holding.quantity:g} @ {currency}{holding.buy_price:.2f} "
        f"-> {currency}{holding.current_price:.2f} | "
        f"P&L {_signed_money(holding.pnl, currency)} ({holding.pnl_percent:+.1f}%)"
    )
    return "\n".join([header, position, body])


def format_holdings_summary(
    summary: HoldingsSummary,
    config: Optional[Settings] = None,
) -> str:
    """Portfolio totals block: cost, market value, P&L and performers."""
    config = config or get_settings()
    currency = config.currency_symbol

    lines = [
        f"Total cost: {currency}{summary.total_cost:,.2f} | "
        f"Market value: {currency}{summary.total_value:,.2f}",
        f"Total P&L: {_signed_money(summary.total_pnl, currency)} "
        f"({summary.total_pnl_percent:+.2f}%)",
    ]
    best, worst = summary.best_performer, summary.worst_performer
    if best is not None and worst is not None:
        lines.append(
            f"Best: {best.symbol} ({best.pnl_percent:+.2f}%) | "
            f"Worst: {worst.symbol} ({worst.pnl_percent:+.2f}%)"
        )
    return "\n".join(lines)
