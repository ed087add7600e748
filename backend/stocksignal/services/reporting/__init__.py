"""
Signal Reporting

Formats engine output for display and for AI prompts.
Consumes CompositeSignal / HoldingAdvice only - the AI call itself
belongs to an external collaborator.
"""

from stocksignal.services.reporting.prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    format_signal_line,
    format_signal_block,
    format_analysis_prompt,
    format_signal_report,
    format_holding_advice,
    format_portfolio_summary,
    format_holding_card,
    format_holdings_summary,
)

__all__ = [
    "ANALYSIS_SYSTEM_PROMPT",
    "format_signal_line",
    "format_signal_block",
    "format_analysis_prompt",
    "format_signal_report",
    "format_holding_advice",
    "format_portfolio_summary",
    "format_holding_card",
    "format_holdings_summary",
]
