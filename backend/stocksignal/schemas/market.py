"""
CONTRACT 3: Market Context (boundary only)

Quote, company and news data supplied by the external market-data
collaborator. The engine never fetches these; the report formatter
only embeds them in display text and AI prompts.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class Quote(BaseModel):
    """Latest quote for an instrument."""

    symbol: str
    current_price: float
    change: float = 0.0
    change_percent: float = 0.0
    high: Optional[float] = None
    low: Optional[float] = None
    open: Optional[float] = None
    previous_close: Optional[float] = None


class NewsItem(BaseModel):
    """Single news item."""

    headline: str
    summary: Optional[str] = None
    source: str
    url: Optional[str] = None
    timestamp: datetime


class MarketContext(BaseModel):
    """Everything the prompt formatter may show besides the signal itself."""

    quote: Quote
    company_name: Optional[str] = None
    trend: Optional[str] = None
    news: list[NewsItem] = []
