"""
CONTRACT 2: Holding Advice

Input: list[HoldingAdvice] from the upstream advice source
Output: prioritized list[HoldingAdvice], PriceOverrideResult, PortfolioSummary

Advice records are created upstream and only re-ordered or edited here.
Persistence is the caller's responsibility.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field

from stocksignal.schemas.signals import CompositeSignal


# =============================================================================
# ENUMS
# =============================================================================


class HoldingAction(str, Enum):
    HOLD = "HOLD"
    BUY_MORE = "BUY_MORE"
    REDUCE = "REDUCE"
    SELL = "SELL"


class PriceKind(str, Enum):
    STOP_LOSS = "stop_loss"
    ADD_MORE_PRICE = "add_more_price"
    TARGET_PRICE = "target_price"


class ConfidenceTier(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


# =============================================================================
# INPUT: Holdings and Advice
# =============================================================================


class Holding(BaseModel):
    """A portfolio position as held by the user."""

    model_config = ConfigDict(allow_inf_nan=False)

    symbol: str
    quantity: float = Field(..., ge=0)
    buy_price: float = Field(..., ge=0)
    current_price: float = Field(..., ge=0)

    @computed_field
    @property
    def total_cost(self) -> float:
        return self.buy_price * self.quantity

    @computed_field
    @property
    def market_value(self) -> float:
        return self.current_price * self.quantity

    @computed_field
    @property
    def pnl(self) -> float:
        """Unrealized profit/loss in currency units."""
        return self.market_value - self.total_cost

    @computed_field
    @property
    def pnl_percent(self) -> float:
        """Unrealized profit/loss relative to cost basis."""
        if self.buy_price <= 0:
            return 0.0
        return (self.current_price / self.buy_price - 1) * 100


class HoldingAdvice(BaseModel):
    """
    Advice for one holding.
    Sent by: upstream advice generator (AI or rules backend)
    Received by: Advice Service

    Mutable: an accepted price override replaces one of the three
    price fields in place.
    """

    model_config = ConfigDict(validate_assignment=True, allow_inf_nan=False)

    symbol: str
    action: HoldingAction
    confidence: float = Field(..., ge=0, le=100)
    stop_loss: float = Field(..., ge=0)
    add_more_price: float = Field(..., ge=0)
    target_price: float = Field(..., ge=0)
    reasoning: Optional[str] = None
    technical_signals: Optional[CompositeSignal] = None


# =============================================================================
# OUTPUT: Price bounds and overrides
# =============================================================================


class PriceBounds(BaseModel):
    """Inclusive acceptance interval for a price override."""

    model_config = ConfigDict(frozen=True)

    kind: PriceKind
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class PriceOverrideResult(BaseModel):
    """Outcome of a user price override request."""

    symbol: str
    kind: PriceKind
    proposed: float
    accepted: bool
    bounds: PriceBounds
    previous: Optional[float] = None
    message: str


# =============================================================================
# OUTPUT: Portfolio summary
# =============================================================================


class PortfolioSummary(BaseModel):
    """Aggregate view over a portfolio's advice list."""

    total_holdings: int = Field(..., ge=0)
    actions_count: dict[HoldingAction, int]
    avg_confidence: int = Field(..., ge=0, le=100)
    need_action: int = Field(..., ge=0, description="Holdings with a non-HOLD action")
    high_risk: int = Field(..., ge=0, description="SELL + REDUCE count")
    opportunities: int = Field(..., ge=0, description="BUY_MORE count")
    suggestion: str


class HoldingsSummary(BaseModel):
    """
    Position totals across a portfolio.

    total_pnl_percent is relative to total cost and is 0 when nothing
    was paid. Best/worst performers are ranked by pnl_percent; the first
    holding wins a tie.
    """

    total_holdings: int = Field(..., ge=0)
    total_cost: float
    total_value: float
    total_pnl: float
    total_pnl_percent: float
    best_performer: Optional[Holding] = None
    worst_performer: Optional[Holding] = None
