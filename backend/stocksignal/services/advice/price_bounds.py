"""
Price Bound Policy

Acceptance intervals for user-edited price targets, as multiples of the
current price. Bounds are inclusive.
"""

from stocksignal.schemas.portfolio import PriceKind, PriceBounds

PRICE_BOUND_FACTORS: dict[PriceKind, tuple[float, float]] = {
    PriceKind.STOP_LOSS: (0.70, 0.95),
    PriceKind.ADD_MORE_PRICE: (0.80, 0.98),
    PriceKind.TARGET_PRICE: (1.02, 1.50),
}

PRICE_DECIMALS = 2

PRICE_KIND_LABELS: dict[PriceKind, str] = {
    PriceKind.STOP_LOSS: "stop loss",
    PriceKind.ADD_MORE_PRICE: "add-more price",
    PriceKind.TARGET_PRICE: "target price",
}


def compute_price_bounds(current_price: float, kind: PriceKind) -> PriceBounds:
    """
    Acceptance interval for a price kind at the given current price.

    Bounds are rounded to cents: the enforced limits are the ones shown
    in messages.
    """
    low, high = PRICE_BOUND_FACTORS[kind]
    return PriceBounds(
        kind=kind,
        min=round(current_price * low, PRICE_DECIMALS),
        max=round(current_price * high, PRICE_DECIMALS),
    )


def check_price_override(
    current_price: float,
    kind: PriceKind,
    proposed: float,
) -> tuple[bool, str, PriceBounds]:
    """
    Check a proposed price against its interval.

    Returns:
        (is_valid, message, bounds)
    """
    bounds = compute_price_bounds(current_price, kind)
    label = PRICE_KIND_LABELS[kind]

    if not bounds.contains(proposed):
        return (
            False,
            f"Proposed {label} {proposed:.2f} is outside the allowed range "
            f"{bounds.min:.2f} - {bounds.max:.2f}",
            bounds,
        )

    return True, f"{label.capitalize()} set to {proposed:.2f}", bounds


def price_distance_percent(price: float, current_price: float) -> float:
    """Distance of a price target from the current price, in percent."""
    if current_price <= 0:
        return 0.0
    return (price / current_price - 1) * 100
