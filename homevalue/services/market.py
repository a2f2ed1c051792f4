from typing import Sequence

from ..core.utils import round_half_up
from ..data.base import ComparableProperty, MarketMetrics, LISTED

HOT = "Hot"
STABLE = "Stable"
COOL = "Cool"

HIGH = "High"
MEDIUM = "Medium"
LOW = "Low"

def market_trend(comparables: Sequence[ComparableProperty]) -> str:
    """Bucket the listed comparables by how many there are and how long they sit."""
    listed = [c for c in comparables if c.status == LISTED]
    avg_days = (
        sum(c.days_on_market or 0 for c in listed) / len(listed) if listed else 0
    )
    if avg_days < 20 and len(listed) <= 1:
        return HOT
    if avg_days > 40 or len(listed) >= 3:
        return COOL
    return STABLE

def confidence_label(estimate: int, avg_price: int) -> str:
    if avg_price == 0:
        return LOW
    difference = abs(estimate - avg_price) / avg_price
    if difference < 0.05:
        return HIGH
    if difference < 0.10:
        return MEDIUM
    return LOW

def summarize_market(comparables: Sequence[ComparableProperty], estimate: int) -> MarketMetrics:
    """
    Aggregate comparables into averages and the two qualitative labels.
    An empty list yields metrics with no figures (``has_data`` is False).
    """
    n = len(comparables)
    if n == 0:
        return MarketMetrics()

    avg_price = round_half_up(sum(c.price for c in comparables) / n)
    # Mean of the per-property ratios, not avg_price / mean(square_feet)
    avg_ppsf = round_half_up(sum(c.price / c.square_feet for c in comparables) / n)

    return MarketMetrics(
        avg_price=avg_price,
        avg_price_per_sqft=avg_ppsf,
        market_trend=market_trend(comparables),
        confidence=confidence_label(estimate, avg_price),
        comparables_count=n,
    )
