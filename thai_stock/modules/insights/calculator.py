"""Short-term performance figures derived from stored daily closes.

Everything here is pure: callers pass in the closes of the look-back window,
oldest first, and get back plain insight models.
"""
from datetime import datetime

from thai_stock.modules.insights.schemas import MarketInsights, StockInsight


TOP_N = 5
MIN_MOMENTUM_STREAK = 2

# Shown until enough real history has been recorded
PLACEHOLDER_GAINERS = [
    StockInsight(symbol="PTT", current_price=34.50, change_7d=5.2, streak=2, is_above_avg=True),
    StockInsight(symbol="CPALL", current_price=65.25, change_7d=4.8, streak=3, is_above_avg=True),
    StockInsight(symbol="AOT", current_price=62.00, change_7d=3.5, streak=1, is_above_avg=False),
]
PLACEHOLDER_MOMENTUM = [
    StockInsight(symbol="CPALL", current_price=65.25, change_7d=4.8, streak=3, is_above_avg=True),
    StockInsight(symbol="PTT", current_price=34.50, change_7d=5.2, streak=2, is_above_avg=True),
]


def percent_change(closes: list[float | None]) -> float | None:
    """Change from the first to the last close, in percent. None when undefined."""
    if len(closes) < 2:
        return None
    earliest = closes[0] or 0
    latest = closes[-1] or 0
    if earliest == 0:
        return None
    return (latest - earliest) / earliest * 100


def bullish_streak(closes: list[float | None]) -> int:
    """Consecutive higher closes counted back from the most recent one."""
    streak = 0
    for i in range(len(closes) - 1, 0, -1):
        current = closes[i] or 0
        prev = closes[i - 1] or 0
        if current > prev and prev != 0:
            streak += 1
        else:
            break
    return streak


def average_price(closes: list[float | None]) -> float | None:
    valid = [c for c in closes if c is not None]
    if not valid:
        return None
    return sum(valid) / len(valid)


def calculate_stock_insight(
    symbol: str,
    closes: list[float | None],
    last_update: datetime | None = None,
) -> StockInsight | None:
    """Insight for one stock, or None if its window can't support one."""
    change_7d = percent_change(closes)
    if change_7d is None:
        return None

    avg_price = average_price(closes)
    if avg_price is None:
        return None

    latest = closes[-1] or 0
    return StockInsight(
        symbol=symbol,
        current_price=latest,
        change_7d=change_7d,
        streak=bullish_streak(closes),
        avg_price=avg_price,
        is_above_avg=latest > avg_price,
        last_update=last_update,
    )


def top_gainers(insights: list[StockInsight], limit: int = TOP_N) -> list[StockInsight]:
    return sorted(insights, key=lambda s: s.change_7d, reverse=True)[:limit]


def momentum_stocks(insights: list[StockInsight], limit: int = TOP_N) -> list[StockInsight]:
    candidates = [s for s in insights if s.streak >= MIN_MOMENTUM_STREAK and s.is_above_avg]
    return sorted(candidates, key=lambda s: (-s.streak, -s.change_7d))[:limit]


def build_market_insights(insights: list[StockInsight], timestamp: datetime) -> MarketInsights:
    if not insights:
        return MarketInsights(
            top_gainers=PLACEHOLDER_GAINERS,
            momentum_stocks=PLACEHOLDER_MOMENTUM,
            timestamp=timestamp,
            is_mock=True,
        )

    return MarketInsights(
        top_gainers=top_gainers(insights),
        momentum_stocks=momentum_stocks(insights),
        timestamp=timestamp,
    )
