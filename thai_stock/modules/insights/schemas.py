from datetime import datetime

from pydantic import BaseModel


class StockInsight(BaseModel):
    symbol: str
    current_price: float
    change_7d: float
    streak: int
    avg_price: float | None = None
    is_above_avg: bool
    last_update: datetime | None = None


class MarketInsights(BaseModel):
    top_gainers: list[StockInsight]
    momentum_stocks: list[StockInsight]
    timestamp: datetime
    is_mock: bool = False
