from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from thai_stock.core.market_clock import to_utc_naive, utc_now
from thai_stock.modules.insights.calculator import build_market_insights, calculate_stock_insight
from thai_stock.modules.insights.schemas import MarketInsights
from thai_stock.modules.stock_history.repository import StockHistoryRepository
from thai_stock.modules.stocks.repository import StockRepository


# 10 rather than 7 so a full week of closes survives weekends and holidays
LOOKBACK_DAYS = 10


class InsightsService:
    def __init__(self, session: AsyncSession):
        self.stock_repo = StockRepository(session)
        self.history_repo = StockHistoryRepository(session)

    async def get_insights(self, now: datetime | None = None) -> MarketInsights:
        now = to_utc_naive(now or utc_now())
        history_map = await self.history_repo.get_since_map(now - timedelta(days=LOOKBACK_DAYS))

        insights = []
        for stock in await self.stock_repo.get_all():
            closes = [entry.close for entry in history_map.get(stock.id, [])]
            insight = calculate_stock_insight(stock.symbol, closes, stock.last_update)
            if insight is not None:
                insights.append(insight)

        return build_market_insights(insights, timestamp=now)
