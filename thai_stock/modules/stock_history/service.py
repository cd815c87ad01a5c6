import logging
from datetime import datetime

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from thai_stock.core.market_clock import local_day_bounds, to_utc_naive, utc_now
from thai_stock.modules.market_data.google_finance import GoogleFinancePriceSource
from thai_stock.modules.market_data.protocols import HistorySource, PriceSource
from thai_stock.modules.market_data.yahoo_finance import YahooHistorySource
from thai_stock.modules.stock_history.repository import StockHistoryRepository
from thai_stock.modules.stock_history.schemas import DailyJobResult, HistoryEntryOut, SeedResult
from thai_stock.modules.stocks.repository import StockRepository


logger = logging.getLogger(__name__)


class StockHistoryService:
    def __init__(
        self,
        session: AsyncSession,
        price_source: PriceSource | None = None,
        history_source: HistorySource | None = None,
    ):
        self.session = session
        self.repo = StockHistoryRepository(session)
        self.stock_repo = StockRepository(session)
        self.price_source = price_source or GoogleFinancePriceSource()
        self.history_source = history_source or YahooHistorySource()

    async def get_history(self, symbol: str, limit: int = 100) -> list[HistoryEntryOut]:
        stock = await self.stock_repo.get_by_symbol(symbol)
        if not stock:
            raise HTTPException(status_code=404, detail="Stock not found")
        return await self.repo.get_history_by_stock(stock.id, limit)

    async def run_daily(self, now: datetime | None = None) -> DailyJobResult:
        """Append today's close for every tracked stock. Not gated by market hours."""
        recorded_at = to_utc_naive(now or utc_now())
        stocks = await self.stock_repo.get_all()

        updated = 0
        for stock in stocks:
            try:
                price = await self.price_source.fetch_price(stock.symbol)
            except Exception as e:
                logger.warning("Price fetch for %s failed: %s", stock.symbol, e)
                price = None

            if price is None:
                logger.warning("[~] %s: no price, history not recorded", stock.symbol)
                continue

            await self.repo.add(stock_id=stock.id, date=recorded_at, close=price)
            await self.session.commit()
            updated += 1

        logger.info("Daily history recorded for %s of %s stocks", updated, len(stocks))
        return DailyJobResult(updated=updated)

    async def seed_history(self) -> SeedResult:
        """Backfill daily closes. At most one entry per stock per Bangkok calendar day."""
        stocks = await self.stock_repo.get_all()

        created = 0
        for stock in stocks:
            logger.info("Seeding history for %s...", stock.symbol)
            try:
                history = await self.history_source.fetch_history(stock.symbol)
            except Exception as e:
                logger.warning("History fetch for %s failed: %s", stock.symbol, e)
                history = []

            added = 0
            for point in history:
                day_start, day_end = local_day_bounds(point.date)
                if await self.repo.exists_between(stock.id, day_start, day_end):
                    continue
                await self.repo.add(stock_id=stock.id, date=to_utc_naive(point.date), close=point.close)
                added += 1

            await self.session.commit()
            created += added
            if added:
                logger.info("[✓] %s: %s history entries added", stock.symbol, added)

        return SeedResult(stocks_processed=len(stocks), records_created=created)
