from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from thai_stock.core.market_clock import utc_now
from thai_stock.modules.market_data.google_finance import GoogleFinancePriceSource
from thai_stock.modules.market_data.protocols import PriceSource
from thai_stock.modules.stocks.repository import StockRepository, normalize_symbol
from thai_stock.modules.stocks.schemas import QuoteOut, StockOut


class StockService:
    def __init__(self, session: AsyncSession, price_source: PriceSource | None = None):
        self.repo = StockRepository(session)
        self.price_source = price_source or GoogleFinancePriceSource()

    async def get_all(self) -> list[StockOut]:
        stocks = await self.repo.get_all()
        return sorted(stocks, key=lambda s: s.symbol)

    async def get_quote(self, symbol: str) -> QuoteOut:
        symbol = normalize_symbol(symbol)
        price = await self.price_source.fetch_price(symbol)
        if price is None:
            raise HTTPException(status_code=502, detail="Failed to fetch price")
        return QuoteOut(symbol=symbol, price=price, timestamp=utc_now())
