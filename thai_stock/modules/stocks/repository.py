from datetime import datetime

from sqlalchemy import update

from thai_stock.core.repository import BaseRepository
from thai_stock.modules.stocks.models import Stock
from thai_stock.modules.stocks.schemas import StockOut


def normalize_symbol(symbol: str) -> str:
    return symbol.strip().upper()


class StockRepository(BaseRepository):
    model = Stock
    schema = StockOut

    async def get_by_symbol(self, symbol: str) -> StockOut | None:
        return await self.get_one_or_none(symbol=normalize_symbol(symbol))

    async def get_or_create(self, symbol: str, last_price: float = 0) -> tuple[StockOut, bool]:
        """Returns the stock and whether it was created by this call."""
        stock = await self.get_by_symbol(symbol)
        if stock:
            return stock, False
        created = await self.add(symbol=normalize_symbol(symbol), last_price=last_price)
        return created, True

    async def update_price(self, symbol: str, price: float, updated_at: datetime) -> None:
        stmt = (
            update(self.model)
            .where(self.model.symbol == normalize_symbol(symbol))
            .values(last_price=price, last_update=updated_at)
        )
        await self.session.execute(stmt)
