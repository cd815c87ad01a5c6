from collections import defaultdict
from datetime import datetime

from sqlalchemy import and_, select

from thai_stock.core.repository import BaseRepository
from thai_stock.modules.stock_history.models import StockHistory
from thai_stock.modules.stock_history.schemas import HistoryEntryOut


class StockHistoryRepository(BaseRepository):
    model = StockHistory
    schema = HistoryEntryOut

    async def exists_between(self, stock_id: int, start: datetime, end: datetime) -> bool:
        stmt = select(self.model.id).filter(
            and_(
                self.model.stock_id == stock_id,
                self.model.date >= start,
                self.model.date < end,
            )
        ).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first() is not None

    async def get_since_map(self, since: datetime) -> dict[int, list[HistoryEntryOut]]:
        """History newer than ``since`` grouped by stock id, oldest first."""
        stmt = (
            select(self.model)
            .where(self.model.date >= since)
            .order_by(self.model.stock_id, self.model.date.asc())
        )
        result = await self.session.execute(stmt)

        grouped = defaultdict(list)
        for row in result.scalars().all():
            grouped[row.stock_id].append(self.schema.model_validate(row))
        return grouped

    async def get_history_by_stock(self, stock_id: int, limit: int = 100) -> list[HistoryEntryOut]:
        stmt = (
            select(self.model)
            .filter_by(stock_id=stock_id)
            .order_by(self.model.date.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self.schema.model_validate(obj) for obj in result.scalars().all()]
