from sqlalchemy import select

from thai_stock.core.repository import BaseRepository
from thai_stock.modules.follows.models import Follow
from thai_stock.modules.follows.schemas import FollowOut, FollowWithStock
from thai_stock.modules.stocks.models import Stock
from thai_stock.modules.stocks.schemas import StockOut


class FollowRepository(BaseRepository):
    model = Follow
    schema = FollowOut

    async def get_or_create(self, user_id: int, stock_id: int) -> tuple[FollowOut, bool]:
        existing = await self.get_one_or_none(user_id=user_id, stock_id=stock_id)
        if existing:
            return existing, False
        return await self.add(user_id=user_id, stock_id=stock_id), True

    async def get_for_user(self, user_id: int) -> list[FollowWithStock]:
        query = (
            select(self.model, Stock)
            .join(Stock, Stock.id == self.model.stock_id)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
        )
        result = await self.session.execute(query)
        return [
            FollowWithStock(
                **FollowOut.model_validate(follow).model_dump(),
                stock=StockOut.model_validate(stock),
            )
            for follow, stock in result.all()
        ]
