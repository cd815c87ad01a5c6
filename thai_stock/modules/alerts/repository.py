from datetime import datetime

from sqlalchemy import select, update

from thai_stock.core.repository import BaseRepository
from thai_stock.modules.alerts.models import Alert
from thai_stock.modules.alerts.schemas import ActiveAlert, AlertOut, AlertWithStock
from thai_stock.modules.stocks.models import Stock
from thai_stock.modules.stocks.schemas import StockOut
from thai_stock.modules.users.models import User
from thai_stock.modules.users.schemas import User as UserOut


class AlertRepository(BaseRepository):
    model = Alert
    schema = AlertOut

    async def get_for_user(self, user_id: int) -> list[AlertWithStock]:
        query = (
            select(self.model, Stock)
            .join(Stock, Stock.id == self.model.stock_id)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
        )
        result = await self.session.execute(query)
        return [
            AlertWithStock(
                **self.schema.model_validate(alert).model_dump(),
                stock=StockOut.model_validate(stock),
            )
            for alert, stock in result.all()
        ]

    async def get_active_for_user(self, user_id: int) -> list[AlertOut]:
        return await self.get_all_by(user_id=user_id, is_active=True)

    async def get_all_active(self) -> list[ActiveAlert]:
        query = (
            select(self.model, Stock, User)
            .join(Stock, Stock.id == self.model.stock_id)
            .join(User, User.id == self.model.user_id)
            .where(self.model.is_active == True)
            .order_by(self.model.id)
        )
        result = await self.session.execute(query)
        return [
            ActiveAlert(
                alert=self.schema.model_validate(alert),
                stock=StockOut.model_validate(stock),
                user=UserOut.model_validate(user),
            )
            for alert, stock, user in result.all()
        ]

    async def deactivate(self, alert_id: int, triggered_at: datetime | None = None) -> bool:
        """Flip an active alert off. False when it is already inactive or gone."""
        stmt = (
            update(self.model)
            .where(self.model.id == alert_id, self.model.is_active == True)
            .values(is_active=False, triggered_at=triggered_at)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
