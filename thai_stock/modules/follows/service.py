import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from thai_stock.core.market_clock import utc_now
from thai_stock.modules.alerts.repository import AlertRepository
from thai_stock.modules.follows.repository import FollowRepository
from thai_stock.modules.follows.schemas import FollowCreate, FollowDetails, FollowOut
from thai_stock.modules.market_data.google_finance import GoogleFinancePriceSource
from thai_stock.modules.market_data.protocols import PriceSource
from thai_stock.modules.stocks.repository import StockRepository
from thai_stock.modules.users.repository import UserRepository


logger = logging.getLogger(__name__)


class FollowService:
    def __init__(self, session: AsyncSession, price_source: PriceSource | None = None):
        self.session = session
        self.repo = FollowRepository(session)
        self.user_repo = UserRepository(session)
        self.stock_repo = StockRepository(session)
        self.alert_repo = AlertRepository(session)
        self.price_source = price_source or GoogleFinancePriceSource()

    async def list_follows(self, email: str) -> list[FollowDetails]:
        """Followed stocks with a live quote and the active alert on each, if any."""
        user = await self.user_repo.get_by_email(email)
        if not user:
            return []

        follows = await self.repo.get_for_user(user.id)
        active_alerts = await self.alert_repo.get_active_for_user(user.id)

        details = []
        for follow in follows:
            live_price = await self.price_source.fetch_price(follow.stock.symbol)
            alert = next((a for a in active_alerts if a.stock_id == follow.stock_id), None)
            details.append(FollowDetails(
                **follow.model_dump(),
                live_price=live_price if live_price is not None else 0,
                alert=alert,
            ))
        return details

    async def follow(self, data: FollowCreate) -> tuple[FollowOut, bool]:
        """Returns the follow and whether it was created by this call."""
        user = await self.user_repo.get_or_create(data.user_email)

        price = data.price or 0
        stock, created = await self.stock_repo.get_or_create(data.symbol, last_price=price)
        if not created and price > 0:
            await self.stock_repo.update_price(stock.symbol, price, utc_now())

        try:
            follow, created = await self.repo.get_or_create(user.id, stock.id)
            await self.session.commit()
        except IntegrityError:
            # lost a race with a concurrent follow of the same pair
            await self.session.rollback()
            logger.info("%s already follows %s", data.user_email, data.symbol)
            existing = await self.repo.get_one_or_none(user_id=user.id, stock_id=stock.id)
            return existing, False

        return follow, created

    async def unfollow(self, follow_id: int) -> None:
        await self.repo.delete(id=follow_id)
        await self.session.commit()
