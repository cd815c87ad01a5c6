import logging

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from thai_stock.core.config import settings
from thai_stock.core.market_clock import to_bangkok, utc_now
from thai_stock.modules.follows.repository import FollowRepository
from thai_stock.modules.market_data.google_finance import GoogleFinancePriceSource
from thai_stock.modules.market_data.protocols import PriceSource
from thai_stock.modules.notify.email import EmailNotifier
from thai_stock.modules.notify.schemas import SummaryOut, SummaryRow
from thai_stock.modules.notify.templates import render_summary_html
from thai_stock.modules.users.repository import UserRepository


logger = logging.getLogger(__name__)

SUMMARY_SUBJECT = "Daily Stock Summary"


class SummaryService:
    """Emails a user the current prices of the stocks they follow."""

    def __init__(self, session: AsyncSession, price_source: PriceSource | None = None, notifier: EmailNotifier | None = None):
        self.user_repo = UserRepository(session)
        self.follow_repo = FollowRepository(session)
        self.price_source = price_source or GoogleFinancePriceSource()
        self.notifier = notifier or EmailNotifier()

    async def build_rows(self, email: str) -> list[SummaryRow]:
        user = await self.user_repo.get_by_email(email)
        if not user:
            return []

        rows = []
        for follow in await self.follow_repo.get_for_user(user.id):
            stored = follow.stock.last_price or 0
            live = await self.price_source.fetch_price(follow.stock.symbol)
            rows.append(SummaryRow(
                symbol=follow.stock.symbol,
                price=live if live is not None else stored,
                stored_price=stored,
            ))
        return rows

    async def send_summary(self, email: str) -> SummaryOut:
        rows = await self.build_rows(email)
        html = render_summary_html(rows, to_bangkok(utc_now()), settings.DASHBOARD_URL)

        delivered = await self.notifier.send(email, SUMMARY_SUBJECT, html, html=True)
        if not delivered:
            raise HTTPException(status_code=502, detail="Failed to send summary email")

        if not self.notifier.is_configured:
            return SummaryOut(message="Mock Mode: HTML Summary logged", stocks=len(rows))
        return SummaryOut(message="Summary email sent", stocks=len(rows))
