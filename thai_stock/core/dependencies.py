from typing import Annotated

from fastapi import Depends, Header, HTTPException, Query
from pydantic import EmailStr
from sqlalchemy.ext.asyncio import AsyncSession

from thai_stock.core.config import settings
from thai_stock.core.database import get_async_session
from thai_stock.modules.market_data.google_finance import GoogleFinancePriceSource
from thai_stock.modules.market_data.protocols import HistorySource, PriceSource
from thai_stock.modules.market_data.yahoo_finance import YahooHistorySource
from thai_stock.modules.notify.email import EmailNotifier


def get_price_source() -> PriceSource:
    return GoogleFinancePriceSource()


def get_history_source() -> HistorySource:
    return YahooHistorySource()


def get_notifier() -> EmailNotifier:
    return EmailNotifier()


async def verify_cron_secret(
    authorization: Annotated[str | None, Header()] = None,
) -> None:
    if not settings.CRON_SECRET:
        return

    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or token != settings.CRON_SECRET:
        raise HTTPException(status_code=401, detail="Unauthorized")


SessionDep = Annotated[AsyncSession, Depends(get_async_session)]
PriceSourceDep = Annotated[PriceSource, Depends(get_price_source)]
HistorySourceDep = Annotated[HistorySource, Depends(get_history_source)]
NotifierDep = Annotated[EmailNotifier, Depends(get_notifier)]
EmailQuery = Annotated[EmailStr, Query(description="Email the user is identified by")]
