import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from thai_stock.core.config import settings
from thai_stock.core.database import async_session_maker
from thai_stock.core.market_clock import BANGKOK
from thai_stock.modules.alerts.service import AlertService
from thai_stock.modules.stock_history.service import StockHistoryService


logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler(timezone=BANGKOK)


async def run_hourly_job():
    logger.info("Starting hourly job...")
    async with async_session_maker() as session:
        result = await AlertService(session).run_hourly()
    logger.info("Hourly job finished: %s", result.message)


async def run_daily_job():
    logger.info("Starting daily job...")
    async with async_session_maker() as session:
        result = await StockHistoryService(session).run_daily()
    logger.info("Daily job finished: %s stocks recorded", result.updated)


def register_jobs():
    # on the hour through the trading day; run_hourly itself skips the lunch break
    scheduler.add_job(
        run_hourly_job,
        CronTrigger(day_of_week="mon-fri", hour="10-16", minute=0, second=10),
        id="hourly_alerts",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    # after the close
    scheduler.add_job(
        run_daily_job,
        CronTrigger(day_of_week="mon-fri", hour=settings.DAILY_JOB_HOUR, minute=settings.DAILY_JOB_MINUTE),
        id="daily_history",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
