import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from thai_stock.core.dependencies import NotifierDep, PriceSourceDep, SessionDep, verify_cron_secret
from thai_stock.modules.alerts.service import AlertService
from thai_stock.modules.stock_history.service import StockHistoryService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cron", tags=["Jobs"], dependencies=[Depends(verify_cron_secret)])


@router.get("", response_model=None)
async def run_job(
    session: SessionDep,
    price_source: PriceSourceDep,
    notifier: NotifierDep,
    job_type: str = Query("hourly", alias="type", description="hourly: check alerts, daily: record history"),
):
    logger.info("Starting %s job...", job_type)

    if job_type == "hourly":
        service = AlertService(session, price_source, notifier)
        return await service.run_hourly()

    if job_type == "daily":
        service = StockHistoryService(session, price_source=price_source)
        return await service.run_daily()

    raise HTTPException(status_code=400, detail="Invalid job type")
