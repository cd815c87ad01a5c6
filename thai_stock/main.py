import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thai_stock.core.config import settings
from thai_stock.core.database import Base, engine
from thai_stock.core.scheduler import register_jobs, scheduler
from thai_stock.modules.alerts.router import router as router_alerts
from thai_stock.modules.follows.router import router as router_follows
from thai_stock.modules.insights.router import router as router_insights
from thai_stock.modules.jobs.router import router as router_jobs
from thai_stock.modules.notify.router import router as router_email
from thai_stock.modules.stock_history.router import router as router_history
from thai_stock.modules.stocks.router import router as router_stocks


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.SCHEDULER_ENABLED:
        register_jobs()
        scheduler.start()
        logger.info("Scheduler started")

    yield

    if scheduler.running:
        scheduler.shutdown()
    await engine.dispose()


app = FastAPI(
    title="Thai Stock Tracker API",
    version="1.0.0",
    description="Follow SET stocks, set one-shot price alerts and get email notifications",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(router_stocks)
app.include_router(router_insights)
app.include_router(router_history)
app.include_router(router_follows)
app.include_router(router_alerts)
app.include_router(router_email)
app.include_router(router_jobs)


if __name__ == "__main__":
    uvicorn.run("thai_stock.main:app", reload=True, port=8000)
