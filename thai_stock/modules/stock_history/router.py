from fastapi import APIRouter, Query

from thai_stock.core.dependencies import HistorySourceDep, SessionDep
from thai_stock.modules.stock_history.schemas import HistoryEntryOut, SeedResult
from thai_stock.modules.stock_history.service import StockHistoryService


router = APIRouter(prefix="/stocks/history", tags=["Stock History"])


@router.get("/", response_model=list[HistoryEntryOut])
async def get_history(
    session: SessionDep,
    symbol: str = Query(..., min_length=1),
    limit: int = Query(100, ge=1, le=500),
):
    service = StockHistoryService(session)
    return await service.get_history(symbol, limit)


@router.post("/seed", response_model=SeedResult)
async def seed_history(
    session: SessionDep,
    history_source: HistorySourceDep,
):
    service = StockHistoryService(session, history_source=history_source)
    return await service.seed_history()
