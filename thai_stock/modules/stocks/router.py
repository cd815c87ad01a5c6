from fastapi import APIRouter, Query

from thai_stock.core.dependencies import PriceSourceDep, SessionDep
from thai_stock.modules.stocks.schemas import QuoteOut, StockOut
from thai_stock.modules.stocks.service import StockService


router = APIRouter(prefix="/stocks", tags=["Stocks"])


@router.get("/", response_model=list[StockOut])
async def list_stocks(session: SessionDep):
    service = StockService(session)
    return await service.get_all()


@router.get("/quote", response_model=QuoteOut)
async def get_quote(
    session: SessionDep,
    price_source: PriceSourceDep,
    symbol: str = Query(..., min_length=1),
):
    service = StockService(session, price_source)
    return await service.get_quote(symbol)
