from fastapi import APIRouter

from thai_stock.core.dependencies import SessionDep
from thai_stock.modules.insights.schemas import MarketInsights
from thai_stock.modules.insights.service import InsightsService


router = APIRouter(prefix="/stocks", tags=["Insights"])


@router.get("/insights", response_model=MarketInsights)
async def get_insights(session: SessionDep):
    service = InsightsService(session)
    return await service.get_insights()
