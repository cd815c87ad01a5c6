from fastapi import APIRouter

from thai_stock.core.dependencies import NotifierDep, PriceSourceDep, SessionDep
from thai_stock.modules.notify.schemas import SummaryOut, SummaryRequest
from thai_stock.modules.notify.service import SummaryService


router = APIRouter(prefix="/email", tags=["Email"])


@router.post("/summary", response_model=SummaryOut)
async def send_summary(
    data: SummaryRequest,
    session: SessionDep,
    price_source: PriceSourceDep,
    notifier: NotifierDep,
):
    service = SummaryService(session, price_source, notifier)
    return await service.send_summary(data.email)
