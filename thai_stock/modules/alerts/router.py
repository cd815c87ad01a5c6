from fastapi import APIRouter, status

from thai_stock.core.dependencies import EmailQuery, SessionDep
from thai_stock.modules.alerts.schemas import AlertCreate, AlertOut, AlertWithStock
from thai_stock.modules.alerts.service import AlertService


router = APIRouter(prefix="/alerts", tags=["Alerts"])


@router.get("/", response_model=list[AlertWithStock])
async def list_alerts(
    email: EmailQuery,
    session: SessionDep,
):
    service = AlertService(session)
    return await service.list_alerts(email)


@router.post("/", response_model=AlertOut, status_code=status.HTTP_201_CREATED)
async def create_alert(
    data: AlertCreate,
    session: SessionDep,
):
    service = AlertService(session)
    return await service.create_alert(data)


@router.delete("/{alert_id}")
async def delete_alert(
    alert_id: int,
    session: SessionDep,
):
    service = AlertService(session)
    await service.delete_alert(alert_id)
    return {"message": "Alert deleted"}
