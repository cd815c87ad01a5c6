from fastapi import APIRouter, Response, status

from thai_stock.core.dependencies import EmailQuery, PriceSourceDep, SessionDep
from thai_stock.modules.follows.schemas import FollowCreate, FollowDetails, FollowOut, MessageOut
from thai_stock.modules.follows.service import FollowService


router = APIRouter(prefix="/follows", tags=["Follows"])


@router.get("/", response_model=list[FollowDetails])
async def list_follows(
    email: EmailQuery,
    session: SessionDep,
    price_source: PriceSourceDep,
):
    service = FollowService(session, price_source)
    return await service.list_follows(email)


@router.post("/", response_model=FollowOut | MessageOut, status_code=status.HTTP_201_CREATED)
async def follow_stock(
    data: FollowCreate,
    response: Response,
    session: SessionDep,
):
    service = FollowService(session)
    follow, created = await service.follow(data)
    if not created:
        response.status_code = status.HTTP_200_OK
        return MessageOut(message="Already following")
    return follow


@router.delete("/{follow_id}")
async def unfollow_stock(
    follow_id: int,
    session: SessionDep,
):
    service = FollowService(session)
    await service.unfollow(follow_id)
    return {"success": True}
