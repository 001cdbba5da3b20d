"""라이브 라우터 — 라이브 시작, 종료, 목록.

Live Router. Only listings are managed here; streaming is external.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import CurrentContext, DbSession
from app.schemas.media import LiveCreate, LiveResponse
from app.services.media_service import live_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()

CommunityIdQuery = Annotated[int, Query(alias="communityId")]


@router.post("", response_model=ApiResponse[LiveResponse], status_code=201)
async def start_live(
    community_id: CommunityIdQuery,
    data: LiveCreate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    """라이브 시작 — 해당 커뮤니티 아티스트 또는 관리자."""
    result: ApiResponse = await live_service.start(db, ctx, community_id, data)
    await db.commit()
    return result


@router.get("", response_model=ApiResponse[list[LiveResponse]])
async def list_lives(community_id: CommunityIdQuery, db: DbSession) -> ApiResponse:
    return await live_service.find_all(db, community_id)


@router.patch("/{live_id}/end", response_model=ApiResponse[LiveResponse])
async def end_live(live_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await live_service.end(db, ctx, live_id)
    await db.commit()
    return result
