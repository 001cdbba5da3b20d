"""공지사항 라우터 — 작성/수정/삭제는 매니저와 관리자만 가능합니다.

Notice Router. Writes are limited to the community's managers and
platform admins; reads are public.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import CurrentContext, DbSession
from app.schemas.notice import NoticeCreate, NoticeResponse, NoticeUpdate
from app.services.notice_service import notice_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()

CommunityIdQuery = Annotated[int, Query(alias="communityId")]


@router.post("", response_model=ApiResponse[NoticeResponse], status_code=201)
async def create_notice(
    community_id: CommunityIdQuery,
    data: NoticeCreate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    result: ApiResponse = await notice_service.create(db, ctx, community_id, data)
    await db.commit()
    return result


@router.get("", response_model=ApiResponse[list[NoticeResponse]])
async def list_notices(community_id: CommunityIdQuery, db: DbSession) -> ApiResponse:
    return await notice_service.find_all(db, community_id)


@router.get("/{notice_id}", response_model=ApiResponse[NoticeResponse])
async def get_notice(notice_id: int, db: DbSession) -> ApiResponse:
    return await notice_service.find_one(db, notice_id)


@router.patch("/{notice_id}", response_model=ApiResponse[NoticeResponse])
async def update_notice(
    notice_id: int,
    data: NoticeUpdate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    result: ApiResponse = await notice_service.update(db, ctx, notice_id, data)
    await db.commit()
    return result


@router.delete("/{notice_id}", response_model=ApiResponse[None])
async def delete_notice(notice_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await notice_service.remove(db, ctx, notice_id)
    await db.commit()
    return result
