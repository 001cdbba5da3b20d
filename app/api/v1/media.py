"""미디어 라우터 — Media gallery router."""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import CurrentContext, DbSession
from app.schemas.media import MediaCreate, MediaResponse
from app.services.media_service import media_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()

CommunityIdQuery = Annotated[int, Query(alias="communityId")]


@router.post("", response_model=ApiResponse[MediaResponse], status_code=201)
async def create_media(
    community_id: CommunityIdQuery,
    data: MediaCreate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    result: ApiResponse = await media_service.create(db, ctx, community_id, data)
    await db.commit()
    return result


@router.get("", response_model=ApiResponse[list[MediaResponse]])
async def list_media(community_id: CommunityIdQuery, db: DbSession) -> ApiResponse:
    return await media_service.find_all(db, community_id)


@router.get("/{media_id}", response_model=ApiResponse[MediaResponse])
async def get_media(media_id: int, db: DbSession) -> ApiResponse:
    return await media_service.find_one(db, media_id)


@router.delete("/{media_id}", response_model=ApiResponse[None])
async def delete_media(media_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await media_service.remove(db, ctx, media_id)
    await db.commit()
    return result
