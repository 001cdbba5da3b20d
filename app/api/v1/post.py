"""게시글 라우터 — 작성, 페이지 목록, 상세, 수정, 삭제.

Post Router. List queries use camelCase query parameters
(`communityId`, `artistId`) to match the JSON bodies.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import CurrentContext, DbSession
from app.config import settings
from app.schemas.post import PostCreate, PostResponse, PostUpdate
from app.services.post_service import post_service
from app.utils.response import ApiResponse, PageResponse

router: APIRouter = APIRouter()


@router.post("", response_model=ApiResponse[PostResponse], status_code=201)
async def create_post(data: PostCreate, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """게시글 작성 — 해당 커뮤니티 가입자만 가능합니다."""
    result: ApiResponse = await post_service.create(db, ctx, data)
    await db.commit()
    return result


@router.get("", response_model=PageResponse[PostResponse])
async def list_posts(
    db: DbSession,
    community_id: Annotated[int, Query(alias="communityId")],
    artist_id: Annotated[int | None, Query(alias="artistId")] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_LIMIT)] = 20,
) -> PageResponse:
    """커뮤니티 게시글 목록 (최신순, 페이지네이션).

    Newest-first page of posts, optionally limited to one artist.
    """
    return await post_service.find_posts(db, community_id, artist_id, page, limit)


@router.get("/{post_id}", response_model=ApiResponse[PostResponse])
async def get_post(post_id: int, db: DbSession) -> ApiResponse:
    return await post_service.find_one(db, post_id)


@router.patch("/{post_id}", response_model=ApiResponse[PostResponse])
async def update_post(
    post_id: int,
    data: PostUpdate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    """게시글 수정 — 빈 이미지 목록은 기존 이미지를 유지합니다."""
    result: ApiResponse = await post_service.update(db, ctx, post_id, data)
    await db.commit()
    return result


@router.delete("/{post_id}", response_model=ApiResponse[None])
async def delete_post(post_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """게시글 삭제 — 작성자, 해당 커뮤니티 매니저, 관리자만 가능합니다."""
    result: ApiResponse = await post_service.remove(db, ctx, post_id)
    await db.commit()
    return result
