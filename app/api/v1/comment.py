"""댓글 라우터 — Comment Router."""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import CurrentContext, DbSession
from app.schemas.post import CommentCreate, CommentResponse, CommentUpdate
from app.services.comment_service import comment_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()

PostIdQuery = Annotated[int, Query(alias="postId")]


@router.post("", response_model=ApiResponse[CommentResponse], status_code=201)
async def create_comment(
    post_id: PostIdQuery,
    data: CommentCreate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    """댓글 작성 — 게시글 커뮤니티 가입자만 가능합니다."""
    result: ApiResponse = await comment_service.create(db, ctx, post_id, data.content)
    await db.commit()
    return result


@router.get("", response_model=ApiResponse[list[CommentResponse]])
async def list_comments(post_id: PostIdQuery, db: DbSession) -> ApiResponse:
    return await comment_service.find_by_post(db, post_id)


@router.patch("/{comment_id}", response_model=ApiResponse[CommentResponse])
async def update_comment(
    comment_id: int,
    data: CommentUpdate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    result: ApiResponse = await comment_service.update(db, ctx, comment_id, data.content)
    await db.commit()
    return result


@router.delete("/{comment_id}", response_model=ApiResponse[None])
async def delete_comment(comment_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await comment_service.remove(db, ctx, comment_id)
    await db.commit()
    return result
