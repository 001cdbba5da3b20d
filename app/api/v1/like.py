"""좋아요 라우터 — 게시글/댓글 좋아요 상태 설정.

Like Router. `itemType` is POST or COMMENT; repeated calls update the
caller's single like row for that item.
"""

from fastapi import APIRouter

from app.api.deps import CurrentContext, DbSession
from app.models.post import ItemType
from app.schemas.post import LikeRequest, LikeResponse
from app.services.like_service import like_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()


@router.post("/{item_type}/{item_id}", response_model=ApiResponse[LikeResponse])
async def update_like_status(
    item_type: ItemType,
    item_id: int,
    data: LikeRequest,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    result: ApiResponse = await like_service.update_like_status(db, ctx, item_id, data.status, item_type)
    await db.commit()
    return result
