"""내 정보 라우터 — 조회, 수정, 탈퇴.

Users Router — The authenticated user's own account.
"""

from fastapi import APIRouter

from app.api.deps import CurrentContext, DbSession
from app.schemas.user import UserResponse, UserUpdate
from app.services.user_service import user_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_me(db: DbSession, ctx: CurrentContext) -> ApiResponse:
    return await user_service.get_me(db, ctx)


@router.patch("/me", response_model=ApiResponse[UserResponse])
async def update_me(data: UserUpdate, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """내 정보 수정 — 요청에 포함된 필드만 변경됩니다."""
    result: ApiResponse = await user_service.update_me(db, ctx, data)
    await db.commit()
    return result


@router.delete("/me", response_model=ApiResponse[None])
async def delete_me(db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """회원 탈퇴 — 소프트 삭제 후 모든 리프레시 토큰을 폐기합니다."""
    result: ApiResponse = await user_service.delete_me(db, ctx)
    await db.commit()
    return result
