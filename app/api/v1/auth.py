"""인증 라우터 — 회원가입, 로그인, 토큰 갱신, 로그아웃.

Auth Router — Sign-up, sign-in, token rotation and sign-out.
"""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.schemas.auth import RefreshRequest, SignInRequest, SignUpRequest, TokenResponse
from app.schemas.user import UserResponse
from app.services.auth_service import auth_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()


@router.post("/sign-up", response_model=ApiResponse[UserResponse], status_code=201)
async def sign_up(data: SignUpRequest, db: DbSession) -> ApiResponse:
    """회원가입 — 일반 사용자(User) 계정을 생성합니다."""
    result: ApiResponse = await auth_service.sign_up(db, data)
    await db.commit()
    return result


@router.post("/sign-in", response_model=ApiResponse[TokenResponse])
async def sign_in(data: SignInRequest, db: DbSession) -> ApiResponse:
    """로그인 — 액세스/리프레시 토큰 쌍을 발급합니다."""
    result: ApiResponse = await auth_service.sign_in(db, data)
    await db.commit()
    return result


@router.post("/refresh", response_model=ApiResponse[TokenResponse])
async def refresh_token(data: RefreshRequest, db: DbSession) -> ApiResponse:
    """토큰 갱신 — 리프레시 토큰을 회전시키고 새 토큰 쌍을 발급합니다.

    Rotates the refresh token. The presented token cannot be reused.
    """
    result: ApiResponse = await auth_service.refresh(db, data)
    await db.commit()
    return result


@router.post("/sign-out", response_model=ApiResponse[None])
async def sign_out(data: RefreshRequest, db: DbSession) -> ApiResponse:
    result: ApiResponse = await auth_service.sign_out(db, data)
    await db.commit()
    return result
