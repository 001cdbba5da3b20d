"""커뮤니티 라우터 — 생성, 목록, 내 커뮤니티, 상세, 수정, 삭제, 가입.

Community Router. `/my` is declared before `/{community_id}` so it is not
captured by the path parameter.
"""

from fastapi import APIRouter

from app.api.deps import CurrentContext, DbSession
from app.schemas.community import (
    CommunityCreate,
    CommunityResponse,
    CommunityUpdate,
    CommunityUserResponse,
    JoinCommunityRequest,
)
from app.services.community_service import community_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()


@router.post("", response_model=ApiResponse[CommunityResponse], status_code=201)
async def create_community(data: CommunityCreate, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """커뮤니티 생성 (플랫폼 관리자 전용)."""
    result: ApiResponse = await community_service.create(db, ctx, data)
    await db.commit()
    return result


@router.get("", response_model=ApiResponse[list[CommunityResponse]])
async def list_communities(db: DbSession) -> ApiResponse:
    return await community_service.find_all(db)


@router.get("/my", response_model=ApiResponse[list[CommunityResponse]])
async def list_my_communities(db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """내가 가입한 커뮤니티 목록."""
    return await community_service.find_my(db, ctx)


@router.get("/{community_id}", response_model=ApiResponse[CommunityResponse])
async def get_community(community_id: int, db: DbSession) -> ApiResponse:
    return await community_service.find_one(db, community_id)


@router.patch("/{community_id}", response_model=ApiResponse[CommunityResponse])
async def update_community(
    community_id: int,
    data: CommunityUpdate,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    """커뮤니티 수정 (해당 커뮤니티 매니저 또는 관리자)."""
    result: ApiResponse = await community_service.update(db, ctx, community_id, data)
    await db.commit()
    return result


@router.delete("/{community_id}", response_model=ApiResponse[None])
async def delete_community(community_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    """커뮤니티 삭제 — 하위 데이터(가입자, 게시글, 멤버십 등)까지 함께 삭제됩니다."""
    result: ApiResponse = await community_service.remove(db, ctx, community_id)
    await db.commit()
    return result


@router.post("/{community_id}/join", response_model=ApiResponse[CommunityUserResponse], status_code=201)
async def join_community(
    community_id: int,
    data: JoinCommunityRequest,
    db: DbSession,
    ctx: CurrentContext,
) -> ApiResponse:
    result: ApiResponse = await community_service.join(db, ctx, community_id, data.nick_name)
    await db.commit()
    return result
