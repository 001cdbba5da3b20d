"""관리자 라우터 — 아티스트/매니저 권한 부여 및 회수.

Admin Router — Grants and revokes community-scoped Artist and Manager
roles on a CommunityUser. Platform admins only.
"""

from fastapi import APIRouter

from app.api.deps import CurrentContext, DbSession
from app.schemas.community import RoleGrantResponse
from app.services.admin_service import admin_service
from app.utils.response import ApiResponse

router: APIRouter = APIRouter()


@router.post("/artists/{community_user_id}", response_model=ApiResponse[RoleGrantResponse], status_code=201)
async def grant_artist(community_user_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await admin_service.grant_artist(db, ctx, community_user_id)
    await db.commit()
    return result


@router.delete("/artists/{community_user_id}", response_model=ApiResponse[None])
async def revoke_artist(community_user_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await admin_service.revoke_artist(db, ctx, community_user_id)
    await db.commit()
    return result


@router.post("/managers/{community_user_id}", response_model=ApiResponse[RoleGrantResponse], status_code=201)
async def grant_manager(community_user_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await admin_service.grant_manager(db, ctx, community_user_id)
    await db.commit()
    return result


@router.delete("/managers/{community_user_id}", response_model=ApiResponse[None])
async def revoke_manager(community_user_id: int, db: DbSession, ctx: CurrentContext) -> ApiResponse:
    result: ApiResponse = await admin_service.revoke_manager(db, ctx, community_user_id)
    await db.commit()
    return result
