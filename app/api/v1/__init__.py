"""v1 API 라우터 패키지 — 모든 v1 엔드포인트 통합.

v1 API Router package — Aggregates every endpoint into a single router
that main.py mounts under `{API_PREFIX}/v1`.

Included routers:
    - auth, users: 인증과 내 정보 (Authentication and own account)
    - community, admin: 커뮤니티와 역할 관리 (Communities and role grants)
    - post, comment, like, notice: 커뮤니티 콘텐츠 (Community content)
    - membership: 유료 멤버십 (Paid memberships)
    - product, merchandise, cart: 굿즈샵 (Storefront)
    - media, live: 미디어 갤러리와 라이브 목록 (Media and live listings)
    - storage: 업로드 URL 발급 (Upload URLs)
"""

from fastapi import APIRouter

from app.api.v1.admin import router as admin_router
from app.api.v1.auth import router as auth_router
from app.api.v1.cart import router as cart_router
from app.api.v1.comment import router as comment_router
from app.api.v1.community import router as community_router
from app.api.v1.like import router as like_router
from app.api.v1.live import router as live_router
from app.api.v1.media import router as media_router
from app.api.v1.membership import router as membership_router
from app.api.v1.merchandise import router as merchandise_router
from app.api.v1.notice import router as notice_router
from app.api.v1.post import router as post_router
from app.api.v1.product import router as product_router
from app.api.v1.storage import router as storage_router
from app.api.v1.users import router as users_router

v1_router: APIRouter = APIRouter()

# ---------------------------------------------------------------------------
# 계정 - Account
# ---------------------------------------------------------------------------
v1_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
v1_router.include_router(users_router, prefix="/users", tags=["Users"])

# ---------------------------------------------------------------------------
# 커뮤니티 - Communities and roles
# ---------------------------------------------------------------------------
v1_router.include_router(community_router, prefix="/community", tags=["Community"])
v1_router.include_router(admin_router, prefix="/admin", tags=["Admin"])

# ---------------------------------------------------------------------------
# 콘텐츠 - Content
# ---------------------------------------------------------------------------
v1_router.include_router(post_router, prefix="/post", tags=["Post"])
v1_router.include_router(comment_router, prefix="/comment", tags=["Comment"])
v1_router.include_router(like_router, prefix="/like", tags=["Like"])
v1_router.include_router(notice_router, prefix="/notice", tags=["Notice"])
v1_router.include_router(media_router, prefix="/media", tags=["Media"])
v1_router.include_router(live_router, prefix="/live", tags=["Live"])

# ---------------------------------------------------------------------------
# 결제/굿즈 - Payments and storefront
# ---------------------------------------------------------------------------
v1_router.include_router(membership_router, prefix="/membership", tags=["Membership"])
v1_router.include_router(product_router, prefix="/product", tags=["Product"])
v1_router.include_router(merchandise_router, prefix="/merchandise", tags=["Merchandise"])
v1_router.include_router(cart_router, prefix="/cart", tags=["Cart"])

# 업로드 - Uploads
v1_router.include_router(storage_router, prefix="/storage", tags=["Storage"])
