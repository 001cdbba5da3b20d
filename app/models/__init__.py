"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for create_all and relationship
resolution.

Modules:
    user: 사용자 계정 (User accounts)
    token: 리프레시 토큰 (Refresh tokens)
    community: 커뮤니티, 커뮤니티 사용자, 아티스트, 매니저 (Community, CommunityUser, Artist, Manager)
    membership: 멤버십 및 결제 기록 (Membership and payment records)
    post: 게시글, 이미지, 댓글, 좋아요 (Post, PostImage, Comment, Like)
    notice: 공지사항 및 이미지 (Notice and NoticeImage)
    media: 미디어 갤러리, 라이브 (Media, MediaFile, Live)
    merchandise: 굿즈샵, 카테고리, 판매글, 옵션, 이미지 (Storefront)
    cart: 장바구니 (Cart and CartItem)
"""

from app.models.user import User, UserRole
from app.models.token import RefreshToken
from app.models.community import Community, CommunityUser, Artist, Manager
from app.models.membership import Membership, MembershipPayment, MembershipStatus
from app.models.post import Post, PostImage, Comment, Like, ItemType
from app.models.notice import Notice, NoticeImage
from app.models.media import Media, MediaFile, Live
from app.models.merchandise import Product, ProductCategory, MerchandisePost, MerchandiseOption, MerchandiseImage
from app.models.cart import Cart, CartItem

__all__ = [
    "User", "UserRole", "RefreshToken",
    "Community", "CommunityUser", "Artist", "Manager",
    "Membership", "MembershipPayment", "MembershipStatus",
    "Post", "PostImage", "Comment", "Like", "ItemType",
    "Notice", "NoticeImage",
    "Media", "MediaFile", "Live",
    "Product", "ProductCategory", "MerchandisePost", "MerchandiseOption", "MerchandiseImage",
    "Cart", "CartItem",
]
