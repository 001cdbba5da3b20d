"""커뮤니티 레포지토리 — 커뮤니티/가입자/아티스트/매니저 쿼리.

Community Repository — Queries for communities, community users and the
per-community artist and manager roles. Also owns the explicit cleanup
routine that removes every row depending on a community.
"""

from typing import Sequence

from sqlalchemy import Select, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.cart import CartItem
from app.models.community import Artist, Community, CommunityUser, Manager
from app.models.media import Live, Media, MediaFile
from app.models.membership import Membership, MembershipPayment
from app.models.merchandise import (
    MerchandiseImage,
    MerchandiseOption,
    MerchandisePost,
    Product,
    ProductCategory,
)
from app.models.notice import Notice, NoticeImage
from app.models.post import Comment, ItemType, Like, Post, PostImage
from app.repositories.base import BaseRepository


class CommunityRepository(BaseRepository[Community]):
    """커뮤니티 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Community)

    async def get_by_name(self, db: AsyncSession, name: str) -> Community | None:
        result = await db.execute(select(Community).where(Community.name == name))
        return result.scalar_one_or_none()

    async def list_all(self, db: AsyncSession) -> Sequence[Community]:
        return await self.get_all(db, order_by=Community.id)

    async def list_joined(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> Sequence[Community]:
        """사용자가 가입한 커뮤니티 목록을 조회합니다.

        List the communities a user has joined, in join order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User id)

        Returns:
            Sequence[Community]: 가입한 커뮤니티 목록 (Joined communities)
        """
        query: Select = (
            select(Community)
            .join(CommunityUser, CommunityUser.community_id == Community.id)
            .where(CommunityUser.user_id == user_id)
            .order_by(CommunityUser.id)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def delete_with_dependents(
        self,
        db: AsyncSession,
        community_id: int,
    ) -> None:
        """커뮤니티와 그에 속한 모든 데이터를 삭제합니다.

        Delete a community and every row that depends on it, leaves first.
        Likes carry no foreign key to their target, so they are removed
        explicitly before the posts and comments they point at.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            community_id: 삭제할 커뮤니티 ID (Community id)
        """
        post_ids = select(Post.id).where(Post.community_id == community_id)
        comment_ids = select(Comment.id).where(Comment.post_id.in_(post_ids))
        notice_ids = select(Notice.id).where(Notice.community_id == community_id)
        media_ids = select(Media.id).where(Media.community_id == community_id)
        product_ids = select(Product.id).where(Product.community_id == community_id)
        merchandise_ids = select(MerchandisePost.id).where(MerchandisePost.product_id.in_(product_ids))
        community_user_ids = select(CommunityUser.id).where(CommunityUser.community_id == community_id)

        statements = [
            # 게시글/댓글 좋아요 (Likes on posts and comments)
            delete(Like).where(
                or_(
                    (Like.item_type == ItemType.POST.value) & Like.item_id.in_(post_ids),
                    (Like.item_type == ItemType.COMMENT.value) & Like.item_id.in_(comment_ids),
                )
            ),
            delete(Comment).where(Comment.post_id.in_(post_ids)),
            delete(PostImage).where(PostImage.post_id.in_(post_ids)),
            delete(Post).where(Post.community_id == community_id),
            delete(NoticeImage).where(NoticeImage.notice_id.in_(notice_ids)),
            delete(Notice).where(Notice.community_id == community_id),
            delete(MediaFile).where(MediaFile.media_id.in_(media_ids)),
            delete(Media).where(Media.community_id == community_id),
            delete(Live).where(Live.community_id == community_id),
            # 굿즈샵 (Storefront, including other users' cart lines)
            delete(CartItem).where(CartItem.merchandise_post_id.in_(merchandise_ids)),
            delete(MerchandiseImage).where(MerchandiseImage.merchandise_post_id.in_(merchandise_ids)),
            delete(MerchandiseOption).where(MerchandiseOption.merchandise_post_id.in_(merchandise_ids)),
            delete(MerchandisePost).where(MerchandisePost.product_id.in_(product_ids)),
            delete(ProductCategory).where(ProductCategory.product_id.in_(product_ids)),
            delete(Product).where(Product.community_id == community_id),
            # 멤버십/역할/가입자 (Memberships, roles, community users)
            delete(Membership).where(Membership.community_user_id.in_(community_user_ids)),
            delete(MembershipPayment).where(MembershipPayment.community_id == community_id),
            delete(Artist).where(Artist.community_id == community_id),
            delete(Manager).where(Manager.community_id == community_id),
            delete(CommunityUser).where(CommunityUser.community_id == community_id),
            delete(Community).where(Community.id == community_id),
        ]
        for statement in statements:
            await db.execute(statement.execution_options(synchronize_session=False))
        await db.flush()


class CommunityUserRepository(BaseRepository[CommunityUser]):
    """커뮤니티 사용자 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(CommunityUser)

    async def get_by_user_and_community(
        self,
        db: AsyncSession,
        user_id: int,
        community_id: int,
    ) -> CommunityUser | None:
        result = await db.execute(
            select(CommunityUser).where(
                CommunityUser.user_id == user_id,
                CommunityUser.community_id == community_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_memberships_with_roles(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> list[tuple[int, int, bool, bool]]:
        """사용자의 모든 커뮤니티 가입 정보와 역할 여부를 한 번에 조회합니다.

        Load every community identity of a user together with whether it
        holds the manager and artist roles, in a single query.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User id)

        Returns:
            list[tuple[int, int, bool, bool]]:
                (community_id, community_user_id, is_manager, is_artist) 목록
        """
        query: Select = (
            select(
                CommunityUser.community_id,
                CommunityUser.id,
                Manager.id,
                Artist.id,
            )
            .outerjoin(
                Manager,
                (Manager.community_user_id == CommunityUser.id)
                & (Manager.community_id == CommunityUser.community_id),
            )
            .outerjoin(
                Artist,
                (Artist.community_user_id == CommunityUser.id)
                & (Artist.community_id == CommunityUser.community_id),
            )
            .where(CommunityUser.user_id == user_id)
        )
        result = await db.execute(query)
        return [
            (community_id, community_user_id, manager_id is not None, artist_id is not None)
            for community_id, community_user_id, manager_id, artist_id in result.all()
        ]


class ArtistRepository(BaseRepository[Artist]):
    """아티스트 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Artist)

    async def get_by_community_user(self, db: AsyncSession, community_user_id: int) -> Artist | None:
        result = await db.execute(select(Artist).where(Artist.community_user_id == community_user_id))
        return result.scalar_one_or_none()


class ManagerRepository(BaseRepository[Manager]):
    """매니저 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Manager)

    async def get_by_community_user(self, db: AsyncSession, community_user_id: int) -> Manager | None:
        result = await db.execute(select(Manager).where(Manager.community_user_id == community_user_id))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 - Singleton instances
community_repository: CommunityRepository = CommunityRepository()
community_user_repository: CommunityUserRepository = CommunityUserRepository()
artist_repository: ArtistRepository = ArtistRepository()
manager_repository: ManagerRepository = ManagerRepository()
