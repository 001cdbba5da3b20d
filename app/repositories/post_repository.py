"""게시글 레포지토리 — 게시글/게시글 이미지 쿼리.

Post Repository — Queries for posts and their attached images.
"""

from typing import Sequence

from sqlalchemy import Select, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.post import Comment, ItemType, Like, Post, PostImage
from app.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """게시글 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Post)

    async def get_with_images(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> Post | None:
        """이미지를 포함한 게시글을 조회합니다.

        Retrieve a post with its images eagerly loaded. The identity map
        copy is refreshed so images written earlier in the same session
        are visible.
        """
        query: Select = (
            select(Post)
            .options(selectinload(Post.images))
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    def build_list_query(
        self,
        community_id: int,
        artist_id: int | None = None,
    ) -> Select:
        """커뮤니티 게시글 목록 쿼리를 구성합니다 (최신순).

        Build the newest-first listing query for a community, optionally
        restricted to one artist's posts.

        Args:
            community_id: 커뮤니티 ID (Community id)
            artist_id: 아티스트 ID 필터 (Artist filter, None for all posts)

        Returns:
            Select: 정렬이 적용된 SELECT 쿼리 (Ordered SELECT query)
        """
        query: Select = (
            select(Post)
            .options(selectinload(Post.images))
            .where(Post.community_id == community_id)
        )
        if artist_id is not None:
            query = query.where(Post.artist_id == artist_id)
        # 같은 시각 작성 시 ID로 순서 고정 (Tie-break on id for equal timestamps)
        return query.order_by(Post.created_at.desc(), Post.id.desc())

    async def add_images(
        self,
        db: AsyncSession,
        post_id: int,
        image_urls: list[str],
    ) -> None:
        db.add_all([PostImage(post_id=post_id, image_url=url) for url in image_urls])
        await db.flush()

    async def replace_images(
        self,
        db: AsyncSession,
        post_id: int,
        image_urls: list[str],
    ) -> None:
        """게시글 이미지를 전부 삭제 후 다시 등록합니다.

        Delete every image row of the post and insert the given URLs.
        """
        await db.execute(
            delete(PostImage)
            .where(PostImage.post_id == post_id)
            .execution_options(synchronize_session="fetch")
        )
        await self.add_images(db, post_id, image_urls)

    async def delete_with_dependents(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> None:
        """게시글과 이미지, 댓글, 좋아요를 함께 삭제합니다.

        Delete a post together with its images, its comments and the
        likes on both the post and its comments.
        """
        comment_ids = select(Comment.id).where(Comment.post_id == post_id)
        statements = [
            delete(Like).where(
                or_(
                    (Like.item_type == ItemType.POST.value) & (Like.item_id == post_id),
                    (Like.item_type == ItemType.COMMENT.value) & Like.item_id.in_(comment_ids),
                )
            ),
            delete(Comment).where(Comment.post_id == post_id),
            delete(PostImage).where(PostImage.post_id == post_id),
            delete(Post).where(Post.id == post_id),
        ]
        for statement in statements:
            await db.execute(statement.execution_options(synchronize_session=False))
        await db.flush()


class CommentRepository(BaseRepository[Comment]):
    """댓글 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Comment)

    async def list_by_post(self, db: AsyncSession, post_id: int) -> Sequence[Comment]:
        return await self.get_all(db, filters={"post_id": post_id}, order_by=Comment.id)

    async def delete_with_likes(self, db: AsyncSession, comment_id: int) -> None:
        """댓글과 댓글 좋아요를 삭제합니다 (Comment plus its likes)."""
        await db.execute(
            delete(Like)
            .where(Like.item_type == ItemType.COMMENT.value, Like.item_id == comment_id)
            .execution_options(synchronize_session=False)
        )
        await db.execute(
            delete(Comment)
            .where(Comment.id == comment_id)
            .execution_options(synchronize_session=False)
        )
        await db.flush()


# 싱글턴 인스턴스 - Singleton instances
post_repository: PostRepository = PostRepository()
comment_repository: CommentRepository = CommentRepository()
