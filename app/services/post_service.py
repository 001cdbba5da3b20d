"""게시글 서비스 — 게시글 작성/조회/수정/삭제 비즈니스 로직.

Post Service — Business logic for posts. Every mutation checks the
caller's community membership first; post and image rows are always
written inside one transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import transaction
from app.models.post import ItemType, Post
from app.repositories.community_repository import artist_repository
from app.repositories.post_repository import post_repository
from app.schemas.post import PostCreate, PostImageResponse, PostResponse, PostUpdate
from app.services.community_service import community_service
from app.services.like_service import like_service
from app.services.role_service import AuthContext, CommunityRole
from app.utils.exceptions import BadRequestError, NotFoundError, PermissionDeniedError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, PageResponse, create_page_response, create_response


class PostService:
    """게시글 서비스."""

    def to_response(self, post: Post, like_count: int = 0) -> PostResponse:
        return PostResponse(
            post_id=post.id,
            community_id=post.community_id,
            community_user_id=post.community_user_id,
            artist_id=post.artist_id,
            content=post.content,
            post_images=[
                PostImageResponse(post_image_id=image.id, post_image_url=image.image_url)
                for image in post.images
            ],
            like_count=like_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    async def _detail(self, db: AsyncSession, post_id: int) -> PostResponse:
        post = await post_repository.get_with_images(db, post_id)
        like_count = await like_service.count_likes(db, post.id, ItemType.POST)
        return self.to_response(post, like_count)

    async def create(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        data: PostCreate,
    ) -> ApiResponse:
        """게시글을 작성합니다.

        Create a post in a community the caller has joined. When the
        caller is an artist of that community the post is attributed to
        the artist.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            ctx: 요청 인가 컨텍스트 (Request AuthContext)
            data: 게시글 생성 데이터 (communityId, content, postImages)

        Returns:
            ApiResponse: status 201, data = PostResponse

        Raises:
            PermissionDeniedError: 커뮤니티 미가입 (No CommunityUser in the community)
            BadRequestError: 빈 본문 (Blank content)
        """
        community_user_id = ctx.require_member(
            data.community_id, MESSAGES["POST"]["CREATE"]["UNAUTHORIZED"]
        )
        if not data.content or not data.content.strip():
            raise BadRequestError(MESSAGES["POST"]["CREATE"]["BAD_REQUEST"])

        artist = await artist_repository.get_by_community_user(db, community_user_id)

        async with transaction(db):
            post: Post = await post_repository.create(
                db,
                {
                    "community_id": data.community_id,
                    "community_user_id": community_user_id,
                    "artist_id": artist.id if artist is not None else None,
                    "content": data.content,
                },
            )
            if data.post_images:
                await post_repository.add_images(db, post.id, data.post_images)

        return create_response(201, MESSAGES["POST"]["CREATE"]["SUCCEED"], await self._detail(db, post.id))

    async def find_posts(
        self,
        db: AsyncSession,
        community_id: int,
        artist_id: int | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> PageResponse:
        """커뮤니티 게시글을 최신순으로 페이지 조회합니다.

        Newest-first page of a community's posts, optionally filtered to a
        single artist.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            community_id: 커뮤니티 ID
            artist_id: 아티스트 ID 필터 (None이면 전체)
            page: 페이지 번호, 1부터 (1-based page number)
            limit: 페이지 크기, 1 ~ MAX_PAGE_LIMIT

        Returns:
            PageResponse: data = list[PostResponse], total/page/limit 포함

        Raises:
            BadRequestError: page/limit 범위 초과
            NotFoundError: 커뮤니티 없음
        """
        if page < 1 or limit < 1 or limit > settings.MAX_PAGE_LIMIT:
            raise BadRequestError(f"page는 1 이상, limit은 1~{settings.MAX_PAGE_LIMIT} 사이여야 합니다.")
        await community_service.get_or_404(db, community_id)

        query = post_repository.build_list_query(community_id, artist_id)
        posts, total = await post_repository.get_paginated(db, query, page, limit)
        like_counts = await like_service.count_likes_for_items(
            db, [post.id for post in posts], ItemType.POST
        )

        message_key = "ARTIST" if artist_id is not None else "SUCCEED"
        return create_page_response(
            200,
            MESSAGES["POST"]["FIND_POSTS"][message_key],
            [self.to_response(post, like_counts.get(post.id, 0)) for post in posts],
            total,
            page,
            limit,
        )

    async def find_one(self, db: AsyncSession, post_id: int) -> ApiResponse:
        """게시글 단건 조회 (이미지, 좋아요 수 포함).

        Raises:
            NotFoundError: 게시글 없음
        """
        if not await post_repository.exists(db, {"id": post_id}):
            raise NotFoundError(MESSAGES["POST"]["FIND_ONE"]["NOT_FOUND"])
        return create_response(200, MESSAGES["POST"]["FIND_ONE"]["SUCCEED"], await self._detail(db, post_id))

    async def update(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        post_id: int,
        data: PostUpdate,
    ) -> ApiResponse:
        """게시글을 수정합니다.

        Checks run in order: NotFound, then membership of the post's
        community, then blank content. An empty image list keeps the
        current images; a non-empty one replaces them all.

        Raises:
            NotFoundError: 게시글 없음
            PermissionDeniedError: 게시글 커뮤니티 미가입
            BadRequestError: 빈 본문
        """
        post: Post | None = await post_repository.get_by_id(db, post_id)
        if post is None:
            raise NotFoundError(MESSAGES["POST"]["UPDATE"]["NOT_FOUND"])
        ctx.require_member(post.community_id, MESSAGES["POST"]["UPDATE"]["UNAUTHORIZED"])
        if not data.content or not data.content.strip():
            raise BadRequestError(MESSAGES["POST"]["UPDATE"]["BAD_REQUEST"])

        async with transaction(db):
            await post_repository.update(db, post_id, {"content": data.content})
            if data.post_images:
                await post_repository.replace_images(db, post_id, data.post_images)

        return create_response(200, MESSAGES["POST"]["UPDATE"]["SUCCEED"], await self._detail(db, post_id))

    async def remove(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        post_id: int,
    ) -> ApiResponse:
        """게시글을 삭제합니다.

        Allowed for the author, a manager of the post's community, or a
        platform admin. Images, comments and likes go with the post.

        Raises:
            NotFoundError: 게시글 없음
            PermissionDeniedError: 작성자/매니저/관리자가 아님
        """
        post: Post | None = await post_repository.get_by_id(db, post_id)
        if post is None:
            raise NotFoundError(MESSAGES["POST"]["REMOVE"]["NOT_FOUND"])

        is_author = ctx.community_user_id_in(post.community_id) == post.community_user_id
        role = ctx.role_in(post.community_id)
        if not (is_author or role in (CommunityRole.MANAGER, CommunityRole.ADMIN)):
            raise PermissionDeniedError(MESSAGES["POST"]["REMOVE"]["UNAUTHORIZED"])

        async with transaction(db):
            await post_repository.delete_with_dependents(db, post_id)

        return create_response(200, MESSAGES["POST"]["REMOVE"]["SUCCEED"])


# 싱글턴 인스턴스 - Singleton instance
post_service: PostService = PostService()
