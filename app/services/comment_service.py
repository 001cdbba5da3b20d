"""댓글 서비스 — 댓글 작성/조회/수정/삭제 비즈니스 로직.

Comment Service — Business logic for comments on posts.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Comment, Post
from app.repositories.post_repository import comment_repository, post_repository
from app.schemas.post import CommentResponse
from app.services.role_service import AuthContext
from app.utils.exceptions import BadRequestError, NotFoundError, PermissionDeniedError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response


class CommentService:
    """댓글 서비스."""

    def to_response(self, comment: Comment) -> CommentResponse:
        return CommentResponse(
            comment_id=comment.id,
            post_id=comment.post_id,
            community_user_id=comment.community_user_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )

    async def _get_post(self, db: AsyncSession, post_id: int) -> Post:
        post: Post | None = await post_repository.get_by_id(db, post_id)
        if post is None:
            raise NotFoundError(MESSAGES["POST"]["FIND_ONE"]["NOT_FOUND"])
        return post

    async def create(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        post_id: int,
        content: str,
    ) -> ApiResponse:
        """댓글을 작성합니다.

        Raises:
            NotFoundError: 게시글 없음
            PermissionDeniedError: 게시글 커뮤니티 미가입
            BadRequestError: 빈 내용
        """
        post = await self._get_post(db, post_id)
        community_user_id = ctx.require_member(post.community_id, MESSAGES["COMMENT"]["CREATE"]["UNAUTHORIZED"])
        if not content or not content.strip():
            raise BadRequestError(MESSAGES["COMMENT"]["CREATE"]["BAD_REQUEST"])

        comment = await comment_repository.create(
            db,
            {"post_id": post_id, "community_user_id": community_user_id, "content": content},
        )
        return create_response(201, MESSAGES["COMMENT"]["CREATE"]["SUCCEED"], self.to_response(comment))

    async def find_by_post(self, db: AsyncSession, post_id: int) -> ApiResponse:
        await self._get_post(db, post_id)
        comments = await comment_repository.list_by_post(db, post_id)
        return create_response(
            200,
            MESSAGES["COMMENT"]["FIND_ALL"]["SUCCEED"],
            [self.to_response(c) for c in comments],
        )

    async def update(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        comment_id: int,
        content: str,
    ) -> ApiResponse:
        """댓글을 수정합니다 (작성자 본인만).

        Raises:
            NotFoundError: 댓글 없음
            PermissionDeniedError: 작성자가 아님 (Only the author may edit)
            BadRequestError: 빈 내용
        """
        comment: Comment | None = await comment_repository.get_by_id(db, comment_id)
        if comment is None:
            raise NotFoundError(MESSAGES["COMMENT"]["UPDATE"]["NOT_FOUND"])
        post = await self._get_post(db, comment.post_id)
        if ctx.community_user_id_in(post.community_id) != comment.community_user_id:
            raise PermissionDeniedError(MESSAGES["COMMENT"]["UPDATE"]["UNAUTHORIZED"])
        if not content or not content.strip():
            raise BadRequestError(MESSAGES["COMMENT"]["CREATE"]["BAD_REQUEST"])

        comment = await comment_repository.update(db, comment_id, {"content": content})
        return create_response(200, MESSAGES["COMMENT"]["UPDATE"]["SUCCEED"], self.to_response(comment))

    async def remove(
        self,
        db: AsyncSession,
        ctx: AuthContext,
        comment_id: int,
    ) -> ApiResponse:
        """댓글을 삭제합니다 (작성자, 커뮤니티 매니저, 관리자).

        Raises:
            NotFoundError: 댓글 없음
            PermissionDeniedError: 권한 없음
        """
        comment: Comment | None = await comment_repository.get_by_id(db, comment_id)
        if comment is None:
            raise NotFoundError(MESSAGES["COMMENT"]["REMOVE"]["NOT_FOUND"])
        post = await self._get_post(db, comment.post_id)

        is_author = ctx.community_user_id_in(post.community_id) == comment.community_user_id
        if not (is_author or ctx.can_manage(post.community_id)):
            raise PermissionDeniedError(MESSAGES["COMMENT"]["REMOVE"]["UNAUTHORIZED"])

        await comment_repository.delete_with_likes(db, comment_id)
        return create_response(200, MESSAGES["COMMENT"]["REMOVE"]["SUCCEED"])


# 싱글턴 인스턴스 - Singleton instance
comment_service: CommentService = CommentService()
