"""comment_service: 광고 댓글 관련 비즈니스 로직을 처리하는 서비스.

모든 메서드는 Ok 또는 Err를 반환하며 HTTP 상태 코드는 알지 못합니다.
생성/수정/삭제는 조회와 쓰기를 하나의 트랜잭션에서 수행합니다.
"""

import logging
from dataclasses import replace
from datetime import datetime

from database.connection import transactional
from dependencies.auth import AuthContext
from models import advert_models, comment_models, user_models
from models.comment_models import Comment
from schemas.comment_mapper import apply_update, to_dto, to_entity, to_wrapper
from schemas.comment_schemas import (
    CommentDto,
    CreateOrUpdateComment,
    ResponseWrapperCommentDto,
)
from utils.exceptions import (
    ActionForbiddenError,
    AdvertNotFoundError,
    CommentAdvertMismatchError,
    CommentNotFoundError,
    UserNotFoundError,
)
from utils.result import Err, Ok, Result

logger = logging.getLogger("api")


class CommentService:
    """광고 댓글 관리 서비스."""

    @staticmethod
    async def _resolve_for_change(
        auth: AuthContext, advert_id: int, comment_id: int, cur
    ) -> Result[Comment]:
        """수정/삭제 대상 댓글을 잠그고 검증합니다.

        광고 존재, 댓글 존재, 댓글-광고 소속, 호출자 권한을 순서대로 확인합니다.
        댓글 행은 트랜잭션이 끝날 때까지 잠깁니다.
        """
        advert = await advert_models.get_advert_by_id(advert_id, cur=cur)
        if not advert:
            return Err(AdvertNotFoundError())

        comment = await comment_models.get_comment_by_id(
            comment_id, cur=cur, for_update=True
        )
        if not comment:
            return Err(CommentNotFoundError())

        if comment.advert_id != advert.id:
            return Err(CommentAdvertMismatchError())

        owner_id = comment.author.id if comment.author else None
        if not auth.is_authorized(owner_id):
            return Err(ActionForbiddenError())

        return Ok(comment)

    @staticmethod
    async def create(
        auth: AuthContext, advert_id: int, dto: CreateOrUpdateComment
    ) -> Result[CommentDto]:
        """댓글을 생성합니다.

        생성 시간은 현재 시각, 작성자는 호출자, 광고는 advert_id로 지정됩니다.
        """
        logger.info(f"creating comment for advert with id: {advert_id}")

        async with transactional() as cur:
            advert = await advert_models.get_advert_by_id(advert_id, cur=cur)
            if not advert:
                return Err(AdvertNotFoundError())

            user = await user_models.get_user_by_id(auth.identity, cur=cur)
            if not user:
                return Err(UserNotFoundError())

            comment = replace(
                to_entity(dto),
                created_at=datetime.now(),
                author=user,
                advert_id=advert.id,
            )
            saved = await comment_models.save_comment(comment, cur=cur)

        return Ok(to_dto(saved))

    @staticmethod
    async def update(
        auth: AuthContext,
        advert_id: int,
        comment_id: int,
        dto: CreateOrUpdateComment,
    ) -> Result[CommentDto]:
        """댓글 내용을 수정합니다."""
        logger.info(f"updating comment with id: {comment_id} (advert {advert_id})")

        async with transactional() as cur:
            resolved = await CommentService._resolve_for_change(
                auth, advert_id, comment_id, cur
            )
            if isinstance(resolved, Err):
                return resolved

            saved = await comment_models.save_comment(
                apply_update(resolved.value, dto), cur=cur
            )
            if saved is None:
                return Err(CommentNotFoundError())

        return Ok(to_dto(saved))

    @staticmethod
    async def delete(
        auth: AuthContext, advert_id: int, comment_id: int
    ) -> Result[None]:
        """댓글을 삭제합니다. 이미 삭제된 댓글은 CommentNotFoundError가 됩니다."""
        logger.info(f"deleting comment with id: {comment_id} (advert {advert_id})")

        async with transactional() as cur:
            resolved = await CommentService._resolve_for_change(
                auth, advert_id, comment_id, cur
            )
            if isinstance(resolved, Err):
                return resolved

            if not await comment_models.delete_comment(comment_id, cur=cur):
                return Err(CommentNotFoundError())

        return Ok(None)

    @staticmethod
    async def find_all(advert_id: int) -> Result[ResponseWrapperCommentDto]:
        """광고의 댓글 목록과 개수를 조회합니다.

        공개 조회이며 광고 존재 여부는 확인하지 않습니다 (없는 광고는 빈 목록).
        """
        logger.info(f"getting all comments for advert with id: {advert_id}")

        comments = await comment_models.get_comments_by_advert(advert_id)
        return Ok(to_wrapper(comments))
