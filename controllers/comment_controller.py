"""comment_controller: 댓글 관련 컨트롤러 모듈.

서비스 결과(Ok/Err)를 HTTP 응답으로 변환합니다.
"""

from typing import TypeVar

from fastapi import Response, status

from dependencies.auth import AuthContext
from middleware.exception_handler import error_response
from schemas.comment_schemas import (
    CommentDto,
    CreateOrUpdateComment,
    ResponseWrapperCommentDto,
)
from services.comment_service import CommentService
from utils.result import Err, Result

T = TypeVar("T")


def _unwrap(result: Result[T]) -> T | Response:
    """Err는 상태 코드가 매핑된 응답으로, Ok는 값으로 변환합니다."""
    if isinstance(result, Err):
        return error_response(result.error)
    return result.value


async def get_comments(ad_id: int) -> ResponseWrapperCommentDto | Response:
    """광고의 댓글 목록을 조회합니다."""
    return _unwrap(await CommentService.find_all(ad_id))


async def create_comment(
    ad_id: int,
    comment_data: CreateOrUpdateComment,
    auth: AuthContext,
) -> CommentDto | Response:
    """새 댓글을 작성합니다.

    Returns:
        생성된 댓글, 광고가 없으면 403 응답.
    """
    return _unwrap(await CommentService.create(auth, ad_id, comment_data))


async def update_comment(
    ad_id: int,
    comment_id: int,
    comment_data: CreateOrUpdateComment,
    auth: AuthContext,
) -> CommentDto | Response:
    """댓글을 수정합니다.

    Returns:
        수정된 댓글, 광고/댓글 없음·소속 불일치·권한 없음은 403 응답.
    """
    return _unwrap(
        await CommentService.update(auth, ad_id, comment_id, comment_data)
    )


async def delete_comment(ad_id: int, comment_id: int, auth: AuthContext) -> Response:
    """댓글을 삭제합니다. 성공 시 본문 없는 200 응답."""
    result = await CommentService.delete(auth, ad_id, comment_id)
    if isinstance(result, Err):
        return error_response(result.error)
    return Response(status_code=status.HTTP_200_OK)
