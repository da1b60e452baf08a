"""comment_router: 광고 댓글 관련 라우터 모듈.

광고에 달린 댓글의 조회, 작성, 수정, 삭제 엔드포인트를 제공합니다.
"""

from fastapi import APIRouter, Depends, Response, status
from controllers import comment_controller
from dependencies.auth import AuthContext, get_auth_context
from schemas.comment_schemas import (
    CommentDto,
    CreateOrUpdateComment,
    ResponseWrapperCommentDto,
)


comment_router = APIRouter(prefix="/ads", tags=["comments"])
"""댓글 관련 라우터 인스턴스."""


@comment_router.get(
    "/{ad_id}/comments",
    status_code=status.HTTP_200_OK,
    response_model=ResponseWrapperCommentDto,
)
async def get_comments(ad_id: int):
    """광고의 댓글 목록을 조회합니다.

    인증이 필요 없으며, 존재하지 않는 광고는 빈 목록을 반환합니다.
    """
    return await comment_controller.get_comments(ad_id)


@comment_router.post(
    "/{ad_id}/comments",
    status_code=status.HTTP_200_OK,
    response_model=CommentDto,
)
async def create_comment(
    ad_id: int,
    comment_data: CreateOrUpdateComment,
    auth: AuthContext = Depends(get_auth_context),
):
    """광고에 새 댓글을 작성합니다.

    Args:
        ad_id: 광고 ID.
        comment_data: 댓글 내용.
        auth: 인증된 호출자 정보.
    """
    return await comment_controller.create_comment(ad_id, comment_data, auth)


@comment_router.put(
    "/{ad_id}/comments/{comment_id}",
    status_code=status.HTTP_200_OK,
    response_model=CommentDto,
)
async def update_comment(
    ad_id: int,
    comment_id: int,
    comment_data: CreateOrUpdateComment,
    auth: AuthContext = Depends(get_auth_context),
):
    """댓글을 수정합니다. 작성자 또는 관리자만 가능합니다.

    Args:
        ad_id: 광고 ID.
        comment_id: 수정할 댓글 ID.
        comment_data: 수정할 내용.
        auth: 인증된 호출자 정보.
    """
    return await comment_controller.update_comment(ad_id, comment_id, comment_data, auth)


@comment_router.delete("/{ad_id}/comments/{comment_id}", status_code=status.HTTP_200_OK)
async def delete_comment(
    ad_id: int,
    comment_id: int,
    auth: AuthContext = Depends(get_auth_context),
) -> Response:
    """댓글을 삭제합니다. 작성자 또는 관리자만 가능합니다."""
    return await comment_controller.delete_comment(ad_id, comment_id, auth)
