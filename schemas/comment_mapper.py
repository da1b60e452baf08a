"""comment_mapper: Comment 엔티티와 댓글 스키마 간 변환 함수 모듈.

모든 함수는 입력을 변경하지 않고 새 값을 반환합니다.
"""

from dataclasses import replace
from datetime import datetime

from models.comment_models import Comment
from schemas.comment_schemas import (
    CommentDto,
    CreateOrUpdateComment,
    ResponseWrapperCommentDto,
)


def to_epoch_millis(dt: datetime | None) -> int:
    """datetime을 epoch 밀리초로 변환합니다. None이면 0."""
    if dt is None:
        return 0
    return int(dt.timestamp() * 1000)


def to_entity(dto: CreateOrUpdateComment) -> Comment:
    """요청 스키마로 저장 전 Comment를 생성합니다.

    id, 생성 시간, 작성자, 광고는 서버에서 채웁니다.
    """
    return Comment(id=None, text=dto.text)


def to_dto(comment: Comment) -> CommentDto:
    """Comment를 응답 스키마로 변환합니다."""
    author = comment.author
    return CommentDto(
        pk=comment.id,
        text=comment.text,
        author=author.id if author else 0,
        author_first_name=author.first_name if author else "",
        author_image=author.image if author else None,
        created_at=to_epoch_millis(comment.created_at),
    )


def apply_update(comment: Comment, dto: CreateOrUpdateComment) -> Comment:
    """수정 요청을 반영한 새 Comment를 반환합니다.

    내용(text)만 바뀌며 id, 생성 시간, 작성자, 광고는 유지됩니다.
    """
    return replace(comment, text=dto.text)


def to_wrapper(comments: list[Comment]) -> ResponseWrapperCommentDto:
    """댓글 목록을 개수와 함께 응답 스키마로 변환합니다."""
    results = [to_dto(comment) for comment in comments]
    return ResponseWrapperCommentDto(count=len(results), results=results)
