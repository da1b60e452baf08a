"""comment_schemas: 댓글 관련 Pydantic 모델 모듈.

댓글 생성/수정 요청과 댓글 응답 스키마를 정의합니다.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


COMMENT_TEXT_MIN_LENGTH = 8
COMMENT_TEXT_MAX_LENGTH = 64


class CreateOrUpdateComment(BaseModel):
    """댓글 생성/수정 요청 모델.

    Attributes:
        text: 댓글 내용 (앞뒤 공백 제거 후 8~64자).
    """

    text: str = Field(..., description="댓글 내용")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        v = v.strip()
        if not COMMENT_TEXT_MIN_LENGTH <= len(v) <= COMMENT_TEXT_MAX_LENGTH:
            raise ValueError(
                f"댓글 내용은 {COMMENT_TEXT_MIN_LENGTH}~{COMMENT_TEXT_MAX_LENGTH}자여야 합니다."
            )
        return v


class CommentDto(BaseModel):
    """댓글 응답 모델.

    Attributes:
        pk: 댓글 ID.
        text: 댓글 내용.
        author: 작성자 ID.
        author_first_name: 작성자 이름.
        author_image: 작성자 프로필 이미지 URL.
        created_at: 생성 시간 (epoch 밀리초).
    """

    model_config = ConfigDict(populate_by_name=True)

    pk: int
    text: str
    author: int
    author_first_name: str = Field(alias="authorFirstName")
    author_image: str | None = Field(default=None, alias="authorImage")
    created_at: int = Field(alias="createdAt")


class ResponseWrapperCommentDto(BaseModel):
    """댓글 목록 응답 모델."""

    count: int
    results: list[CommentDto]
