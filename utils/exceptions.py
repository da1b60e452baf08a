"""exceptions: 도메인 예외 모듈.

서비스와 의존성 계층에서 사용하는 예외를 정의합니다.
HTTP 상태 코드로의 변환은 middleware.exception_handler가 담당합니다.
"""


class DomainError(Exception):
    """도메인 예외의 기반 클래스.

    Attributes:
        message: 응답 본문으로 그대로 전달되는 메시지.
    """

    default_message = "Domain error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AdvertNotFoundError(DomainError):
    default_message = "Advert not found"


class CommentNotFoundError(DomainError):
    default_message = "Comment not found"


class CommentAdvertMismatchError(CommentNotFoundError):
    """댓글이 요청한 광고에 속하지 않는 경우.

    존재하지 않는 댓글과 같은 상태 코드로 응답하지만 별도로 구분됩니다.
    """

    default_message = "Incorrect advert for comment"


class UserNotFoundError(DomainError):
    default_message = "User not found"


class ActionForbiddenError(DomainError):
    default_message = "Action forbidden"


class UserUnauthorizedError(DomainError):
    default_message = "User unauthorized"


class PhotoUploadError(DomainError):
    default_message = "Photo upload failed"
