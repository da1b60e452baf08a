"""auth: FastAPI 의존성 주입을 위한 인증 모듈.

Bearer 토큰에서 호출자 신원을 추출하여 AuthContext로 제공합니다.
서비스는 전역 상태 대신 이 객체를 인자로 전달받습니다.
"""

from dataclasses import dataclass

from fastapi import Request

from models.user_models import ROLE_ADMIN, ROLE_USER
from utils.exceptions import UserUnauthorizedError
from utils.jwt_utils import decode_access_token


@dataclass(frozen=True)
class AuthContext:
    """인증된 호출자 정보.

    Attributes:
        user_id: 호출자 사용자 ID.
        role: 호출자 권한.
    """

    user_id: int
    role: str = ROLE_USER

    @property
    def identity(self) -> int:
        """호출자 식별자를 반환합니다."""
        return self.user_id

    def is_authorized(self, owner_id: int | None) -> bool:
        """리소스 소유자이거나 관리자인지 확인합니다.

        Args:
            owner_id: 리소스 작성자 ID.

        Returns:
            수정/삭제 권한 여부.
        """
        if self.role == ROLE_ADMIN:
            return True
        return owner_id is not None and owner_id == self.user_id


def _extract_bearer_token(request: Request) -> str | None:
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_auth_context(request: Request) -> AuthContext:
    """요청의 Bearer 토큰을 검증하고 AuthContext를 반환합니다.

    Args:
        request: FastAPI Request 객체.

    Returns:
        인증된 호출자 정보.

    Raises:
        UserUnauthorizedError: 토큰이 없거나 유효하지 않으면 401.
    """
    token = _extract_bearer_token(request)
    if token is None:
        raise UserUnauthorizedError()

    payload = decode_access_token(token)
    return AuthContext(
        user_id=int(payload["sub"]),
        role=payload.get("role", ROLE_USER),
    )
