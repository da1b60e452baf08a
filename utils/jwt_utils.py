"""jwt_utils: JWT 생성 및 검증 유틸리티 모듈.

Access Token (HS256 JWT) 발급 및 검증.
"""

from datetime import datetime, timedelta, timezone

import jwt

from core.config import settings
from models.user_models import ROLE_USER
from utils.exceptions import UserUnauthorizedError

_JWT_ALGORITHM = "HS256"


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(user_id: int, role: str = ROLE_USER) -> str:
    """Access Token을 생성합니다 (설정된 만료 시간 적용).

    PII(이메일 등)는 포함하지 않고 식별자(sub)와 권한(role)만 담습니다.
    """
    now = _now_utc()
    payload = {
        "sub": str(user_id),
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int(
            (now + timedelta(minutes=settings.JWT_ACCESS_EXPIRE_MINUTES)).timestamp()
        ),
        "type": "access",
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=_JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Access Token을 디코딩하고 클레임을 반환합니다.

    Raises:
        UserUnauthorizedError: 토큰이 만료되었거나 유효하지 않은 경우.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[_JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise UserUnauthorizedError("Token expired")
    except jwt.PyJWTError:
        raise UserUnauthorizedError("Invalid token")

    if payload.get("type") != "access":
        raise UserUnauthorizedError("Invalid token")

    # sub 클레임 존재 및 정수 변환 가능 여부 검증
    try:
        int(payload.get("sub"))
    except (ValueError, TypeError):
        raise UserUnauthorizedError("Invalid token")

    return payload
