"""exception_handler: 전역 예외 처리 핸들러 모듈.

도메인 예외를 고정된 HTTP 상태 코드로 변환하고,
처리되지 않은 예외와 요청 검증 오류를 일관된 형식의 응답으로 변환합니다.
"""

import uuid
import logging
import traceback
from logging.handlers import RotatingFileHandler
from fastapi import Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from core.config import settings
from dependencies.request_context import get_request_timestamp
from utils.exceptions import (
    ActionForbiddenError,
    AdvertNotFoundError,
    CommentNotFoundError,
    DomainError,
    PhotoUploadError,
    UserNotFoundError,
    UserUnauthorizedError,
)


logger = logging.getLogger("api")

# 에러 전용 파일 로거 설정
error_logger = logging.getLogger("api.error")
error_logger.setLevel(logging.ERROR)

# RotatingFileHandler: 10MB 단위로 로테이션, 최대 5개 백업 파일
if not error_logger.handlers:
    error_file_handler = RotatingFileHandler(
        settings.ERROR_LOG_FILE,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
        delay=True,
    )
    error_file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    error_logger.addHandler(error_file_handler)


# 존재 여부 노출을 막기 위해 "찾을 수 없음"도 403으로 응답
DOMAIN_ERROR_STATUS: dict[type[DomainError], int] = {
    AdvertNotFoundError: status.HTTP_403_FORBIDDEN,
    CommentNotFoundError: status.HTTP_403_FORBIDDEN,
    UserNotFoundError: status.HTTP_403_FORBIDDEN,
    ActionForbiddenError: status.HTTP_403_FORBIDDEN,
    UserUnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    PhotoUploadError: status.HTTP_400_BAD_REQUEST,
}


def status_code_for(error: DomainError) -> int:
    """도메인 예외에 대응하는 HTTP 상태 코드를 반환합니다.

    하위 클래스는 가장 가까운 상위 클래스의 상태 코드를 따릅니다.
    표에 없는 예외는 500으로 처리합니다.
    """
    for cls in type(error).__mro__:
        if cls in DOMAIN_ERROR_STATUS:
            return DOMAIN_ERROR_STATUS[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(error: DomainError) -> PlainTextResponse:
    """도메인 예외를 예외 메시지를 본문으로 하는 응답으로 변환합니다."""
    status_code = status_code_for(error)
    logger.warning(f"{type(error).__name__} -> {status_code}: {error.message}")
    return PlainTextResponse(content=error.message, status_code=status_code)


async def domain_exception_handler(request: Request, exc: DomainError) -> PlainTextResponse:
    """의존성 등 서비스 밖에서 발생한 도메인 예외 처리 핸들러."""
    return error_response(exc)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """전역 예외 처리 핸들러.

    모든 예외를 잡아서 일관된 형식의 500 에러 응답을 반환합니다.
    프로덕션 환경(DEBUG=False)에서는 상세 에러 정보를 숨깁니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 예외.

    Returns:
        500 에러 JSON 응답.
    """
    tracking_id = str(uuid.uuid4())
    timestamp = get_request_timestamp(request)

    logger.error(f"[{tracking_id}] Unhandled exception: {exc}")
    error_logger.error(
        f"[{tracking_id}] Unhandled exception: {exc}\n{traceback.format_exc()}"
    )

    content = {
        "trackingID": tracking_id,
        "error": "Internal Server Error",
        "timestamp": timestamp,
    }
    if settings.DEBUG:
        content["detail"] = str(exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 데이터 유효성 검사 예외 처리 핸들러.

    오류 정보에 바이너리 데이터가 포함된 경우 디코딩 오류를 방지하기 위해
    해당 데이터를 문자열 플레이스홀더로 대체합니다.

    Returns:
        422 Unprocessable Entity 에러 JSON 응답.
    """
    timestamp = get_request_timestamp(request)

    sanitized_errors = []
    for error in exc.errors():
        error_copy = dict(error)

        input_val = error_copy.get("input")
        if isinstance(input_val, bytes):
            error_copy["input"] = f"<binary data: {len(input_val)} bytes>"

        if isinstance(error_copy.get("ctx"), dict):
            error_copy["ctx"] = {
                k: f"<binary data: {len(v)} bytes>" if isinstance(v, bytes) else v
                for k, v in error_copy["ctx"].items()
            }

        sanitized_errors.append(error_copy)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": jsonable_encoder(sanitized_errors), "timestamp": timestamp},
    )
