# logging: 요청/응답 로깅 미들웨어
# 모든 HTTP 요청과 응답에 로그를 남긴다.

import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("api")
logger.setLevel(logging.INFO)

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    요청/응답 로깅 미들웨어

    메소드, 경로, 상태 코드, 처리 시간을 한 줄씩 남긴다.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        logger.info(f"-> {request.method} {request.url.path}")

        response = await call_next(request)

        elapsed = time.perf_counter() - start_time
        logger.info(
            f"<- {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Time: {elapsed:.3f}s"
        )
        return response
