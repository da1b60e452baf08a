# timing: 요청 타이밍 미들웨어
# 요청 시각을 request.state에 기록하여 에러 응답의 timestamp로 사용합니다.

from datetime import datetime, timezone
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class TimingMiddleware(BaseHTTPMiddleware):
    """요청이 들어온 UTC 시각을 request.state.request_time에 저장합니다."""

    async def dispatch(self, request: Request, call_next):
        request.state.request_time = datetime.now(timezone.utc)
        return await call_next(request)
