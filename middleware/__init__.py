"""middleware: 미들웨어 패키지.

요청 타이밍, 로깅, 예외 처리 등 HTTP 요청/응답 처리를 위한 구성 요소를 제공합니다.
"""

from .timing import TimingMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "TimingMiddleware",
    "LoggingMiddleware",
]
