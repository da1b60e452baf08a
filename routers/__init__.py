"""routers: FastAPI 라우터 패키지.

광고 댓글 API 엔드포인트를 정의하는 라우터 모듈을 제공합니다.
"""

from .comment_router import comment_router

__all__ = [
    "comment_router",
]
