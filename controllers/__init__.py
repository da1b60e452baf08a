"""controllers: 요청 핸들러 패키지.

댓글 관련 컨트롤러 모듈을 제공합니다.
"""

from . import comment_controller

__all__ = [
    "comment_controller",
]
