"""models: 데이터 클래스 및 데이터 관리 함수 패키지.

사용자, 광고, 댓글 데이터 모델과 MySQL 데이터베이스 관리 함수를 제공합니다.
"""

from .user_models import (
    User,
    ROLE_USER,
    ROLE_ADMIN,
    get_user_by_id,
    get_user_by_email,
    save_user,
    delete_user,
)

from .advert_models import (
    Advert,
    get_advert_by_id,
    get_adverts_by_author,
    save_advert,
    delete_advert,
)

from .comment_models import (
    Comment,
    get_comment_by_id,
    get_comments_by_advert,
    save_comment,
    delete_comment,
)
