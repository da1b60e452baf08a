"""user_models: 사용자 관련 데이터 모델 및 함수 모듈.

사용자 데이터 클래스와 MySQL 데이터베이스를 관리하는 함수들을 제공합니다.
"""

from dataclasses import dataclass, replace

from database.connection import get_connection, read_cursor, transactional


ROLE_USER = "USER"
ROLE_ADMIN = "ADMIN"


@dataclass(frozen=True)
class User:
    """사용자 데이터 클래스.

    Attributes:
        id: 사용자 고유 식별자 (저장 전에는 None).
        email: 이메일 주소 (로그인 아이디).
        first_name: 이름.
        last_name: 성.
        phone: 전화번호.
        image: 프로필 이미지 URL.
        role: 권한 (USER 또는 ADMIN).
    """

    id: int | None
    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    image: str | None = None
    role: str = ROLE_USER

    @property
    def is_admin(self) -> bool:
        """관리자 권한 여부를 반환합니다."""
        return self.role == ROLE_ADMIN


# 공통으로 사용되는 SELECT 필드
USER_SELECT_FIELDS = "id, email, first_name, last_name, phone, image, role"


def row_to_user(row: tuple) -> User:
    """데이터베이스 행을 User 객체로 변환합니다.

    Args:
        row: (id, email, first_name, last_name, phone, image, role)
    """
    return User(
        id=row[0],
        email=row[1],
        first_name=row[2],
        last_name=row[3],
        phone=row[4],
        image=row[5],
        role=row[6],
    )


async def get_user_by_id(user_id: int, cur=None) -> User | None:
    """ID로 사용자를 조회합니다.

    Args:
        user_id: 조회할 사용자의 ID.
        cur: 진행 중인 트랜잭션의 커서 (선택).

    Returns:
        사용자 객체, 없으면 None.
    """
    async with read_cursor(cur) as cur:
        await cur.execute(
            f"SELECT {USER_SELECT_FIELDS} FROM user WHERE id = %s",
            (user_id,),
        )
        row = await cur.fetchone()
        return row_to_user(row) if row else None


async def get_user_by_email(email: str) -> User | None:
    """이메일로 사용자를 조회합니다.

    Args:
        email: 조회할 이메일 주소.

    Returns:
        사용자 객체, 없으면 None.
    """
    async with get_connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"SELECT {USER_SELECT_FIELDS} FROM user WHERE email = %s",
                (email,),
            )
            row = await cur.fetchone()
            return row_to_user(row) if row else None


async def save_user(user: User) -> User:
    """사용자를 저장합니다.

    id가 없으면 새로 삽입하고, 있으면 프로필 필드를 갱신합니다.

    Args:
        user: 저장할 사용자 객체.

    Returns:
        저장된 사용자 객체 (삽입 시 id가 채워짐).
    """
    async with transactional() as cur:
        if user.id is None:
            await cur.execute(
                """
                INSERT INTO user (email, first_name, last_name, phone, image, role)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (user.email, user.first_name, user.last_name, user.phone, user.image, user.role),
            )
            return replace(user, id=cur.lastrowid)

        await cur.execute(
            """
            UPDATE user
            SET first_name = %s, last_name = %s, phone = %s, image = %s
            WHERE id = %s
            """,
            (user.first_name, user.last_name, user.phone, user.image, user.id),
        )
        return user


async def delete_user(user_id: int) -> bool:
    """사용자를 삭제합니다.

    작성한 광고와 댓글은 외래 키 CASCADE로 함께 삭제됩니다.

    Returns:
        삭제 성공 여부.
    """
    async with transactional() as cur:
        await cur.execute("DELETE FROM user WHERE id = %s", (user_id,))
        return cur.rowcount > 0
