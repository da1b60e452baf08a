"""advert_models: 광고 관련 데이터 모델 및 함수 모듈.

댓글이 소속되는 광고의 조회와 저장을 담당합니다.
"""

from dataclasses import dataclass, replace

from database.connection import get_connection, read_cursor, transactional


@dataclass(frozen=True)
class Advert:
    """광고 데이터 클래스.

    Attributes:
        id: 광고 고유 식별자 (저장 전에는 None).
        author_id: 작성자 ID.
        title: 제목.
        description: 설명.
        price: 가격.
        image: 광고 이미지 URL.
    """

    id: int | None
    author_id: int
    title: str
    description: str
    price: int
    image: str | None = None


ADVERT_SELECT_FIELDS = "id, author_id, title, description, price, image"


def _row_to_advert(row: tuple) -> Advert:
    """데이터베이스 행을 Advert 객체로 변환합니다."""
    return Advert(
        id=row[0],
        author_id=row[1],
        title=row[2],
        description=row[3],
        price=row[4],
        image=row[5],
    )


async def get_advert_by_id(advert_id: int, cur=None) -> Advert | None:
    """ID로 광고를 조회합니다.

    Args:
        advert_id: 조회할 광고 ID.
        cur: 진행 중인 트랜잭션의 커서 (선택).

    Returns:
        광고 객체, 없으면 None.
    """
    async with read_cursor(cur) as cur:
        await cur.execute(
            f"SELECT {ADVERT_SELECT_FIELDS} FROM advert WHERE id = %s",
            (advert_id,),
        )
        row = await cur.fetchone()
        return _row_to_advert(row) if row else None


async def get_adverts_by_author(author_id: int) -> list[Advert]:
    """작성자의 광고 목록을 최신순으로 조회합니다."""
    async with get_connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"""
                SELECT {ADVERT_SELECT_FIELDS}
                FROM advert
                WHERE author_id = %s
                ORDER BY id DESC
                """,
                (author_id,),
            )
            rows = await cur.fetchall()
            return [_row_to_advert(row) for row in rows]


async def save_advert(advert: Advert) -> Advert:
    """광고를 저장합니다.

    id가 없으면 새로 삽입하고, 있으면 내용을 갱신합니다.

    Args:
        advert: 저장할 광고 객체.

    Returns:
        저장된 광고 객체.
    """
    async with transactional() as cur:
        if advert.id is None:
            await cur.execute(
                """
                INSERT INTO advert (author_id, title, description, price, image)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (advert.author_id, advert.title, advert.description, advert.price, advert.image),
            )
            return replace(advert, id=cur.lastrowid)

        await cur.execute(
            """
            UPDATE advert
            SET title = %s, description = %s, price = %s, image = %s
            WHERE id = %s
            """,
            (advert.title, advert.description, advert.price, advert.image, advert.id),
        )
        return advert


async def delete_advert(advert_id: int) -> bool:
    """광고를 삭제합니다. 소속 댓글은 외래 키 CASCADE로 함께 삭제됩니다.

    Returns:
        삭제 성공 여부.
    """
    async with transactional() as cur:
        await cur.execute("DELETE FROM advert WHERE id = %s", (advert_id,))
        return cur.rowcount > 0
