"""comment_models: 댓글 관련 데이터 모델 및 함수 모듈.

주요 사항:
- Comment는 불변 값 객체이며, 수정은 새 값을 만들어 save_comment로 저장합니다.
- 저장 시 INSERT/UPDATE와 SELECT을 하나의 트랜잭션에서 처리합니다.
- 커서를 넘기면 호출자의 트랜잭션 안에서 실행됩니다.
"""

from dataclasses import dataclass
from datetime import datetime

from database.connection import read_cursor, write_cursor
from models.user_models import User, row_to_user


@dataclass(frozen=True)
class Comment:
    """댓글 데이터 클래스.

    Attributes:
        id: 댓글 고유 식별자 (저장 전에는 None).
        text: 내용.
        created_at: 생성 시간.
        advert_id: 소속 광고 ID.
        author: 작성자.
    """

    id: int | None
    text: str
    created_at: datetime | None = None
    advert_id: int | None = None
    author: User | None = None


_COMMENT_SELECT = """
    SELECT c.id, c.text, c.created_at, c.advert_id,
           u.id, u.email, u.first_name, u.last_name, u.phone, u.image, u.role
    FROM comment c
    JOIN user u ON c.author_id = u.id
"""


def _row_to_comment(row: tuple) -> Comment:
    """데이터베이스 행을 Comment 객체로 변환합니다."""
    return Comment(
        id=row[0],
        text=row[1],
        created_at=row[2],
        advert_id=row[3],
        author=row_to_user(row[4:11]),
    )


async def get_comment_by_id(
    comment_id: int, cur=None, for_update: bool = False
) -> Comment | None:
    """ID로 댓글을 조회합니다.

    Args:
        comment_id: 조회할 댓글 ID.
        cur: 진행 중인 트랜잭션의 커서 (선택).
        for_update: True면 트랜잭션이 끝날 때까지 댓글 행을 잠급니다.

    Returns:
        댓글 객체, 없으면 None.
    """
    sql = _COMMENT_SELECT + " WHERE c.id = %s"
    if for_update:
        sql += " FOR UPDATE OF c"
    async with read_cursor(cur) as cur:
        await cur.execute(sql, (comment_id,))
        row = await cur.fetchone()
        return _row_to_comment(row) if row else None


async def get_comments_by_advert(advert_id: int, cur=None) -> list[Comment]:
    """특정 광고의 댓글 목록을 작성순으로 조회합니다.

    Args:
        advert_id: 광고 ID.

    Returns:
        댓글 목록. 광고가 없거나 댓글이 없으면 빈 목록.
    """
    async with read_cursor(cur) as cur:
        await cur.execute(
            _COMMENT_SELECT + " WHERE c.advert_id = %s ORDER BY c.created_at ASC, c.id ASC",
            (advert_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_comment(row) for row in rows]


async def save_comment(comment: Comment, cur=None) -> Comment | None:
    """댓글을 저장합니다.

    id가 없으면 새로 삽입하고, 있으면 내용(text)만 갱신합니다.
    작성자, 소속 광고, 생성 시간은 갱신하지 않습니다.

    Args:
        comment: 저장할 댓글 객체. 삽입 시 author와 advert_id가 필요합니다.
        cur: 진행 중인 트랜잭션의 커서 (선택). 없으면 자체 트랜잭션을 사용합니다.

    Returns:
        저장 후 다시 조회한 댓글 객체. 갱신 대상 댓글이 이미 삭제되었으면 None.

    Raises:
        ValueError: 삽입할 댓글에 작성자나 광고가 지정되지 않은 경우.
        RuntimeError: 삽입 직후 조회 실패 시 (발생하지 않아야 함).
    """
    async with write_cursor(cur) as cur:
        if comment.id is None:
            if comment.author is None or comment.advert_id is None:
                raise ValueError("작성자와 광고가 지정되지 않은 댓글은 저장할 수 없습니다.")
            await cur.execute(
                """
                INSERT INTO comment (text, created_at, advert_id, author_id)
                VALUES (%s, %s, %s, %s)
                """,
                (comment.text, comment.created_at, comment.advert_id, comment.author.id),
            )
            comment_id = cur.lastrowid
        else:
            # 내용이 같으면 rowcount가 0이므로 존재 여부는 재조회로 판단
            await cur.execute(
                "UPDATE comment SET text = %s WHERE id = %s",
                (comment.text, comment.id),
            )
            comment_id = comment.id

        # 같은 트랜잭션 내에서 조회
        await cur.execute(_COMMENT_SELECT + " WHERE c.id = %s", (comment_id,))
        row = await cur.fetchone()
        if row:
            return _row_to_comment(row)
        if comment.id is not None:
            return None
        raise RuntimeError(f"댓글 삽입 직후 조회 실패: comment_id={comment_id}")


async def delete_comment(comment_id: int, cur=None) -> bool:
    """댓글을 삭제합니다.

    Args:
        comment_id: 삭제할 댓글 ID.
        cur: 진행 중인 트랜잭션의 커서 (선택).

    Returns:
        삭제 성공 여부. 이미 없으면 False.
    """
    async with write_cursor(cur) as cur:
        await cur.execute("DELETE FROM comment WHERE id = %s", (comment_id,))
        return cur.rowcount > 0
