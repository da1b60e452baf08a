import os
import tempfile

# 설정 로드 전에 테스트용 환경 변수 주입
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-comment-api-0123456789")
os.environ.setdefault("DB_HOST", "127.0.0.1")
os.environ.setdefault("DB_PORT", "3306")
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_NAME", "classifieds_test")
os.environ.setdefault(
    "ERROR_LOG_FILE", os.path.join(tempfile.gettempdir(), "comment_api_test_error.log")
)

from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import datetime

import pytest
import pytest_asyncio
from faker import Faker
from httpx import AsyncClient, ASGITransport

from main import app
from models.advert_models import Advert
from models.comment_models import Comment
from models.user_models import ROLE_ADMIN, User
from utils.jwt_utils import create_access_token


class InMemoryStore:
    """게이트웨이 함수를 대신하는 메모리 저장소.

    DB의 UPDATE처럼 저장 시 내용(text)만 갱신하고,
    각 호출이 어느 트랜잭션 커서로 실행되었는지 기록합니다.
    """

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.adverts: dict[int, Advert] = {}
        self.comments: dict[int, Comment] = {}
        self.calls: list[tuple[str, object]] = []
        self.transactions = 0
        self._next_comment_id = 1

    def add_user(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def add_advert(self, advert: Advert) -> Advert:
        self.adverts[advert.id] = advert
        return advert

    def add_comment(self, comment: Comment) -> Comment:
        self.comments[comment.id] = comment
        self._next_comment_id = max(self._next_comment_id, comment.id + 1)
        return comment

    @asynccontextmanager
    async def transaction(self):
        self.transactions += 1
        yield object()

    async def get_user_by_id(self, user_id: int, cur=None) -> User | None:
        self.calls.append(("get_user_by_id", cur))
        return self.users.get(user_id)

    async def get_advert_by_id(self, advert_id: int, cur=None) -> Advert | None:
        self.calls.append(("get_advert_by_id", cur))
        return self.adverts.get(advert_id)

    async def get_comment_by_id(
        self, comment_id: int, cur=None, for_update: bool = False
    ) -> Comment | None:
        self.calls.append(("get_comment_by_id", cur))
        return self.comments.get(comment_id)

    async def get_comments_by_advert(self, advert_id: int, cur=None) -> list[Comment]:
        found = [c for c in self.comments.values() if c.advert_id == advert_id]
        return sorted(found, key=lambda c: (c.created_at, c.id))

    async def save_comment(self, comment: Comment, cur=None) -> Comment | None:
        self.calls.append(("save_comment", cur))
        if comment.id is None:
            saved = replace(comment, id=self._next_comment_id)
            self._next_comment_id += 1
        elif comment.id in self.comments:
            saved = replace(self.comments[comment.id], text=comment.text)
        else:
            return None
        self.comments[saved.id] = saved
        return saved

    async def delete_comment(self, comment_id: int, cur=None) -> bool:
        self.calls.append(("delete_comment", cur))
        return self.comments.pop(comment_id, None) is not None


@pytest.fixture
def store(monkeypatch):
    """게이트웨이 함수와 서비스 트랜잭션을 InMemoryStore로 교체합니다."""
    s = InMemoryStore()
    monkeypatch.setattr("services.comment_service.transactional", s.transaction)
    monkeypatch.setattr("models.user_models.get_user_by_id", s.get_user_by_id)
    monkeypatch.setattr("models.advert_models.get_advert_by_id", s.get_advert_by_id)
    monkeypatch.setattr("models.comment_models.get_comment_by_id", s.get_comment_by_id)
    monkeypatch.setattr(
        "models.comment_models.get_comments_by_advert", s.get_comments_by_advert
    )
    monkeypatch.setattr("models.comment_models.save_comment", s.save_comment)
    monkeypatch.setattr("models.comment_models.delete_comment", s.delete_comment)
    return s


@pytest.fixture
def fake():
    return Faker("ko_KR")


@pytest.fixture
def alice(store):
    return store.add_user(
        User(id=1, email="alice@example.com", first_name="Alice", last_name="Kim", image="/images/alice.png")
    )


@pytest.fixture
def bob(store):
    return store.add_user(
        User(id=2, email="bob@example.com", first_name="Bob", last_name="Lee")
    )


@pytest.fixture
def admin(store):
    return store.add_user(
        User(id=3, email="admin@example.com", first_name="Admin", last_name="Park", role=ROLE_ADMIN)
    )


@pytest.fixture
def advert(store, alice):
    """id=5 광고."""
    return store.add_advert(
        Advert(id=5, author_id=alice.id, title="자전거 팝니다", description="거의 새것", price=150000)
    )


@pytest.fixture
def other_advert(store, bob):
    return store.add_advert(
        Advert(id=6, author_id=bob.id, title="책상 팝니다", description="원목 책상", price=50000)
    )


@pytest.fixture
def comment(store, advert, alice):
    """광고 5에 alice가 작성한 id=9 댓글."""
    return store.add_comment(
        Comment(
            id=9,
            text="아직 판매 중인가요?",
            created_at=datetime(2024, 3, 1, 12, 0, 0),
            advert_id=advert.id,
            author=alice,
        )
    )


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}


@pytest_asyncio.fixture
async def client():
    """API 테스트를 위한 Async Client (lifespan 미실행, DB 연결 없음)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
