"""test_comment_service: CommentService 단위 테스트."""

import pytest

from dependencies.auth import AuthContext
from schemas.comment_schemas import CreateOrUpdateComment
from services.comment_service import CommentService
from utils.exceptions import (
    ActionForbiddenError,
    AdvertNotFoundError,
    CommentAdvertMismatchError,
    CommentNotFoundError,
    UserNotFoundError,
)
from utils.result import Err, Ok


def _ctx(user) -> AuthContext:
    return AuthContext(user_id=user.id, role=user.role)


@pytest.mark.asyncio
async def test_create_binds_advert_and_author(store, advert, bob):
    """생성된 댓글은 요청한 광고와 호출자에게 묶여 저장된다."""
    result = await CommentService.create(
        _ctx(bob), advert.id, CreateOrUpdateComment(text="가격 조정 가능한가요?")
    )

    assert isinstance(result, Ok)
    dto = result.value
    stored = store.comments[dto.pk]
    assert stored.advert_id == advert.id
    assert stored.author == bob
    assert stored.created_at is not None
    assert dto.author == bob.id
    assert dto.author_first_name == "Bob"
    assert dto.text == "가격 조정 가능한가요?"


@pytest.mark.asyncio
async def test_create_on_missing_advert_persists_nothing(store, alice):
    result = await CommentService.create(
        _ctx(alice), 5, CreateOrUpdateComment(text="아직 판매 중인가요?")
    )

    assert isinstance(result, Err)
    assert isinstance(result.error, AdvertNotFoundError)
    assert store.comments == {}


@pytest.mark.asyncio
async def test_create_by_unknown_user(store, advert):
    result = await CommentService.create(
        AuthContext(user_id=404), advert.id, CreateOrUpdateComment(text="누구의 댓글일까요")
    )

    assert isinstance(result, Err)
    assert isinstance(result.error, UserNotFoundError)
    assert store.comments == {}


@pytest.mark.asyncio
async def test_owner_updates_text_only(store, comment, alice):
    """작성자가 수정하면 내용만 바뀌고 시간과 작성자는 유지된다."""
    result = await CommentService.update(
        _ctx(alice), 5, 9, CreateOrUpdateComment(text="edited text")
    )

    assert isinstance(result, Ok)
    stored = store.comments[9]
    assert stored.text == "edited text"
    assert stored.created_at == comment.created_at
    assert stored.author == alice
    assert stored.advert_id == 5


@pytest.mark.asyncio
async def test_non_owner_update_forbidden(store, comment, bob):
    result = await CommentService.update(
        _ctx(bob), 5, 9, CreateOrUpdateComment(text="edited text")
    )

    assert isinstance(result, Err)
    assert isinstance(result.error, ActionForbiddenError)
    assert store.comments[9].text == comment.text


@pytest.mark.asyncio
async def test_admin_may_update_any_comment(store, comment, admin):
    result = await CommentService.update(
        _ctx(admin), 5, 9, CreateOrUpdateComment(text="관리자가 수정함")
    )

    assert isinstance(result, Ok)
    assert store.comments[9].text == "관리자가 수정함"
    assert store.comments[9].author.id == comment.author.id


@pytest.mark.asyncio
async def test_update_missing_advert(store, comment, alice):
    result = await CommentService.update(
        _ctx(alice), 77, 9, CreateOrUpdateComment(text="edited text")
    )

    assert isinstance(result.error, AdvertNotFoundError)


@pytest.mark.asyncio
async def test_update_missing_comment(store, advert, alice):
    result = await CommentService.update(
        _ctx(alice), advert.id, 999, CreateOrUpdateComment(text="edited text")
    )

    assert type(result.error) is CommentNotFoundError


@pytest.mark.asyncio
async def test_update_comment_of_other_advert(store, comment, other_advert, alice):
    """다른 광고의 댓글을 지정하면 작성자여도 CommentNotFound 계열 오류."""
    result = await CommentService.update(
        _ctx(alice), other_advert.id, comment.id, CreateOrUpdateComment(text="edited text")
    )

    assert isinstance(result, Err)
    assert isinstance(result.error, CommentAdvertMismatchError)
    assert isinstance(result.error, CommentNotFoundError)
    assert result.error.message == "Incorrect advert for comment"
    assert store.comments[9].text == comment.text


@pytest.mark.asyncio
async def test_delete_twice(store, comment, alice):
    first = await CommentService.delete(_ctx(alice), 5, 9)
    second = await CommentService.delete(_ctx(alice), 5, 9)

    assert first == Ok(None)
    assert 9 not in store.comments
    assert isinstance(second, Err)
    assert type(second.error) is CommentNotFoundError


@pytest.mark.asyncio
async def test_delete_checks_advert_and_owner(store, comment, other_advert, bob):
    mismatch = await CommentService.delete(_ctx(bob), other_advert.id, 9)
    forbidden = await CommentService.delete(_ctx(bob), 5, 9)

    assert isinstance(mismatch.error, CommentAdvertMismatchError)
    assert isinstance(forbidden.error, ActionForbiddenError)
    assert 9 in store.comments


@pytest.mark.asyncio
async def test_find_all_unknown_advert_is_empty(store):
    result = await CommentService.find_all(12345)

    assert isinstance(result, Ok)
    assert result.value.count == 0
    assert result.value.results == []


@pytest.mark.asyncio
async def test_find_all_lists_only_advert_comments(store, comment, other_advert, alice, bob):
    ctx = _ctx(bob)
    await CommentService.create(ctx, 5, CreateOrUpdateComment(text="두 번째 댓글입니다"))
    await CommentService.create(ctx, other_advert.id, CreateOrUpdateComment(text="다른 광고 댓글"))

    result = await CommentService.find_all(5)

    assert result.value.count == 2
    assert [c.pk for c in result.value.results][0] == comment.id
    assert {c.author for c in result.value.results} == {alice.id, bob.id}


def _vanish_after_lookup(store, monkeypatch):
    """조회 직후 다른 요청이 댓글을 삭제한 상황을 흉내 냅니다."""
    lookup = store.get_comment_by_id

    async def stale_lookup(comment_id, cur=None, for_update=False):
        found = await lookup(comment_id, cur=cur, for_update=for_update)
        store.comments.pop(comment_id, None)
        return found

    monkeypatch.setattr("models.comment_models.get_comment_by_id", stale_lookup)


@pytest.mark.asyncio
async def test_delete_of_comment_removed_after_lookup(store, comment, alice, monkeypatch):
    _vanish_after_lookup(store, monkeypatch)

    result = await CommentService.delete(_ctx(alice), 5, 9)

    assert isinstance(result, Err)
    assert type(result.error) is CommentNotFoundError


@pytest.mark.asyncio
async def test_update_of_comment_removed_after_lookup(store, comment, alice, monkeypatch):
    """조회 후 사라진 댓글은 수정으로 되살아나지 않는다."""
    _vanish_after_lookup(store, monkeypatch)

    result = await CommentService.update(
        _ctx(alice), 5, 9, CreateOrUpdateComment(text="edited text")
    )

    assert isinstance(result, Err)
    assert type(result.error) is CommentNotFoundError
    assert 9 not in store.comments


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["update", "delete"])
async def test_change_runs_in_single_transaction(store, comment, alice, operation):
    """조회와 쓰기가 같은 트랜잭션 커서를 공유한다."""
    if operation == "update":
        await CommentService.update(
            _ctx(alice), 5, 9, CreateOrUpdateComment(text="edited text")
        )
    else:
        await CommentService.delete(_ctx(alice), 5, 9)

    assert store.transactions == 1
    names = [name for name, _ in store.calls]
    assert names[-1] == ("save_comment" if operation == "update" else "delete_comment")
    assert len({id(cur) for _, cur in store.calls}) == 1
    assert all(cur is not None for _, cur in store.calls)
