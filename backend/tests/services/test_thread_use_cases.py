"""Thread Use Cases — creation and detail assembly.

Tests cover:
    - AddThread forwards the parsed NewThread and returns the AddedThread
    - GetThreadDetail nests replies under their comment and attaches like counts
    - GetThreadDetail hides soft-deleted content and keeps comments without likes at 0
    - Missing thread propagates NotFoundError
"""

from datetime import datetime, timezone

import pytest

from forum.core.domain_types import DELETED_COMMENT_CONTENT, DELETED_REPLY_CONTENT
from forum.core.entities import AddedThread
from forum.core.errors import EntityError, NotFoundError
from forum.services.add_thread import AddThreadUseCase
from forum.services.get_thread_detail import GetThreadDetailUseCase

from tests.services.fakes import make_repository

T0 = datetime(2026, 10, 15, 8, 0, tzinfo=timezone.utc)
T1 = datetime(2026, 10, 15, 9, 0, tzinfo=timezone.utc)


async def test_add_thread_returns_added_thread():
    threads = make_repository()
    threads.add_thread.return_value = AddedThread.parse(
        {"id": "thread-123", "title": "A thread", "owner": "user-123"},
    )

    result = await AddThreadUseCase(threads).execute(
        {"title": "A thread", "body": "Body", "owner": "user-123"},
    )

    assert result.id == "thread-123"
    forwarded = threads.add_thread.await_args.args[0]
    assert (forwarded.title, forwarded.body, forwarded.owner) == ("A thread", "Body", "user-123")


async def test_add_thread_without_body_is_rejected():
    threads = make_repository()
    with pytest.raises(EntityError) as exc:
        await AddThreadUseCase(threads).execute({"title": "A thread", "owner": "user-123"})
    assert exc.value.field == "body"
    threads.add_thread.assert_not_awaited()


def _detail_use_case(thread_row, comment_rows, reply_rows, like_counts):
    threads = make_repository()
    threads.get_thread_by_id.return_value = thread_row
    comments = make_repository()
    comments.get_comments_by_thread_id.return_value = comment_rows
    replies = make_repository()
    replies.get_replies_by_thread_id.return_value = reply_rows
    likes = make_repository()
    likes.get_like_counts_by_thread_id.return_value = like_counts
    return GetThreadDetailUseCase(threads, comments, replies, likes)


THREAD_ROW = {
    "id": "thread-123", "title": "A thread", "body": "Body",
    "date": T0, "username": "dicoding",
}


async def test_get_thread_detail_nests_replies_and_like_counts():
    use_case = _detail_use_case(
        THREAD_ROW,
        [
            {"id": "comment-1", "username": "johndoe", "date": T0, "content": "first", "is_deleted": False},
            {"id": "comment-2", "username": "dicoding", "date": T1, "content": "gone", "is_deleted": True},
        ],
        [
            {"id": "reply-1", "comment_id": "comment-1", "username": "dicoding",
             "date": T1, "content": "deleted reply", "is_deleted": True},
            {"id": "reply-2", "comment_id": "comment-2", "username": "johndoe",
             "date": T1, "content": "still here", "is_deleted": False},
        ],
        {"comment-1": 2},
    )

    detail = await use_case.execute("thread-123")

    first, second = detail.comments
    assert first.like_count == 2
    assert second.like_count == 0
    assert first.replies[0].content == DELETED_REPLY_CONTENT
    assert second.content == DELETED_COMMENT_CONTENT
    assert second.replies[0].content == "still here"


async def test_get_thread_detail_without_comments():
    detail = await _detail_use_case(THREAD_ROW, [], [], {}).execute("thread-123")
    assert detail.to_dict()["comments"] == []
    assert detail.username == "dicoding"


async def test_get_thread_detail_missing_thread():
    threads = make_repository()
    threads.get_thread_by_id.side_effect = NotFoundError("Thread", "thread-x")
    comments = make_repository()
    use_case = GetThreadDetailUseCase(threads, comments, make_repository(), make_repository())

    with pytest.raises(NotFoundError):
        await use_case.execute("thread-x")
    comments.get_comments_by_thread_id.assert_not_awaited()
