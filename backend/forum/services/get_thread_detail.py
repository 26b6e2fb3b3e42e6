"""Get Thread Detail — assembles a thread with its comments, replies, and like counts.

Invariants:
    - Read-only: no repository writes
    - Soft-deleted comments/replies stay in place with placeholder content
    - Comments and replies keep the order the repositories return (oldest first)
"""

from collections import defaultdict

from forum.core.domain_types import ThreadId
from forum.core.entities import DetailComment, DetailReply, DetailThread
from forum.core.repository_protocols import (
    CommentLikeRepository, CommentRepository, ReplyRepository, ThreadRepository,
)


class GetThreadDetailUseCase:
    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        comment_like_repository: CommentLikeRepository,
    ):
        self._thread_repository = thread_repository
        self._comment_repository = comment_repository
        self._reply_repository = reply_repository
        self._comment_like_repository = comment_like_repository

    async def execute(self, thread_id: ThreadId) -> DetailThread:
        thread = await self._thread_repository.get_thread_by_id(thread_id)
        comments = await self._comment_repository.get_comments_by_thread_id(thread_id)
        replies = await self._reply_repository.get_replies_by_thread_id(thread_id)
        like_counts = await self._comment_like_repository.get_like_counts_by_thread_id(
            thread_id,
        )

        replies_by_comment: dict[str, list[DetailReply]] = defaultdict(list)
        for reply in replies:
            replies_by_comment[reply["comment_id"]].append(DetailReply.parse(reply))

        detail_comments = [
            DetailComment.parse({
                **comment,
                "like_count": like_counts.get(comment["id"], 0),
                "replies": replies_by_comment.get(comment["id"], []),
            })
            for comment in comments
        ]
        return DetailThread.parse({**thread, "comments": detail_comments})
