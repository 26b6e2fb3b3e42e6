"""Add Reply — replies to a comment of an existing thread."""

import logging

from forum.core.entities import AddedReply, NewReply
from forum.core.repository_protocols import (
    CommentRepository, ReplyRepository, ThreadRepository,
)

logger = logging.getLogger(__name__)


class AddReplyUseCase:
    def __init__(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ):
        self._reply_repository = reply_repository
        self._comment_repository = comment_repository
        self._thread_repository = thread_repository

    async def execute(self, payload: dict) -> AddedReply:
        new_reply = NewReply.parse(payload)
        await self._thread_repository.verify_thread_exists(new_reply.thread_id)
        await self._comment_repository.verify_comment_exists(
            new_reply.comment_id, new_reply.thread_id,
        )
        added = await self._reply_repository.add_reply(new_reply)
        logger.info(
            "Reply added",
            extra={
                "user_id": added.owner,
                "comment_id": new_reply.comment_id,
                "reply_id": added.id,
            },
        )
        return added
