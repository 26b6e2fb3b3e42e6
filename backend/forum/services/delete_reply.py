"""Delete Reply — soft-deletes a reply. Only its owner may do so."""

import logging

from forum.core.entities import DeleteReply
from forum.core.repository_protocols import (
    CommentRepository, ReplyRepository, ThreadRepository,
)

logger = logging.getLogger(__name__)


class DeleteReplyUseCase:
    def __init__(
        self,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ):
        self._reply_repository = reply_repository
        self._comment_repository = comment_repository
        self._thread_repository = thread_repository

    async def execute(self, payload: dict) -> None:
        command = DeleteReply.parse(payload)
        await self._thread_repository.verify_thread_exists(command.thread_id)
        await self._comment_repository.verify_comment_exists(
            command.comment_id, command.thread_id,
        )
        await self._reply_repository.verify_reply_exists(
            command.reply_id, command.comment_id,
        )
        await self._reply_repository.verify_reply_owner(command.reply_id, command.owner)
        await self._reply_repository.delete_reply(command.reply_id)
        logger.info(
            "Reply deleted",
            extra={"user_id": command.owner, "reply_id": command.reply_id},
        )
