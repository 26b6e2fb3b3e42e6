"""Delete Comment — soft-deletes a comment. Only its owner may do so.

Invariants:
    - Existence checks (thread, then comment in thread) precede the ownership check
    - Ownership check precedes the write
"""

import logging

from forum.core.entities import DeleteComment
from forum.core.repository_protocols import CommentRepository, ThreadRepository

logger = logging.getLogger(__name__)


class DeleteCommentUseCase:
    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ):
        self._comment_repository = comment_repository
        self._thread_repository = thread_repository

    async def execute(self, payload: dict) -> None:
        command = DeleteComment.parse(payload)
        await self._thread_repository.verify_thread_exists(command.thread_id)
        await self._comment_repository.verify_comment_exists(
            command.comment_id, command.thread_id,
        )
        await self._comment_repository.verify_comment_owner(
            command.comment_id, command.owner,
        )
        await self._comment_repository.delete_comment(command.comment_id)
        logger.info(
            "Comment deleted",
            extra={"user_id": command.owner, "comment_id": command.comment_id},
        )
