"""Add Comment — comments on an existing thread."""

import logging

from forum.core.entities import AddedComment, NewComment
from forum.core.repository_protocols import CommentRepository, ThreadRepository

logger = logging.getLogger(__name__)


class AddCommentUseCase:
    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ):
        self._comment_repository = comment_repository
        self._thread_repository = thread_repository

    async def execute(self, payload: dict) -> AddedComment:
        new_comment = NewComment.parse(payload)
        await self._thread_repository.verify_thread_exists(new_comment.thread_id)
        added = await self._comment_repository.add_comment(new_comment)
        logger.info(
            "Comment added",
            extra={
                "user_id": added.owner,
                "thread_id": new_comment.thread_id,
                "comment_id": added.id,
            },
        )
        return added
