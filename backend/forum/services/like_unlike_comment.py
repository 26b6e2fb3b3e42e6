"""Like/Unlike Comment — toggles the (user, comment) like row.

Invariants:
    - Calling twice restores the original state
    - Concurrent toggles are arbitrated by the (comment_id, owner) unique constraint
"""

import logging

from forum.core.entities import CommentLike
from forum.core.repository_protocols import (
    CommentLikeRepository, CommentRepository, ThreadRepository,
)

logger = logging.getLogger(__name__)


class LikeUnlikeCommentUseCase:
    def __init__(
        self,
        comment_like_repository: CommentLikeRepository,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ):
        self._comment_like_repository = comment_like_repository
        self._comment_repository = comment_repository
        self._thread_repository = thread_repository

    async def execute(self, payload: dict) -> bool:
        """Toggle the like. Returns True if the comment is liked afterwards."""
        like = CommentLike.parse(payload)
        await self._thread_repository.verify_thread_exists(like.thread_id)
        await self._comment_repository.verify_comment_exists(
            like.comment_id, like.thread_id,
        )
        liked = await self._comment_like_repository.has_user_liked_comment(
            like.comment_id, like.owner,
        )
        if liked:
            await self._comment_like_repository.delete_like(like.comment_id, like.owner)
        else:
            await self._comment_like_repository.add_like(like.comment_id, like.owner)
        logger.info(
            "Comment like toggled",
            extra={"user_id": like.owner, "comment_id": like.comment_id},
        )
        return not liked
