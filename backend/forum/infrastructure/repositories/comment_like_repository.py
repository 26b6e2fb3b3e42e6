"""Comment Like Repository — (comment, owner) like rows.

Invariants:
    - add_like on an existing pair violates uq_comment_likes_comment_owner → ConflictError
"""

from sqlalchemy import delete, func, select

from forum.core.domain_types import CommentId, IdPrefix, ThreadId, UserId
from forum.infrastructure.repositories.base import SqlRepository
from forum.models import Comment, CommentLike


class SqlCommentLikeRepository(SqlRepository):

    async def add_like(self, comment_id: CommentId, owner: UserId) -> None:
        async with self.db.session() as session:
            session.add(CommentLike(
                id=self._new_id(IdPrefix.LIKE), comment_id=comment_id, owner=owner,
            ))
            await session.commit()

    async def delete_like(self, comment_id: CommentId, owner: UserId) -> None:
        async with self.db.session() as session:
            await session.execute(
                delete(CommentLike).where(
                    CommentLike.comment_id == comment_id,
                    CommentLike.owner == owner,
                ),
            )
            await session.commit()

    async def has_user_liked_comment(self, comment_id: CommentId, owner: UserId) -> bool:
        async with self.db.session() as session:
            result = await session.execute(
                select(func.count()).select_from(CommentLike).where(
                    CommentLike.comment_id == comment_id,
                    CommentLike.owner == owner,
                ),
            )
            return int(result.scalar_one() or 0) > 0

    async def get_like_counts_by_thread_id(self, thread_id: ThreadId) -> dict[str, int]:
        """Map comment id → like count. Comments without likes are absent."""
        async with self.db.session() as session:
            result = await session.execute(
                select(CommentLike.comment_id, func.count(CommentLike.id))
                .join(Comment, Comment.id == CommentLike.comment_id)
                .where(Comment.thread_id == thread_id)
                .group_by(CommentLike.comment_id),
            )
            return {comment_id: int(count) for comment_id, count in result.all()}
