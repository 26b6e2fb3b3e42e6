"""Comment Repository — comments with soft delete.

Invariants:
    - delete_comment sets is_deleted, never removes the row
    - get_comments_by_thread_id returns deleted rows too, oldest first
"""

from sqlalchemy import select, update

from forum.core.domain_types import CommentId, IdPrefix, ThreadId, UserId
from forum.core.entities import AddedComment, NewComment
from forum.core.errors import AuthorizationError, ErrorContext, NotFoundError
from forum.infrastructure.repositories.base import SqlRepository
from forum.models import Comment, User


class SqlCommentRepository(SqlRepository):

    async def add_comment(self, new_comment: NewComment) -> AddedComment:
        comment = Comment(
            id=self._new_id(IdPrefix.COMMENT),
            thread_id=new_comment.thread_id,
            owner=new_comment.owner,
            content=new_comment.content,
        )
        async with self.db.session() as session:
            session.add(comment)
            await session.commit()
        return AddedComment.parse({
            "id": comment.id, "content": comment.content, "owner": comment.owner,
        })

    async def verify_comment_exists(
        self, comment_id: CommentId, thread_id: ThreadId,
    ) -> None:
        async with self.db.session() as session:
            result = await session.execute(
                select(Comment.id).where(
                    Comment.id == comment_id, Comment.thread_id == thread_id,
                ),
            )
            found = result.scalar_one_or_none() is not None
        if not found:
            raise NotFoundError("Comment", comment_id)

    async def verify_comment_owner(self, comment_id: CommentId, owner: UserId) -> None:
        async with self.db.session() as session:
            result = await session.execute(
                select(Comment.owner).where(Comment.id == comment_id),
            )
            found = result.one_or_none()
        if found is None:
            raise NotFoundError("Comment", comment_id)
        if found.owner != owner:
            raise AuthorizationError(
                "You are not allowed to access this resource",
                ErrorContext(user_id=owner, resource_id=comment_id),
            )

    async def delete_comment(self, comment_id: CommentId) -> None:
        async with self.db.session() as session:
            result = await session.execute(
                update(Comment)
                .where(Comment.id == comment_id)
                .values(is_deleted=True),
            )
            await session.commit()
        if result.rowcount == 0:
            raise NotFoundError("Comment", comment_id)

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> list[dict]:
        async with self.db.session() as session:
            result = await session.execute(
                select(
                    Comment.id, Comment.content, Comment.is_deleted,
                    Comment.created_at, User.username,
                )
                .join(User, User.id == Comment.owner)
                .where(Comment.thread_id == thread_id)
                .order_by(Comment.created_at.asc(), Comment.id.asc()),
            )
            rows = result.all()
        return [
            {
                "id": row.id,
                "username": row.username,
                "date": row.created_at,
                "content": row.content,
                "is_deleted": row.is_deleted,
            }
            for row in rows
        ]
