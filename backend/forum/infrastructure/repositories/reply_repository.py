"""Reply Repository — replies with soft delete.

Invariants:
    - delete_reply sets is_deleted, never removes the row
    - get_replies_by_thread_id returns replies of every comment in the thread, oldest first
"""

from sqlalchemy import select, update

from forum.core.domain_types import CommentId, IdPrefix, ReplyId, ThreadId, UserId
from forum.core.entities import AddedReply, NewReply
from forum.core.errors import AuthorizationError, ErrorContext, NotFoundError
from forum.infrastructure.repositories.base import SqlRepository
from forum.models import Comment, Reply, User


class SqlReplyRepository(SqlRepository):

    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        reply = Reply(
            id=self._new_id(IdPrefix.REPLY),
            comment_id=new_reply.comment_id,
            owner=new_reply.owner,
            content=new_reply.content,
        )
        async with self.db.session() as session:
            session.add(reply)
            await session.commit()
        return AddedReply.parse({
            "id": reply.id, "content": reply.content, "owner": reply.owner,
        })

    async def verify_reply_exists(self, reply_id: ReplyId, comment_id: CommentId) -> None:
        async with self.db.session() as session:
            result = await session.execute(
                select(Reply.id).where(
                    Reply.id == reply_id, Reply.comment_id == comment_id,
                ),
            )
            found = result.scalar_one_or_none() is not None
        if not found:
            raise NotFoundError("Reply", reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, owner: UserId) -> None:
        async with self.db.session() as session:
            result = await session.execute(
                select(Reply.owner).where(Reply.id == reply_id),
            )
            found = result.one_or_none()
        if found is None:
            raise NotFoundError("Reply", reply_id)
        if found.owner != owner:
            raise AuthorizationError(
                "You are not allowed to access this resource",
                ErrorContext(user_id=owner, resource_id=reply_id),
            )

    async def delete_reply(self, reply_id: ReplyId) -> None:
        async with self.db.session() as session:
            result = await session.execute(
                update(Reply).where(Reply.id == reply_id).values(is_deleted=True),
            )
            await session.commit()
        if result.rowcount == 0:
            raise NotFoundError("Reply", reply_id)

    async def get_replies_by_thread_id(self, thread_id: ThreadId) -> list[dict]:
        async with self.db.session() as session:
            result = await session.execute(
                select(
                    Reply.id, Reply.comment_id, Reply.content, Reply.is_deleted,
                    Reply.created_at, User.username,
                )
                .join(Comment, Comment.id == Reply.comment_id)
                .join(User, User.id == Reply.owner)
                .where(Comment.thread_id == thread_id)
                .order_by(Reply.created_at.asc(), Reply.id.asc()),
            )
            rows = result.all()
        return [
            {
                "id": row.id,
                "comment_id": row.comment_id,
                "username": row.username,
                "date": row.created_at,
                "content": row.content,
                "is_deleted": row.is_deleted,
            }
            for row in rows
        ]
