"""Thread Repository — thread creation and lookup."""

from sqlalchemy import select

from forum.core.domain_types import IdPrefix, ThreadId
from forum.core.entities import AddedThread, NewThread
from forum.core.errors import NotFoundError
from forum.infrastructure.repositories.base import SqlRepository
from forum.models import Thread, User


class SqlThreadRepository(SqlRepository):

    async def add_thread(self, new_thread: NewThread) -> AddedThread:
        thread = Thread(
            id=self._new_id(IdPrefix.THREAD),
            title=new_thread.title,
            body=new_thread.body,
            owner=new_thread.owner,
        )
        async with self.db.session() as session:
            session.add(thread)
            await session.commit()
        return AddedThread.parse({
            "id": thread.id, "title": thread.title, "owner": thread.owner,
        })

    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        async with self.db.session() as session:
            result = await session.execute(
                select(Thread.id).where(Thread.id == thread_id),
            )
            found = result.scalar_one_or_none() is not None
        if not found:
            raise NotFoundError("Thread", thread_id)

    async def get_thread_by_id(self, thread_id: ThreadId) -> dict:
        """Return {id, title, body, date, username} or raise NotFoundError."""
        async with self.db.session() as session:
            result = await session.execute(
                select(
                    Thread.id, Thread.title, Thread.body,
                    Thread.created_at, User.username,
                )
                .join(User, User.id == Thread.owner)
                .where(Thread.id == thread_id),
            )
            row = result.one_or_none()
        if row is None:
            raise NotFoundError("Thread", thread_id)
        return {
            "id": row.id,
            "title": row.title,
            "body": row.body,
            "date": row.created_at,
            "username": row.username,
        }
