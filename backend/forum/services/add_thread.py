"""Add Thread — creates a thread owned by the authenticated user."""

import logging

from forum.core.entities import AddedThread, NewThread
from forum.core.repository_protocols import ThreadRepository

logger = logging.getLogger(__name__)


class AddThreadUseCase:
    def __init__(self, thread_repository: ThreadRepository):
        self._thread_repository = thread_repository

    async def execute(self, payload: dict) -> AddedThread:
        new_thread = NewThread.parse(payload)
        added = await self._thread_repository.add_thread(new_thread)
        logger.info(
            "Thread created",
            extra={"user_id": added.owner, "thread_id": added.id},
        )
        return added
