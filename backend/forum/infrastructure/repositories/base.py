"""Base Repository — shared wiring for all SQLAlchemy repositories.

Invariants:
    - Each public repository method opens its own session and commits before returning
    - Statements are built with SQLAlchemy constructs only (always parameterized)
"""

from forum.core.domain_types import IdPrefix
from forum.core.repository_protocols import IdGenerator
from forum.infrastructure.database import DatabaseSessionManager


class SqlRepository:
    """
    Base for repositories backed by a DatabaseSessionManager.

    Usage:
        class SqlThreadRepository(SqlRepository):
            async def add_thread(self, new_thread):
                async with self.db.session() as session:
                    ...
    """

    def __init__(self, db: DatabaseSessionManager, id_generator: IdGenerator):
        self.db = db
        self._id_generator = id_generator

    def _new_id(self, prefix: IdPrefix) -> str:
        return f"{prefix.value}-{self._id_generator()}"
