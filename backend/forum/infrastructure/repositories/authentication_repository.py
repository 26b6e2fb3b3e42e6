"""Authentication Repository — stored refresh tokens."""

from sqlalchemy import delete, select

from forum.core.errors import DomainError
from forum.infrastructure.database import DatabaseSessionManager
from forum.models import Authentication


class SqlAuthenticationRepository:
    """Token rows carry no generated id, so this does not extend SqlRepository."""

    def __init__(self, db: DatabaseSessionManager):
        self.db = db

    async def add_token(self, token: str) -> None:
        async with self.db.session() as session:
            session.add(Authentication(token=token))
            await session.commit()

    async def check_availability_token(self, token: str) -> None:
        async with self.db.session() as session:
            result = await session.execute(
                select(Authentication.token).where(Authentication.token == token),
            )
            found = result.scalar_one_or_none() is not None
        if not found:
            raise DomainError(
                "refresh token not found in database", "REFRESH_TOKEN_NOT_FOUND",
            )

    async def delete_token(self, token: str) -> None:
        async with self.db.session() as session:
            await session.execute(
                delete(Authentication).where(Authentication.token == token),
            )
            await session.commit()
