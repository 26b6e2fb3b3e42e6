"""User Repository — accounts and credential lookups."""

import logging

from sqlalchemy import select

from forum.core.domain_types import IdPrefix, UserId
from forum.core.entities import RegisterUser, RegisteredUser
from forum.core.errors import DomainError
from forum.infrastructure.repositories.base import SqlRepository
from forum.models import User

logger = logging.getLogger(__name__)


class SqlUserRepository(SqlRepository):

    async def add_user(self, register_user: RegisterUser) -> RegisteredUser:
        """Insert a user. register_user.password must already be hashed."""
        user = User(
            id=self._new_id(IdPrefix.USER),
            username=register_user.username,
            password=register_user.password,
            fullname=register_user.fullname,
        )
        async with self.db.session() as session:
            session.add(user)
            await session.commit()
        return RegisteredUser.parse({
            "id": user.id, "username": user.username, "fullname": user.fullname,
        })

    async def verify_available_username(self, username: str) -> None:
        async with self.db.session() as session:
            result = await session.execute(
                select(User.id).where(User.username == username),
            )
            taken = result.scalar_one_or_none() is not None
        if taken:
            raise DomainError("username is not available", "USERNAME_NOT_AVAILABLE")

    async def get_password_by_username(self, username: str) -> str:
        async with self.db.session() as session:
            result = await session.execute(
                select(User.password).where(User.username == username),
            )
            password = result.scalar_one_or_none()
        if password is None:
            raise DomainError("username not found", "USERNAME_NOT_FOUND")
        return password

    async def get_id_by_username(self, username: str) -> UserId:
        async with self.db.session() as session:
            result = await session.execute(
                select(User.id).where(User.username == username),
            )
            user_id = result.scalar_one_or_none()
        if user_id is None:
            raise DomainError("username not found", "USERNAME_NOT_FOUND")
        return UserId(user_id)
