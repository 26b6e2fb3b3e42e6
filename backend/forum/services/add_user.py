"""Add User — registers a new account after checking the username is free."""

import logging

from forum.core.entities import RegisterUser, RegisteredUser
from forum.core.repository_protocols import PasswordHash, UserRepository

logger = logging.getLogger(__name__)


class AddUserUseCase:
    def __init__(self, user_repository: UserRepository, password_hash: PasswordHash):
        self._user_repository = user_repository
        self._password_hash = password_hash

    async def execute(self, payload: dict) -> RegisteredUser:
        register_user = RegisterUser.parse(payload)
        await self._user_repository.verify_available_username(register_user.username)
        hashed = await self._password_hash.hash(register_user.password)
        registered = await self._user_repository.add_user(
            register_user.model_copy(update={"password": hashed}),
        )
        logger.info("User registered", extra={"user_id": registered.id})
        return registered
