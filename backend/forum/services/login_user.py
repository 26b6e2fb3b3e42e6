"""Login User — checks credentials and issues an access/refresh token pair.

Invariants:
    - Wrong password raises AuthenticationError before any token is created
    - The refresh token is persisted; it stays valid until logout
"""

import logging

from forum.core.entities import NewAuth, UserLogin
from forum.core.repository_protocols import (
    AuthenticationRepository, AuthenticationTokenManager, PasswordHash, UserRepository,
)

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        authentication_repository: AuthenticationRepository,
        token_manager: AuthenticationTokenManager,
        password_hash: PasswordHash,
    ):
        self._user_repository = user_repository
        self._authentication_repository = authentication_repository
        self._token_manager = token_manager
        self._password_hash = password_hash

    async def execute(self, payload: dict) -> NewAuth:
        login = UserLogin.parse(payload)
        hashed = await self._user_repository.get_password_by_username(login.username)
        await self._password_hash.compare_password(login.password, hashed)

        user_id = await self._user_repository.get_id_by_username(login.username)
        claims = {"username": login.username, "id": user_id}
        new_auth = NewAuth.parse({
            "access_token": self._token_manager.create_access_token(claims),
            "refresh_token": self._token_manager.create_refresh_token(claims),
        })
        await self._authentication_repository.add_token(new_auth.refresh_token)
        logger.info("User logged in", extra={"user_id": user_id})
        return new_auth
