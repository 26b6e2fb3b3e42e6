"""Logout User — revokes a refresh token."""

import logging

from forum.core.entities import LogoutAuth
from forum.core.repository_protocols import AuthenticationRepository

logger = logging.getLogger(__name__)


class LogoutUserUseCase:
    def __init__(self, authentication_repository: AuthenticationRepository):
        self._authentication_repository = authentication_repository

    async def execute(self, payload: dict) -> None:
        logout = LogoutAuth.parse(payload)
        await self._authentication_repository.check_availability_token(
            logout.refresh_token,
        )
        await self._authentication_repository.delete_token(logout.refresh_token)
        logger.info("Refresh token revoked")
