"""Refresh Authentication — exchanges a stored refresh token for a new access token."""

from forum.core.entities import RefreshAuth
from forum.core.repository_protocols import (
    AuthenticationRepository, AuthenticationTokenManager,
)


class RefreshAuthenticationUseCase:
    def __init__(
        self,
        authentication_repository: AuthenticationRepository,
        token_manager: AuthenticationTokenManager,
    ):
        self._authentication_repository = authentication_repository
        self._token_manager = token_manager

    async def execute(self, payload: dict) -> str:
        refresh = RefreshAuth.parse(payload)
        self._token_manager.verify_refresh_token(refresh.refresh_token)
        await self._authentication_repository.check_availability_token(
            refresh.refresh_token,
        )
        claims = self._token_manager.decode_payload(refresh.refresh_token)
        return self._token_manager.create_access_token(
            {"username": claims["username"], "id": claims["id"]},
        )
