"""User & Authentication Use Cases — registration, login, refresh, logout.

Tests cover:
    - AddUser checks availability before hashing and stores the hash, not the password
    - AddUser propagates the "username not available" DomainError
    - Login compares the password before issuing tokens and persists the refresh token
    - Refresh verifies the token signature, then its presence, then re-issues
    - Logout checks presence before deleting
"""

import pytest
from unittest.mock import AsyncMock, call

from forum.core.entities import RegisteredUser
from forum.core.errors import AuthenticationError, DomainError, EntityError
from forum.services.add_user import AddUserUseCase
from forum.services.login_user import LoginUserUseCase
from forum.services.logout_user import LogoutUserUseCase
from forum.services.refresh_authentication import RefreshAuthenticationUseCase

from tests.services.fakes import make_repository, make_token_manager

REGISTER_PAYLOAD = {"username": "dicoding", "password": "secret", "fullname": "Dicoding Indonesia"}


# ─── AddUser ─────────────────────────────────────────────────────

async def test_add_user_stores_hashed_password_and_returns_registered_user():
    users = make_repository()
    users.add_user.return_value = RegisteredUser.parse(
        {"id": "user-123", "username": "dicoding", "fullname": "Dicoding Indonesia"},
    )
    password_hash = AsyncMock()
    password_hash.hash.return_value = "encrypted_password"

    result = await AddUserUseCase(users, password_hash).execute(REGISTER_PAYLOAD)

    assert result.to_dict() == {
        "id": "user-123", "username": "dicoding", "fullname": "Dicoding Indonesia",
    }
    users.verify_available_username.assert_awaited_once_with("dicoding")
    password_hash.hash.assert_awaited_once_with("secret")
    stored = users.add_user.await_args.args[0]
    assert stored.password == "encrypted_password"
    assert stored.username == "dicoding"


async def test_add_user_rejects_taken_username():
    users = make_repository()
    users.verify_available_username.side_effect = DomainError(
        "username is not available", "USERNAME_NOT_AVAILABLE",
    )
    password_hash = AsyncMock()

    with pytest.raises(DomainError) as exc:
        await AddUserUseCase(users, password_hash).execute(REGISTER_PAYLOAD)

    assert exc.value.code == "USERNAME_NOT_AVAILABLE"
    password_hash.hash.assert_not_awaited()
    users.add_user.assert_not_awaited()


async def test_add_user_invalid_payload_touches_no_repository():
    users = make_repository()
    with pytest.raises(EntityError):
        await AddUserUseCase(users, AsyncMock()).execute({"username": "dicoding"})
    users.verify_available_username.assert_not_awaited()


# ─── LoginUser ───────────────────────────────────────────────────

def _login_use_case(users, authentications, token_manager, password_hash):
    return LoginUserUseCase(users, authentications, token_manager, password_hash)


async def test_login_issues_and_persists_tokens():
    users = make_repository()
    users.get_password_by_username.return_value = "encrypted_password"
    users.get_id_by_username.return_value = "user-123"
    authentications = make_repository()
    token_manager = make_token_manager()
    password_hash = AsyncMock()

    result = await _login_use_case(
        users, authentications, token_manager, password_hash,
    ).execute({"username": "dicoding", "password": "secret"})

    assert result.access_token == "access-token"
    assert result.refresh_token == "refresh-token"
    password_hash.compare_password.assert_awaited_once_with("secret", "encrypted_password")
    token_manager.create_access_token.assert_called_once_with(
        {"username": "dicoding", "id": "user-123"},
    )
    authentications.add_token.assert_awaited_once_with("refresh-token")


async def test_login_wrong_password_issues_no_token():
    users = make_repository()
    users.get_password_by_username.return_value = "encrypted_password"
    authentications = make_repository()
    token_manager = make_token_manager()
    password_hash = AsyncMock()
    password_hash.compare_password.side_effect = AuthenticationError("wrong")

    with pytest.raises(AuthenticationError):
        await _login_use_case(
            users, authentications, token_manager, password_hash,
        ).execute({"username": "dicoding", "password": "nope"})

    token_manager.create_access_token.assert_not_called()
    authentications.add_token.assert_not_awaited()


# ─── RefreshAuthentication ───────────────────────────────────────

async def test_refresh_returns_new_access_token():
    authentications = make_repository()
    token_manager = make_token_manager()
    token_manager.create_access_token.return_value = "new-access-token"

    result = await RefreshAuthenticationUseCase(
        authentications, token_manager,
    ).execute({"refreshToken": "refresh-token"})

    assert result == "new-access-token"
    token_manager.verify_refresh_token.assert_called_once_with("refresh-token")
    authentications.check_availability_token.assert_awaited_once_with("refresh-token")
    token_manager.create_access_token.assert_called_once_with(
        {"username": "dicoding", "id": "user-123"},
    )


async def test_refresh_invalid_signature_skips_lookup():
    authentications = make_repository()
    token_manager = make_token_manager()
    token_manager.verify_refresh_token.side_effect = DomainError(
        "refresh token is not valid", "INVALID_REFRESH_TOKEN",
    )

    with pytest.raises(DomainError):
        await RefreshAuthenticationUseCase(
            authentications, token_manager,
        ).execute({"refreshToken": "forged"})

    authentications.check_availability_token.assert_not_awaited()


async def test_refresh_requires_refresh_token():
    with pytest.raises(EntityError) as exc:
        await RefreshAuthenticationUseCase(
            make_repository(), make_token_manager(),
        ).execute({})
    assert exc.value.code == "REFRESH_AUTHENTICATION.NOT_CONTAIN_NEEDED_PROPERTY"


# ─── LogoutUser ──────────────────────────────────────────────────

async def test_logout_checks_then_deletes_token():
    authentications = make_repository()

    await LogoutUserUseCase(authentications).execute({"refreshToken": "refresh-token"})

    assert authentications.mock_calls == [
        call.check_availability_token("refresh-token"),
        call.delete_token("refresh-token"),
    ]


async def test_logout_unknown_token_deletes_nothing():
    authentications = make_repository()
    authentications.check_availability_token.side_effect = DomainError(
        "refresh token not found in database", "REFRESH_TOKEN_NOT_FOUND",
    )

    with pytest.raises(DomainError):
        await LogoutUserUseCase(authentications).execute({"refreshToken": "gone"})

    authentications.delete_token.assert_not_awaited()
