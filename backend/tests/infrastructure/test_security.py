"""Security Adapters — bcrypt hashing, JWT issuing/verification, id generation.

Tests cover:
    - Hashes differ from the plain password and verify against it
    - Wrong password raises AuthenticationError
    - Access tokens carry the payload plus an expiry; expired or foreign tokens are rejected
    - Refresh tokens signed with the access key are rejected as DomainError
    - Two tokens issued in the same second are distinct
"""

import pytest

from forum.core.errors import AuthenticationError, DomainError
from forum.infrastructure.security import (
    ID_ALPHABET, ID_LENGTH, BcryptPasswordHash, JwtTokenManager, generate_id,
)

PAYLOAD = {"username": "dicoding", "id": "user-123"}


@pytest.fixture
def token_manager():
    return JwtTokenManager(
        access_token_key="access-secret", refresh_token_key="refresh-secret",
    )


# ─── Password hashing ────────────────────────────────────────────

async def test_hash_then_compare_succeeds():
    password_hash = BcryptPasswordHash(rounds=4)
    hashed = await password_hash.hash("plain_password")

    assert hashed != "plain_password"
    await password_hash.compare_password("plain_password", hashed)


async def test_compare_wrong_password_raises():
    password_hash = BcryptPasswordHash(rounds=4)
    hashed = await password_hash.hash("plain_password")

    with pytest.raises(AuthenticationError) as exc:
        await password_hash.compare_password("other_password", hashed)
    assert exc.value.http_status == 401


# ─── Tokens ──────────────────────────────────────────────────────

def test_access_token_round_trip(token_manager):
    token = token_manager.create_access_token(PAYLOAD)
    claims = token_manager.verify_access_token(token)

    assert claims["username"] == "dicoding"
    assert claims["id"] == "user-123"
    assert "exp" in claims


def test_expired_access_token_is_rejected():
    manager = JwtTokenManager("access-secret", "refresh-secret", access_token_age=-10)
    token = manager.create_access_token(PAYLOAD)

    with pytest.raises(AuthenticationError):
        manager.verify_access_token(token)


def test_refresh_token_is_not_an_access_token(token_manager):
    refresh = token_manager.create_refresh_token(PAYLOAD)
    with pytest.raises(AuthenticationError):
        token_manager.verify_access_token(refresh)


def test_access_token_without_id_is_rejected(token_manager):
    token = token_manager.create_access_token({"username": "dicoding"})
    with pytest.raises(AuthenticationError):
        token_manager.verify_access_token(token)


def test_verify_refresh_token_accepts_own_tokens(token_manager):
    token_manager.verify_refresh_token(token_manager.create_refresh_token(PAYLOAD))


def test_verify_refresh_token_rejects_access_token(token_manager):
    access = token_manager.create_access_token(PAYLOAD)
    with pytest.raises(DomainError) as exc:
        token_manager.verify_refresh_token(access)
    assert exc.value.code == "INVALID_REFRESH_TOKEN"
    assert exc.value.http_status == 400


def test_decode_payload_reads_claims(token_manager):
    refresh = token_manager.create_refresh_token(PAYLOAD)
    assert token_manager.decode_payload(refresh)["id"] == "user-123"


def test_tokens_issued_together_are_distinct(token_manager):
    assert token_manager.create_refresh_token(PAYLOAD) != token_manager.create_refresh_token(PAYLOAD)


# ─── Ids ─────────────────────────────────────────────────────────

def test_generate_id_shape():
    ids = {generate_id() for _ in range(50)}
    assert len(ids) == 50
    for value in ids:
        assert len(value) == ID_LENGTH
        assert set(value) <= set(ID_ALPHABET)
