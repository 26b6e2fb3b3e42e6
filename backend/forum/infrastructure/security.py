"""Security Adapters — bcrypt password hashing, JWT tokens, and id generation.

Invariants:
    - Plain passwords never leave BcryptPasswordHash
    - Access tokens expire after access_token_age seconds; refresh tokens do not
      expire but are only honored while stored (see AuthenticationRepository)
    - Access and refresh tokens are signed with different keys

Design Decisions:
    - bcrypt runs in a worker thread: hashing is CPU-bound and would stall the event loop
    - python-jose for JWT encode/decode (HS256 by default)
"""

import asyncio
import secrets
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from forum.core.errors import AuthenticationError, DomainError

ID_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-"
ID_LENGTH = 16


def generate_id() -> str:
    """Random URL-safe id fragment, prefixed by repositories (user-, thread-...)."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


class BcryptPasswordHash:
    """PasswordHash implementation backed by bcrypt."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        hashed = await asyncio.to_thread(
            bcrypt.hashpw, password.encode("utf-8"), bcrypt.gensalt(self._rounds),
        )
        return hashed.decode("utf-8")

    async def compare_password(self, password: str, hashed_password: str) -> None:
        matched = await asyncio.to_thread(
            bcrypt.checkpw,
            password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
        if not matched:
            raise AuthenticationError("The credentials you entered are wrong")


class JwtTokenManager:
    """AuthenticationTokenManager implementation backed by python-jose."""

    def __init__(
        self,
        access_token_key: str,
        refresh_token_key: str,
        access_token_age: int = 3000,
        algorithm: str = "HS256",
    ):
        self._access_token_key = access_token_key
        self._refresh_token_key = refresh_token_key
        self._access_token_age = access_token_age
        self._algorithm = algorithm

    def create_access_token(self, payload: dict) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            **payload,
            "iat": now,
            "jti": secrets.token_hex(8),
            "exp": now + timedelta(seconds=self._access_token_age),
        }
        return jwt.encode(claims, self._access_token_key, algorithm=self._algorithm)

    def create_refresh_token(self, payload: dict) -> str:
        claims = {
            **payload,
            "iat": datetime.now(timezone.utc),
            "jti": secrets.token_hex(8),
        }
        return jwt.encode(claims, self._refresh_token_key, algorithm=self._algorithm)

    def verify_refresh_token(self, token: str) -> None:
        try:
            jwt.decode(token, self._refresh_token_key, algorithms=[self._algorithm])
        except JWTError:
            raise DomainError("refresh token is not valid", "INVALID_REFRESH_TOKEN")

    def verify_access_token(self, token: str) -> dict:
        """Decode and verify an access token. Raises AuthenticationError if invalid or expired."""
        try:
            claims = jwt.decode(
                token, self._access_token_key, algorithms=[self._algorithm],
            )
        except JWTError:
            raise AuthenticationError("Invalid or expired access token")
        if not claims.get("id"):
            raise AuthenticationError("Invalid or expired access token")
        return claims

    def decode_payload(self, token: str) -> dict:
        """Read claims without verifying the signature (token already verified)."""
        return jwt.get_unverified_claims(token)
