"""User Entities — registration payload, registered user view, login payload.

Invariants:
    - username is at most 50 characters and only contains letters, digits, underscore
    - password is at most PASSWORD_MAX_BYTES bytes once UTF-8 encoded, on register and login
    - RegisteredUser never carries the password
"""

import re

from pydantic import field_validator
from pydantic_core import PydanticCustomError

from forum.core.domain_types import (
    PASSWORD_MAX_BYTES, USERNAME_MAX_LENGTH, USERNAME_PATTERN,
)
from forum.core.entities.base import Entity, RequiredStr
from forum.core.errors import EntityErrorKind

_USERNAME_RE = re.compile(USERNAME_PATTERN)


def _check_password_length(v: str) -> str:
    if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise PydanticCustomError(
            EntityErrorKind.PASSWORD_LIMIT_CHAR.value,
            "password exceeds {limit} bytes",
            {"limit": PASSWORD_MAX_BYTES},
        )
    return v


class RegisterUser(Entity):
    """Registration payload."""
    entity_code = "REGISTER_USER"

    username: RequiredStr
    password: RequiredStr
    fullname: RequiredStr

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        if len(v) > USERNAME_MAX_LENGTH:
            raise PydanticCustomError(
                EntityErrorKind.USERNAME_LIMIT_CHAR.value,
                "username exceeds {limit} characters",
                {"limit": USERNAME_MAX_LENGTH},
            )
        if not _USERNAME_RE.match(v):
            raise PydanticCustomError(
                EntityErrorKind.USERNAME_CONTAIN_RESTRICTED_CHARACTER.value,
                "username contains restricted characters",
            )
        return v

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return _check_password_length(v)


class RegisteredUser(Entity):
    """Public view of a stored user."""
    entity_code = "REGISTERED_USER"

    id: RequiredStr
    username: RequiredStr
    fullname: RequiredStr


class UserLogin(Entity):
    """Login payload. A password too long to register can never match."""
    entity_code = "USER_LOGIN"

    username: RequiredStr
    password: RequiredStr

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return _check_password_length(v)
