"""Authentication Entities — token pair issued on login, refresh and logout payloads."""

from forum.core.entities.base import Entity, RequiredStr


class NewAuth(Entity):
    """Token pair returned by login."""
    entity_code = "NEW_AUTH"

    access_token: RequiredStr
    refresh_token: RequiredStr


class RefreshAuth(Entity):
    entity_code = "REFRESH_AUTHENTICATION"

    refresh_token: RequiredStr


class LogoutAuth(Entity):
    entity_code = "DELETE_AUTHENTICATION"

    refresh_token: RequiredStr
