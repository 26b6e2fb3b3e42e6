"""Entity Error Translation — turns entity error codes into client-facing ValidationErrors.

Invariants:
    - Every EntityError becomes a ValidationError (400) naming the offending field
    - Codes without a dedicated message fall back to a generic per-kind message
"""

from forum.core.errors import EntityError, EntityErrorKind, ValidationError

ENTITY_ERROR_MESSAGES: dict[str, str] = {
    "REGISTER_USER.NOT_CONTAIN_NEEDED_PROPERTY":
        "cannot create a new user because the required property is missing",
    "REGISTER_USER.NOT_MEET_DATA_TYPE_SPECIFICATION":
        "cannot create a new user because the data type does not match",
    "REGISTER_USER.USERNAME_LIMIT_CHAR":
        "cannot create a new user because the username exceeds the character limit",
    "REGISTER_USER.USERNAME_CONTAIN_RESTRICTED_CHARACTER":
        "cannot create a new user because the username contains restricted characters",
    "REGISTER_USER.PASSWORD_LIMIT_CHAR":
        "cannot create a new user because the password exceeds the length limit",
    "USER_LOGIN.NOT_CONTAIN_NEEDED_PROPERTY":
        "must send username and password",
    "USER_LOGIN.NOT_MEET_DATA_TYPE_SPECIFICATION":
        "username and password must be strings",
    "USER_LOGIN.PASSWORD_LIMIT_CHAR":
        "the password exceeds the length limit",
    "REFRESH_AUTHENTICATION.NOT_CONTAIN_NEEDED_PROPERTY":
        "must send refresh token",
    "REFRESH_AUTHENTICATION.NOT_MEET_DATA_TYPE_SPECIFICATION":
        "refresh token must be a string",
    "DELETE_AUTHENTICATION.NOT_CONTAIN_NEEDED_PROPERTY":
        "must send refresh token",
    "DELETE_AUTHENTICATION.NOT_MEET_DATA_TYPE_SPECIFICATION":
        "refresh token must be a string",
    "NEW_THREAD.NOT_CONTAIN_NEEDED_PROPERTY":
        "cannot create a new thread because the required property is missing",
    "NEW_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION":
        "cannot create a new thread because the data type does not match",
    "NEW_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY":
        "cannot create a new comment because the required property is missing",
    "NEW_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION":
        "cannot create a new comment because the data type does not match",
    "NEW_REPLY.NOT_CONTAIN_NEEDED_PROPERTY":
        "cannot create a new reply because the required property is missing",
    "NEW_REPLY.NOT_MEET_DATA_TYPE_SPECIFICATION":
        "cannot create a new reply because the data type does not match",
}

_FALLBACK_MESSAGES = {
    EntityErrorKind.NOT_CONTAIN_NEEDED_PROPERTY: "required property is missing",
    EntityErrorKind.NOT_MEET_DATA_TYPE_SPECIFICATION: "data type does not match",
    EntityErrorKind.USERNAME_LIMIT_CHAR: "username exceeds the character limit",
    EntityErrorKind.USERNAME_CONTAIN_RESTRICTED_CHARACTER:
        "username contains restricted characters",
    EntityErrorKind.PASSWORD_LIMIT_CHAR: "password exceeds the length limit",
}


def translate_entity_error(exc: EntityError) -> ValidationError:
    """Map an EntityError to the ValidationError sent to the client."""
    message = ENTITY_ERROR_MESSAGES.get(exc.code, _FALLBACK_MESSAGES[exc.kind])
    return ValidationError(f"{message}: {exc.field}", field=exc.field)
