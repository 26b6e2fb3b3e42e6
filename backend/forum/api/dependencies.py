"""Route Dependencies — container access and bearer-token authentication.

Invariants:
    - Authenticated routes get the acting user id from the token's id claim
    - Missing or invalid bearer token → AuthenticationError (401)
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from forum.container import Container
from forum.core.domain_types import UserId
from forum.core.errors import AuthenticationError

_bearer = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    """Return the container built in the lifespan."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Container not initialized")
    return container


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    container: Container = Depends(get_container),
) -> UserId:
    if credentials is None:
        raise AuthenticationError("Missing authentication")
    claims = container.token_manager.verify_access_token(credentials.credentials)
    return UserId(claims["id"])
