"""Authentications — login, access token refresh, logout.

Invariants:
    - Login returns 201 with both tokens; refresh returns only a new access token
    - Refresh and logout require a refresh token that is still stored
"""

from fastapi import APIRouter, Body, Depends, status

from forum.api.dependencies import get_container
from forum.container import Container

router = APIRouter(prefix="/authentications", tags=["authentications"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def login(
    body: dict = Body(...), container: Container = Depends(get_container),
):
    new_auth = await container.login_user.execute(body)
    return {"status": "success", "data": new_auth.to_dict()}


@router.put("")
async def refresh_access_token(
    body: dict = Body(...), container: Container = Depends(get_container),
):
    access_token = await container.refresh_authentication.execute(body)
    return {"status": "success", "data": {"accessToken": access_token}}


@router.delete("")
async def logout(
    body: dict = Body(...), container: Container = Depends(get_container),
):
    await container.logout_user.execute(body)
    return {"status": "success"}
