"""Users — registration."""

from fastapi import APIRouter, Body, Depends, status

from forum.api.dependencies import get_container
from forum.container import Container

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def register_user(
    body: dict = Body(...), container: Container = Depends(get_container),
):
    added_user = await container.add_user.execute(body)
    return {"status": "success", "data": {"addedUser": added_user.to_dict()}}
