"""Threads — creation (authenticated) and detail view (public)."""

from fastapi import APIRouter, Body, Depends, status

from forum.api.dependencies import get_container, get_current_user_id
from forum.container import Container
from forum.core.domain_types import ThreadId, UserId

router = APIRouter(prefix="/threads", tags=["threads"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_thread(
    body: dict = Body(...),
    user_id: UserId = Depends(get_current_user_id),
    container: Container = Depends(get_container),
):
    added_thread = await container.add_thread.execute(
        {"title": body.get("title"), "body": body.get("body"), "owner": user_id},
    )
    return {"status": "success", "data": {"addedThread": added_thread.to_dict()}}


@router.get("/{thread_id}")
async def get_thread(
    thread_id: str, container: Container = Depends(get_container),
):
    thread = await container.get_thread_detail.execute(ThreadId(thread_id))
    return {"status": "success", "data": {"thread": thread.to_dict()}}
