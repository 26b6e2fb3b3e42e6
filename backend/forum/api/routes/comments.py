"""Comments — add and soft-delete comments on a thread.

Invariants:
    - The parent thread comes from the path; only "content" is read from the body
"""

from fastapi import APIRouter, Body, Depends, status

from forum.api.dependencies import get_container, get_current_user_id
from forum.container import Container
from forum.core.domain_types import UserId

router = APIRouter(prefix="/threads/{thread_id}/comments", tags=["comments"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_comment(
    thread_id: str,
    body: dict = Body(...),
    user_id: UserId = Depends(get_current_user_id),
    container: Container = Depends(get_container),
):
    added_comment = await container.add_comment.execute(
        {"content": body.get("content"), "thread_id": thread_id, "owner": user_id},
    )
    return {"status": "success", "data": {"addedComment": added_comment.to_dict()}}


@router.delete("/{comment_id}")
async def delete_comment(
    thread_id: str,
    comment_id: str,
    user_id: UserId = Depends(get_current_user_id),
    container: Container = Depends(get_container),
):
    await container.delete_comment.execute(
        {"comment_id": comment_id, "thread_id": thread_id, "owner": user_id},
    )
    return {"status": "success"}
