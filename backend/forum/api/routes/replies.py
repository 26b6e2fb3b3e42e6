"""Replies — add and soft-delete replies to a comment.

Invariants:
    - Parent thread and comment come from the path; only "content" is read from the body
"""

from fastapi import APIRouter, Body, Depends, status

from forum.api.dependencies import get_container, get_current_user_id
from forum.container import Container
from forum.core.domain_types import UserId

router = APIRouter(
    prefix="/threads/{thread_id}/comments/{comment_id}/replies", tags=["replies"],
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_reply(
    thread_id: str,
    comment_id: str,
    body: dict = Body(...),
    user_id: UserId = Depends(get_current_user_id),
    container: Container = Depends(get_container),
):
    added_reply = await container.add_reply.execute({
        "content": body.get("content"),
        "thread_id": thread_id,
        "comment_id": comment_id,
        "owner": user_id,
    })
    return {"status": "success", "data": {"addedReply": added_reply.to_dict()}}


@router.delete("/{reply_id}")
async def delete_reply(
    thread_id: str,
    comment_id: str,
    reply_id: str,
    user_id: UserId = Depends(get_current_user_id),
    container: Container = Depends(get_container),
):
    await container.delete_reply.execute({
        "reply_id": reply_id,
        "comment_id": comment_id,
        "thread_id": thread_id,
        "owner": user_id,
    })
    return {"status": "success"}
