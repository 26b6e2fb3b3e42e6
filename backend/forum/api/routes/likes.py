"""Likes — toggle the caller's like on a comment."""

from fastapi import APIRouter, Depends

from forum.api.dependencies import get_container, get_current_user_id
from forum.container import Container
from forum.core.domain_types import UserId

router = APIRouter(
    prefix="/threads/{thread_id}/comments/{comment_id}/likes", tags=["likes"],
)


@router.put("")
async def toggle_comment_like(
    thread_id: str,
    comment_id: str,
    user_id: UserId = Depends(get_current_user_id),
    container: Container = Depends(get_container),
):
    await container.like_unlike_comment.execute(
        {"thread_id": thread_id, "comment_id": comment_id, "owner": user_id},
    )
    return {"status": "success"}
