"""Comment Entities — creation/deletion payloads and the detail view.

Invariants:
    - DetailComment of a soft-deleted row shows DELETED_COMMENT_CONTENT, never the original text
    - is_deleted is consumed on input and never serialized
"""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from forum.core.domain_types import DELETED_COMMENT_CONTENT
from forum.core.entities.base import Entity, RequiredStr
from forum.core.entities.replies import DetailReply


class NewComment(Entity):
    entity_code = "NEW_COMMENT"

    content: RequiredStr
    thread_id: RequiredStr
    owner: RequiredStr


class AddedComment(Entity):
    entity_code = "ADDED_COMMENT"

    id: RequiredStr
    content: RequiredStr
    owner: RequiredStr


class DeleteComment(Entity):
    entity_code = "DELETE_COMMENT"

    comment_id: RequiredStr
    thread_id: RequiredStr
    owner: RequiredStr


class DetailComment(Entity):
    """Comment as shown inside a thread detail."""
    entity_code = "DETAIL_COMMENT"

    id: RequiredStr
    username: RequiredStr
    date: datetime
    content: RequiredStr
    is_deleted: bool = Field(default=False, exclude=True)
    like_count: int = 0
    replies: list[DetailReply] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def hide_deleted_content(cls, data: Any) -> Any:
        if isinstance(data, dict) and (data.get("is_deleted") or data.get("isDeleted")):
            return {**data, "content": DELETED_COMMENT_CONTENT}
        return data
