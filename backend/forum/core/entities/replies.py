"""Reply Entities — same lifecycle as comments, one level deeper.

Invariants:
    - DetailReply of a soft-deleted row shows DELETED_REPLY_CONTENT
"""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from forum.core.domain_types import DELETED_REPLY_CONTENT
from forum.core.entities.base import Entity, RequiredStr


class NewReply(Entity):
    entity_code = "NEW_REPLY"

    content: RequiredStr
    thread_id: RequiredStr
    comment_id: RequiredStr
    owner: RequiredStr


class AddedReply(Entity):
    entity_code = "ADDED_REPLY"

    id: RequiredStr
    content: RequiredStr
    owner: RequiredStr


class DeleteReply(Entity):
    entity_code = "DELETE_REPLY"

    reply_id: RequiredStr
    comment_id: RequiredStr
    thread_id: RequiredStr
    owner: RequiredStr


class DetailReply(Entity):
    entity_code = "DETAIL_REPLY"

    id: RequiredStr
    username: RequiredStr
    date: datetime
    content: RequiredStr
    is_deleted: bool = Field(default=False, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def hide_deleted_content(cls, data: Any) -> Any:
        if isinstance(data, dict) and (data.get("is_deleted") or data.get("isDeleted")):
            return {**data, "content": DELETED_REPLY_CONTENT}
        return data
