"""Thread Entities — creation payload, creation result, and the nested detail view.

Invariants:
    - DetailThread.comments are DetailComment instances, ordered by the caller
"""

from datetime import datetime

from pydantic import Field

from forum.core.entities.base import Entity, RequiredStr
from forum.core.entities.comments import DetailComment


class NewThread(Entity):
    """Thread creation payload. owner is the authenticated user id."""
    entity_code = "NEW_THREAD"

    title: RequiredStr
    body: RequiredStr
    owner: RequiredStr


class AddedThread(Entity):
    entity_code = "ADDED_THREAD"

    id: RequiredStr
    title: RequiredStr
    owner: RequiredStr


class DetailThread(Entity):
    """Thread with its comments, replies and like counts."""
    entity_code = "DETAIL_THREAD"

    id: RequiredStr
    title: RequiredStr
    body: RequiredStr
    date: datetime
    username: RequiredStr
    comments: list[DetailComment] = Field(default_factory=list)
