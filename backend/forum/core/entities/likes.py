"""Comment Like Entity — toggle payload for one (user, comment) pair."""

from forum.core.entities.base import Entity, RequiredStr


class CommentLike(Entity):
    entity_code = "COMMENT_LIKE"

    thread_id: RequiredStr
    comment_id: RequiredStr
    owner: RequiredStr
