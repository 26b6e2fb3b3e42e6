"""Repository Layer — SQLAlchemy implementations of the core repository protocols."""

from forum.infrastructure.repositories.base import SqlRepository
from forum.infrastructure.repositories.user_repository import SqlUserRepository
from forum.infrastructure.repositories.authentication_repository import (
    SqlAuthenticationRepository,
)
from forum.infrastructure.repositories.thread_repository import SqlThreadRepository
from forum.infrastructure.repositories.comment_repository import SqlCommentRepository
from forum.infrastructure.repositories.reply_repository import SqlReplyRepository
from forum.infrastructure.repositories.comment_like_repository import (
    SqlCommentLikeRepository,
)

__all__ = [
    "SqlRepository",
    "SqlUserRepository",
    "SqlAuthenticationRepository",
    "SqlThreadRepository",
    "SqlCommentRepository",
    "SqlReplyRepository",
    "SqlCommentLikeRepository",
]
