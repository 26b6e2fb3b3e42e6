"""Entities — validated, immutable views of raw payloads and repository rows.

Invariants:
    - Every entity is built through Entity.parse (see base.py)
    - One module per aggregate: users, authentications, threads, comments, replies, likes
"""

from forum.core.entities.base import Entity
from forum.core.entities.users import RegisterUser, RegisteredUser, UserLogin
from forum.core.entities.authentications import NewAuth, RefreshAuth, LogoutAuth
from forum.core.entities.threads import NewThread, AddedThread, DetailThread
from forum.core.entities.comments import (
    NewComment, AddedComment, DeleteComment, DetailComment,
)
from forum.core.entities.replies import NewReply, AddedReply, DeleteReply, DetailReply
from forum.core.entities.likes import CommentLike

__all__ = [
    "Entity",
    "RegisterUser", "RegisteredUser", "UserLogin",
    "NewAuth", "RefreshAuth", "LogoutAuth",
    "NewThread", "AddedThread", "DetailThread",
    "NewComment", "AddedComment", "DeleteComment", "DetailComment",
    "NewReply", "AddedReply", "DeleteReply", "DetailReply",
    "CommentLike",
]
