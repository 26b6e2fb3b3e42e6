"""Domain Types — identity types and shared constants.

Invariants:
    - Ids are prefixed strings: user-, thread-, comment-, reply-, like-
    - Placeholders replace content of soft-deleted rows in detail views

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str ids over UUID columns: the prefix tells which table an id belongs to
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", str)
ReplyId = NewType("ReplyId", str)


class IdPrefix(str, Enum):
    """Prefix prepended to every generated id."""
    USER = "user"
    THREAD = "thread"
    COMMENT = "comment"
    REPLY = "reply"
    LIKE = "like"


# ─── Constants ───────────────────────────────────────────────────

USERNAME_MAX_LENGTH = 50
USERNAME_PATTERN = r"^[A-Za-z0-9_]+$"
PASSWORD_MAX_BYTES = 72  # bcrypt input limit, counted in UTF-8 bytes

DELETED_COMMENT_CONTENT = "**comment has been deleted**"
DELETED_REPLY_CONTENT = "**reply has been deleted**"
