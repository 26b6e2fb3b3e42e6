"""Boundary Protocols — contracts between core/services and the infrastructure shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Not-found raises NotFoundError; ownership mismatch raises AuthorizationError
    - Every repository call is atomic: it commits (or fails) before returning

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Rows returned as plain dicts; use cases turn them into entities
"""

from typing import Protocol

from forum.core.domain_types import CommentId, ReplyId, ThreadId, UserId
from forum.core.entities import (
    AddedComment, AddedReply, AddedThread,
    NewComment, NewReply, NewThread,
    RegisterUser, RegisteredUser,
)


# ─── Repositories ────────────────────────────────────────────────

class UserRepository(Protocol):
    """Contract for user persistence."""
    async def add_user(self, register_user: RegisterUser) -> RegisteredUser: ...
    async def verify_available_username(self, username: str) -> None: ...
    async def get_password_by_username(self, username: str) -> str: ...
    async def get_id_by_username(self, username: str) -> UserId: ...


class AuthenticationRepository(Protocol):
    """Contract for refresh token persistence."""
    async def add_token(self, token: str) -> None: ...
    async def check_availability_token(self, token: str) -> None: ...
    async def delete_token(self, token: str) -> None: ...


class ThreadRepository(Protocol):
    """Contract for thread persistence."""
    async def add_thread(self, new_thread: NewThread) -> AddedThread: ...
    async def verify_thread_exists(self, thread_id: ThreadId) -> None: ...
    async def get_thread_by_id(self, thread_id: ThreadId) -> dict: ...


class CommentRepository(Protocol):
    """Contract for comment persistence. delete_comment is a soft delete."""
    async def add_comment(self, new_comment: NewComment) -> AddedComment: ...
    async def verify_comment_exists(
        self, comment_id: CommentId, thread_id: ThreadId,
    ) -> None: ...
    async def verify_comment_owner(
        self, comment_id: CommentId, owner: UserId,
    ) -> None: ...
    async def delete_comment(self, comment_id: CommentId) -> None: ...
    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> list[dict]: ...


class ReplyRepository(Protocol):
    """Contract for reply persistence. delete_reply is a soft delete."""
    async def add_reply(self, new_reply: NewReply) -> AddedReply: ...
    async def verify_reply_exists(
        self, reply_id: ReplyId, comment_id: CommentId,
    ) -> None: ...
    async def verify_reply_owner(self, reply_id: ReplyId, owner: UserId) -> None: ...
    async def delete_reply(self, reply_id: ReplyId) -> None: ...
    async def get_replies_by_thread_id(self, thread_id: ThreadId) -> list[dict]: ...


class CommentLikeRepository(Protocol):
    """Contract for comment like persistence. One row per (comment, owner)."""
    async def add_like(self, comment_id: CommentId, owner: UserId) -> None: ...
    async def delete_like(self, comment_id: CommentId, owner: UserId) -> None: ...
    async def has_user_liked_comment(
        self, comment_id: CommentId, owner: UserId,
    ) -> bool: ...
    async def get_like_counts_by_thread_id(
        self, thread_id: ThreadId,
    ) -> dict[str, int]: ...


# ─── Auxiliary Services ──────────────────────────────────────────

class PasswordHash(Protocol):
    """Contract for password hashing. compare_password raises AuthenticationError on mismatch."""
    async def hash(self, password: str) -> str: ...
    async def compare_password(self, password: str, hashed_password: str) -> None: ...


class AuthenticationTokenManager(Protocol):
    """Contract for access/refresh token handling."""
    def create_access_token(self, payload: dict) -> str: ...
    def create_refresh_token(self, payload: dict) -> str: ...
    def verify_refresh_token(self, token: str) -> None: ...
    def verify_access_token(self, token: str) -> dict: ...
    def decode_payload(self, token: str) -> dict: ...


class IdGenerator(Protocol):
    """Callable returning a fresh random id fragment."""
    def __call__(self) -> str: ...
