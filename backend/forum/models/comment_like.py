"""CommentLike ORM — one row per (comment, user) like.

Invariants:
    - (comment_id, owner) is unique: a user likes a comment at most once
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from forum.db.base import Base


class CommentLike(Base):
    __tablename__ = "comment_likes"
    __table_args__ = (
        UniqueConstraint("comment_id", "owner", name="uq_comment_likes_comment_owner"),
    )

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    comment_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    owner: Mapped[str] = mapped_column(
        String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
