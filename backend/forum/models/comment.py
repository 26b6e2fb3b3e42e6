"""Comment ORM — soft-deletable comment on a thread.

Invariants:
    - is_deleted only ever flips false -> true
    - Rows are never removed, so replies and likes keep a valid parent
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from forum.db.base import Base


class Comment(Base):
    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    thread_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    owner: Mapped[str] = mapped_column(
        String(50), ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
