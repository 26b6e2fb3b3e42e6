"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Thread is the aggregate root for comments; Comment for replies and likes

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before
      create_all or alembic autogenerate
"""

from forum.models.user import User  # noqa: F401
from forum.models.authentication import Authentication  # noqa: F401
from forum.models.thread import Thread  # noqa: F401
from forum.models.comment import Comment  # noqa: F401
from forum.models.reply import Reply  # noqa: F401
from forum.models.comment_like import CommentLike  # noqa: F401
