"""Initial schema — users, authentications, threads, comments, replies, comment_likes.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-15

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("password", sa.Text, nullable=False),
        sa.Column("fullname", sa.Text, nullable=False),
    )

    op.create_table(
        "authentications",
        sa.Column("token", sa.Text, primary_key=True),
    )

    op.create_table(
        "threads",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("owner", sa.String(50), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "comments",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("thread_id", sa.String(50), sa.ForeignKey("threads.id", ondelete="CASCADE"), nullable=False),
        sa.Column("owner", sa.String(50), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("is_deleted", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_comments_thread_id", "comments", ["thread_id"])

    op.create_table(
        "replies",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("comment_id", sa.String(50), sa.ForeignKey("comments.id", ondelete="CASCADE"), nullable=False),
        sa.Column("owner", sa.String(50), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("is_deleted", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_replies_comment_id", "replies", ["comment_id"])

    op.create_table(
        "comment_likes",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("comment_id", sa.String(50), sa.ForeignKey("comments.id", ondelete="CASCADE"), nullable=False),
        sa.Column("owner", sa.String(50), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("comment_id", "owner", name="uq_comment_likes_comment_owner"),
    )
    op.create_index("ix_comment_likes_comment_id", "comment_likes", ["comment_id"])


def downgrade() -> None:
    op.drop_table("comment_likes")
    op.drop_table("replies")
    op.drop_table("comments")
    op.drop_table("threads")
    op.drop_table("authentications")
    op.drop_table("users")
