"""Authentication ORM — refresh tokens currently valid. Logout deletes the row."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from forum.db.base import Base


class Authentication(Base):
    __tablename__ = "authentications"

    token: Mapped[str] = mapped_column(Text, primary_key=True)
