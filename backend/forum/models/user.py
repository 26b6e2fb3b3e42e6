"""User ORM — registered accounts.

Invariants:
    - username is unique
    - password column stores the bcrypt hash only
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from forum.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    fullname: Mapped[str] = mapped_column(Text, nullable=False)
