"""User ORM — maps the users(id, name, email) table.

Invariants:
    - id is an integer primary key assigned by the database
    - name and email are non-nullable; duplicates are allowed

Design Decisions:
    - sqlite_autoincrement: ids never reused on SQLite, matching PostgreSQL sequences
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from shelf_api.db.base import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
