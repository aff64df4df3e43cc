"""Book ORM — maps the books(id, title, author) table."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from shelf_api.db.base import Base


class Book(Base):
    __tablename__ = "books"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
