"""Book Schemas — Pydantic shapes for book records and payloads."""

from pydantic import BaseModel, ConfigDict


class BookCreate(BaseModel):
    """Insert / full-replace payload."""
    title: str
    author: str


class BookUpdate(BaseModel):
    """Partial-update payload — omitted or null fields keep their stored value."""
    title: str | None = None
    author: str | None = None


class BookResponse(BaseModel):
    """Full book record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
