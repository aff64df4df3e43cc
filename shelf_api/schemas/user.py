"""User Schemas — Pydantic shapes for user records and payloads.

Invariants:
    - UserCreate requires both fields (insert and full-replace)
    - UserUpdate fields default to None; None means "leave as stored"
    - UserResponse is built from ORM rows (from_attributes)
"""

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Insert / full-replace payload."""
    name: str
    email: str


class UserUpdate(BaseModel):
    """Partial-update payload — omitted or null fields keep their stored value."""
    name: str | None = None
    email: str | None = None


class UserResponse(BaseModel):
    """Full user record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
