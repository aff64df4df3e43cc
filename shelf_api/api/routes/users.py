"""User Routes — REST endpoints over the users table.

Invariants:
    - Each handler performs exactly one store operation
    - Store errors propagate to the global handlers (404 / 500), never caught here

Design Decisions:
    - UserStore built per request from the injected session (explicit pool handle)
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from shelf_api.api.params import RecordId
from shelf_api.infrastructure.database import get_db
from shelf_api.schemas.user import UserCreate, UserResponse, UserUpdate
from shelf_api.services.user_store import UserStore

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    """List all users ordered by id."""
    return await UserStore(db).list_all()


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def add_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    """Create a user; the response carries the assigned id."""
    return await UserStore(db).insert(body)


@router.put("/{user_id}", response_model=UserResponse)
async def replace_user(
    user_id: RecordId, body: UserCreate, db: AsyncSession = Depends(get_db),
):
    """Overwrite name and email."""
    return await UserStore(db).replace(user_id, body)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: RecordId, body: UserUpdate, db: AsyncSession = Depends(get_db),
):
    """Overwrite only the supplied fields."""
    return await UserStore(db).update(user_id, body)


@router.delete("/{user_id}", response_model=UserResponse)
async def delete_user(user_id: RecordId, db: AsyncSession = Depends(get_db)):
    """Delete a user, returning the record as it was."""
    return await UserStore(db).delete(user_id)
