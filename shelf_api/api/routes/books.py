"""Book Routes — REST endpoints over the books table.

Invariants:
    - Same shape as the user routes: one store operation per handler
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from shelf_api.api.params import RecordId
from shelf_api.infrastructure.database import get_db
from shelf_api.schemas.book import BookCreate, BookResponse, BookUpdate
from shelf_api.services.book_store import BookStore

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[BookResponse])
async def list_books(db: AsyncSession = Depends(get_db)):
    return await BookStore(db).list_all()


@router.post(
    "", response_model=BookResponse, status_code=status.HTTP_201_CREATED,
)
async def add_book(body: BookCreate, db: AsyncSession = Depends(get_db)):
    return await BookStore(db).insert(body)


@router.put("/{book_id}", response_model=BookResponse)
async def replace_book(
    book_id: RecordId, body: BookCreate, db: AsyncSession = Depends(get_db),
):
    return await BookStore(db).replace(book_id, body)


@router.patch("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: RecordId, body: BookUpdate, db: AsyncSession = Depends(get_db),
):
    return await BookStore(db).update(book_id, body)


@router.delete("/{book_id}", response_model=BookResponse)
async def delete_book(book_id: RecordId, db: AsyncSession = Depends(get_db)):
    return await BookStore(db).delete(book_id)
