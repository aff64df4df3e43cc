"""Book Store — data access for the books table."""

from shelf_api.models.book import Book
from shelf_api.schemas.book import BookResponse
from shelf_api.services.record_store import RecordStore


class BookStore(RecordStore[BookResponse]):
    table = Book.__table__
    record_schema = BookResponse
    resource_type = "Book"
