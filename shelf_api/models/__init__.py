"""ORM Models — SQLAlchemy declarative models for users and books.

Invariants:
    - All models inherit from Base (db/base.py)
    - Tables are independent: no foreign keys between users and books

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from shelf_api.models.user import User  # noqa: F401
from shelf_api.models.book import Book  # noqa: F401
