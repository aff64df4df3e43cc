"""User Store — data access for the users table."""

from shelf_api.models.user import User
from shelf_api.schemas.user import UserResponse
from shelf_api.services.record_store import RecordStore


class UserStore(RecordStore[UserResponse]):
    table = User.__table__
    record_schema = UserResponse
    resource_type = "User"
