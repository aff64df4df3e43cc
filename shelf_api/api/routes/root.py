"""Root Route — static greeting at GET /."""

from fastapi import APIRouter

router = APIRouter(tags=["root"])


@router.get("/")
async def index():
    return {"message": "Hello world!"}
