# routers/root.py
from fastapi import APIRouter

from config import ROUTED_METHODS

router = APIRouter(tags=["Root"])

WELCOME_MESSAGE = {"message": "Welcome to Task API"}

# Catch-all: must be included after every other router.
@router.api_route("/{path:path}", methods=ROUTED_METHODS, include_in_schema=False)
async def read_root():
    """Answers every path the task routes don't claim."""
    return WELCOME_MESSAGE
