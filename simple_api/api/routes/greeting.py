"""Greeting & Counter — fixed greeting and the in-memory request counter.

Invariants:
    - GET /api/hello has no side effects
    - GET /api/counter increments the app counter exactly once per request
"""

from fastapi import APIRouter, Depends

from simple_api.api.deps import get_request_handler
from simple_api.schemas.status import CounterResponse, HelloResponse
from simple_api.services.request_handler import RequestHandler

router = APIRouter(prefix="/api", tags=["greeting"])


@router.get("/hello", response_model=HelloResponse)
async def hello(handler: RequestHandler = Depends(get_request_handler)):
    """Greeting plus the current local time."""
    return handler.greet()


@router.get("/counter", response_model=CounterResponse)
async def increment_counter(handler: RequestHandler = Depends(get_request_handler)):
    """Increment the request counter and return the new value."""
    return handler.increment_and_get_counter()
