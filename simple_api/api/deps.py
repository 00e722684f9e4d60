"""Dependency Providers — wire the request handler and request guards for routes.

Invariants:
    - One AtomicCounter per application, read from app.state.counter
    - One SqlMessageStore per request, bound to the request's DB session
    - require_json_content_type runs before the body is validated
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from simple_api.core.counter import AtomicCounter
from simple_api.core.errors import ErrorContext, UnsupportedMediaTypeError
from simple_api.core.repository_protocols import MessageStore
from simple_api.infrastructure.database import get_db
from simple_api.infrastructure.message_store import SqlMessageStore
from simple_api.services.request_handler import RequestHandler


def get_counter(request: Request) -> AtomicCounter:
    """Return the application-wide counter created with the app."""
    return request.app.state.counter


def get_message_store(db: AsyncSession = Depends(get_db)) -> MessageStore:
    return SqlMessageStore(db)


def get_request_handler(
    counter: AtomicCounter = Depends(get_counter),
    store: MessageStore = Depends(get_message_store),
) -> RequestHandler:
    return RequestHandler(store=store, counter=counter)


def _is_json_media_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        return True
    return media_type.startswith("application/") and media_type.endswith("+json")


async def require_json_content_type(request: Request) -> None:
    """Reject request bodies that are not declared as JSON (415)."""
    content_type = request.headers.get("content-type")
    if not _is_json_media_type(content_type):
        raise UnsupportedMediaTypeError(
            content_type,
            ErrorContext(path=request.url.path, method=request.method),
        )
