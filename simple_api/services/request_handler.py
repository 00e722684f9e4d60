"""Request Handler — greeting, counter, message board and info operations.

Invariants:
    - The handler owns no state except the injected AtomicCounter
    - Message timestamps are captured here, once per create, never by the store
    - The store's returned id is propagated unchanged
    - list_messages always returns a list (possibly empty)
    - get_info().total_messages is the store's count() at call time
    - Store failures propagate; nothing is retried or swallowed

Design Decisions:
    - Counter, store and clock are constructor arguments; the clock defaults
      to now_local
"""

import logging
from datetime import datetime
from typing import Callable

from simple_api.config import Settings, get_settings
from simple_api.core.counter import AtomicCounter
from simple_api.core.domain_types import format_timestamp, now_local
from simple_api.core.enforce_message import check_content_valid
from simple_api.core.repository_protocols import MessageStore
from simple_api.schemas.message import MessageResponse
from simple_api.schemas.status import CounterResponse, HelloResponse, InfoResponse

logger = logging.getLogger(__name__)


class RequestHandler:
    """Answers the five API operations for one request."""

    def __init__(
        self,
        store: MessageStore,
        counter: AtomicCounter,
        settings: Settings | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self.store = store
        self.counter = counter
        self.settings = settings or get_settings()
        self.clock = clock

    def greet(self) -> HelloResponse:
        return HelloResponse(
            message=self.settings.greeting,
            timestamp=format_timestamp(self.clock()),
        )

    def increment_and_get_counter(self) -> CounterResponse:
        return CounterResponse(count=self.counter.increment_and_get())

    async def create_message(self, content: str | None) -> MessageResponse:
        """Validate, timestamp and persist a message; return it as stored."""
        content = check_content_valid(content)
        timestamp = self.clock()
        saved = await self.store.save(content, timestamp)
        logger.info("Message created", extra={"message_id": saved.id})
        return MessageResponse.from_entity(saved)

    async def list_messages(self) -> list[MessageResponse]:
        """All messages, newest first; equal timestamps newest id first."""
        messages = await self.store.find_all_order_by_timestamp_desc()
        return [MessageResponse.from_entity(m) for m in messages]

    async def get_info(self) -> InfoResponse:
        total = await self.store.count()
        return InfoResponse(
            app=self.settings.app_name,
            version=self.settings.app_version,
            timestamp=format_timestamp(self.clock()),
            total_messages=total,
        )
