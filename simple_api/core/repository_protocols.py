"""Boundary Protocols — contracts between the request handler and persistence.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - The store is the sole authority for message id assignment
    - find_all_order_by_timestamp_desc breaks timestamp ties by id, highest first
    - A completed save() is visible to the next read by the same caller

Design Decisions:
    - Protocol over ABC: the SQLAlchemy store and the in-memory test fake
      share no base class
    - Async methods: implementations do IO
"""

from datetime import datetime
from typing import Protocol

from simple_api.core.domain_types import MessageId


class MessageLike(Protocol):
    """Structural contract for stored messages (ORM rows or test doubles)."""
    id: MessageId
    content: str
    timestamp: datetime


class MessageStore(Protocol):
    """Contract for message persistence, implemented by infrastructure."""
    async def save(self, content: str, timestamp: datetime) -> MessageLike: ...
    async def find_all_order_by_timestamp_desc(self) -> list[MessageLike]: ...
    async def count(self) -> int: ...
