"""Test doubles — in-memory MessageStore and a deterministic clock.

Invariants:
    - InMemoryMessageStore honours the MessageStore contract: ids assigned
      sequentially from 1, listing by timestamp desc then id desc
    - Returned lists are copies; callers cannot mutate stored state
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from simple_api.core.errors import DatabaseError


@dataclass(frozen=True)
class StoredMessage:
    id: int
    content: str
    timestamp: datetime


class InMemoryMessageStore:
    """List-backed MessageStore for handler and route tests."""

    def __init__(self):
        self.messages: list[StoredMessage] = []
        self.saved_timestamps: list[datetime] = []
        self._next_id = 1

    async def save(self, content: str, timestamp: datetime) -> StoredMessage:
        message = StoredMessage(id=self._next_id, content=content, timestamp=timestamp)
        self._next_id += 1
        self.messages.append(message)
        self.saved_timestamps.append(timestamp)
        return message

    async def find_all_order_by_timestamp_desc(self) -> list[StoredMessage]:
        return sorted(
            self.messages, key=lambda m: (m.timestamp, m.id), reverse=True,
        )

    async def count(self) -> int:
        return len(self.messages)


class FailingMessageStore:
    """Store whose every operation fails like an unreachable database."""

    async def save(self, content: str, timestamp: datetime):
        raise DatabaseError("connection refused", "save")

    async def find_all_order_by_timestamp_desc(self):
        raise DatabaseError("connection refused", "query")

    async def count(self) -> int:
        raise DatabaseError("connection refused", "count")


class StepClock:
    """Returns start, start+1s, start+2s, ... on successive calls."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, 12, 0, 0)):
        self.current = start
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current + timedelta(seconds=self.calls)
        self.calls += 1
        return value
