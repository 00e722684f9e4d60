"""Domain Types — identity types, limits and the wire timestamp format.

Invariants:
    - MessageId wraps the store-assigned integer id, never invented by the handler
    - MAX_CONTENT_LENGTH (1000) is the single source of truth for the content limit
    - Timestamps are naive local date-times rendered as ISO-8601 without offset
"""

from datetime import datetime
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MessageId = NewType("MessageId", int)


# ─── Limits ──────────────────────────────────────────────────────

MAX_CONTENT_LENGTH: int = 1000


# ─── Timestamps ──────────────────────────────────────────────────

def now_local() -> datetime:
    """Current wall-clock time, local, microsecond precision, no tzinfo."""
    return datetime.now()


def format_timestamp(value: datetime) -> str:
    """ISO-8601 local date-time, e.g. 2026-10-18T09:15:02.123456."""
    return value.isoformat(timespec="microseconds")
