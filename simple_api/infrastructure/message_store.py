"""SQL Message Store — MessageStore implementation over an AsyncSession.

Invariants:
    - save() commits before returning, so the next read observes the write
    - id comes from the database autoincrement, never from the caller
    - Listing order: timestamp descending, then id descending
    - SQLAlchemy failures inside save() roll back and surface as DatabaseError
"""

import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from simple_api.core.errors import DatabaseError
from simple_api.models.message import Message

logger = logging.getLogger(__name__)


class SqlMessageStore:
    """Persists messages in the `messages` table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, content: str, timestamp: datetime) -> Message:
        message = Message(content=content, timestamp=timestamp)
        self._db.add(message)
        try:
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Failed to save message: {e}")
            raise DatabaseError("Could not persist message", "save")
        await self._db.refresh(message)
        logger.debug("Message saved", extra={"message_id": message.id})
        return message

    async def find_all_order_by_timestamp_desc(self) -> list[Message]:
        result = await self._db.execute(
            select(Message).order_by(
                Message.timestamp.desc(), Message.id.desc(),
            ),
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self._db.execute(select(func.count(Message.id)))
        return result.scalar_one()
