"""Message ORM — persists one bulletin-board post.

Invariants:
    - id is an integer autoincrement primary key, assigned by the database
    - content is non-nullable, at most 1000 characters, may be empty
    - timestamp is supplied by the request handler (no server default)
    - Rows are never updated or deleted by the API
"""

from datetime import datetime

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from simple_api.core.domain_types import MAX_CONTENT_LENGTH
from simple_api.db.base import Base


class Message(Base):
    """Message entity, immutable once saved."""
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    content: Mapped[str] = mapped_column(
        String(MAX_CONTENT_LENGTH), nullable=False,
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), nullable=False, index=True,
    )

    def __repr__(self) -> str:
        return f"Message(id={self.id!r}, timestamp={self.timestamp!r})"
