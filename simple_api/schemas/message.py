"""Message Schemas — bulletin-board request and response bodies.

Invariants:
    - MessageRequest.content is optional at the schema level; null/absent is
      rejected by the handler (check_content_valid), not by Pydantic
    - MessageResponse mirrors the stored message exactly (id, content, timestamp)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from simple_api.core.repository_protocols import MessageLike


class MessageRequest(BaseModel):
    """POST /api/messages body."""
    content: str | None = None


class MessageResponse(BaseModel):
    """A stored message as returned by create and list."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    timestamp: datetime

    @classmethod
    def from_entity(cls, message: MessageLike) -> "MessageResponse":
        return cls(id=message.id, content=message.content, timestamp=message.timestamp)
