"""Message Board — create and list bulletin-board messages.

Invariants:
    - POST requires an application/json body (415 otherwise)
    - POST answers 200 with the stored message, including its store-assigned id
    - GET returns newest first and [] when there are no messages
"""

from fastapi import APIRouter, Depends

from simple_api.api.deps import get_request_handler, require_json_content_type
from simple_api.schemas.message import MessageRequest, MessageResponse
from simple_api.services.request_handler import RequestHandler

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.post(
    "", response_model=MessageResponse,
    dependencies=[Depends(require_json_content_type)],
)
async def add_message(
    body: MessageRequest,
    handler: RequestHandler = Depends(get_request_handler),
):
    """Store a new message."""
    return await handler.create_message(body.content)


@router.get("", response_model=list[MessageResponse])
async def get_messages(handler: RequestHandler = Depends(get_request_handler)):
    """List all messages, most recent first."""
    return await handler.list_messages()
