"""Info — application name, version and current message count."""

from fastapi import APIRouter, Depends

from simple_api.api.deps import get_request_handler
from simple_api.schemas.status import InfoResponse
from simple_api.services.request_handler import RequestHandler

router = APIRouter(prefix="/api", tags=["info"])


@router.get("/info", response_model=InfoResponse)
async def get_info(handler: RequestHandler = Depends(get_request_handler)):
    return await handler.get_info()
