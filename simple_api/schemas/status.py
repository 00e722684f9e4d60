"""Status Schemas — greeting, counter and info responses."""

from pydantic import BaseModel, ConfigDict, Field


class HelloResponse(BaseModel):
    message: str
    timestamp: str


class CounterResponse(BaseModel):
    count: int


class InfoResponse(BaseModel):
    """Application identity plus the store's message count at call time."""
    model_config = ConfigDict(populate_by_name=True)

    app: str
    version: str
    timestamp: str
    total_messages: int = Field(alias="totalMessages")
