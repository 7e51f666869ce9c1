"""
Pydantic schemas for request execution history.

Defines schemas for returning history records.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class HistoryResponse(BaseModel):
    """Schema for history record response with all fields."""
    id: int
    request_id: int | None
    method: str
    url: str
    request_snapshot: str
    response_status: int | None
    response_headers: list[dict] | None
    response_body: str | None
    response_size: int | None
    duration_ms: int | None
    error: str | None
    executed_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HistoryListResponse(BaseModel):
    """Schema for paginated history list response."""
    items: list[HistoryResponse]
    total: int
