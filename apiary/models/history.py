"""
History model for storing executed request records.

Each execution creates a history entry holding a JSON snapshot of the
request exactly as it was sent, plus whatever response data came back.
Failed executions are recorded too, with ``error`` set.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Text, JSON, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class History(Base):
    """
    SQLAlchemy model for request execution history.

    Attributes:
        id: Unique identifier for the history entry
        request_id: Optional reference to the original saved request
        method: HTTP method used
        url: Target URL as given, without appended query parameters
        request_snapshot: JSON serialization of the executed input
        response_status: HTTP status code, or None if no response arrived
        response_headers: Headers received in the response
        response_body: Body received in the response
        response_size: Response body size in bytes
        duration_ms: Total execution time in milliseconds
        error: Error message if the execution failed
        executed_at: Timestamp when the request was executed
    """
    __tablename__ = "history"

    id: Mapped[int] = mapped_column(primary_key=True)
    request_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("requests.id", ondelete="SET NULL"),
        nullable=True
    )
    method: Mapped[str] = mapped_column(String(10))
    url: Mapped[str] = mapped_column(Text)
    request_snapshot: Mapped[str] = mapped_column(Text)
    response_status: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    response_headers: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    response_body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    response_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    duration_ms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    error: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    executed_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
