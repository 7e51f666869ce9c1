"""
Request model for storing HTTP request configurations.

Headers and query parameters are stored as JSON lists of
{key, value, enabled} objects so disabled entries survive a round trip.
The auth configuration is stored as the JSON form of its tagged union.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class Request(Base):
    """
    SQLAlchemy model for HTTP request configurations.

    Attributes:
        id: Unique identifier for the request
        name: Human-readable name for the request
        method: HTTP method (GET, POST, PUT, PATCH, DELETE, HEAD, OPTIONS)
        url: Target URL, may contain variable placeholders like {{variable}}
        headers: List of {key, value, enabled} header entries
        query_params: List of {key, value, enabled} query parameter entries
        body_type: Body encoding (none, json, text, form_url_encoded, multipart, graphql)
        body_content: Request body content
        auth_type: Authentication scheme name
        auth_config: Authentication settings keyed by "type"
        sort_order: Display order among saved requests
        created_at: Timestamp when the request was created
        updated_at: Timestamp when the request was last updated
    """
    __tablename__ = "requests"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    method: Mapped[str] = mapped_column(String(10))
    url: Mapped[str] = mapped_column(Text)
    headers: Mapped[list] = mapped_column(JSON, default=list)
    query_params: Mapped[list] = mapped_column(JSON, default=list)
    body_type: Mapped[str] = mapped_column(String(20), default="none")
    body_content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    auth_type: Mapped[str] = mapped_column(String(20), default="none")
    auth_config: Mapped[dict] = mapped_column(JSON, default=dict)
    sort_order: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)
