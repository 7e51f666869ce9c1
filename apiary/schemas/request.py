"""
Pydantic schemas for HTTP request configurations.

Defines the closed enumerations used across the application (methods,
body types, auth types), the KeyValue pair used for headers and query
parameters, and the schemas for creating, updating and returning stored
requests.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .auth import AuthConfig, NoAuth


class HttpMethod(str, Enum):
    """HTTP methods supported by the system."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: str) -> "HttpMethod":
        """
        Parse a method name case-insensitively.

        Raises:
            ValueError: If the name is not one of the supported methods
        """
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Unknown HTTP method: {value.upper()}") from None


class BodyType(str, Enum):
    """Request body encodings. Unknown names parse to NONE."""
    NONE = "none"
    JSON = "json"
    TEXT = "text"
    FORM_URL_ENCODED = "form_url_encoded"
    MULTIPART = "multipart"
    GRAPHQL = "graphql"

    @classmethod
    def parse(cls, value: str) -> "BodyType":
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


class AuthType(str, Enum):
    """Authentication scheme names. Unknown names parse to NONE."""
    NONE = "none"
    BEARER = "bearer"
    BASIC = "basic"
    API_KEY = "api_key"
    OAUTH2 = "oauth2"
    OAUTH1 = "oauth1"
    DIGEST = "digest"
    AWS_V4 = "aws_v4"

    @classmethod
    def parse(cls, value: str) -> "AuthType":
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


class KeyValue(BaseModel):
    """A single header or query parameter. Disabled entries are kept but not sent."""
    key: str
    value: str = ""
    enabled: bool = True


def _parse_method(value):
    if isinstance(value, str):
        return HttpMethod.parse(value)
    return value


class RequestBase(BaseModel):
    """Base schema with common request fields."""
    name: str
    method: HttpMethod = HttpMethod.GET
    url: str
    headers: list[KeyValue] = []
    query_params: list[KeyValue] = []
    body_type: BodyType = BodyType.NONE
    body_content: str | None = None
    auth_type: AuthType = AuthType.NONE
    auth_config: AuthConfig = Field(default_factory=NoAuth)

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, value):
        return _parse_method(value)


class RequestCreate(RequestBase):
    """Schema for creating a new request."""
    pass


class RequestUpdate(BaseModel):
    """Schema for updating an existing request. All fields are optional."""
    name: str | None = None
    method: HttpMethod | None = None
    url: str | None = None
    headers: list[KeyValue] | None = None
    query_params: list[KeyValue] | None = None
    body_type: BodyType | None = None
    body_content: str | None = None
    auth_type: AuthType | None = None
    auth_config: AuthConfig | None = None
    sort_order: int | None = None

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, value):
        if value is None:
            return value
        return _parse_method(value)


class RequestResponse(RequestBase):
    """Schema for request response with all fields including system-generated ones."""
    id: int
    sort_order: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
