"""
Pydantic schemas package.

Exports all schemas for API request/response validation.
"""

from .auth import (
    AuthConfig,
    NoAuth,
    BearerAuth,
    BasicAuth,
    ApiKeyAuth,
    OAuth2Auth,
    OAuth1Auth,
    DigestAuth,
    AwsV4Auth,
)

from .request import (
    HttpMethod,
    BodyType,
    AuthType,
    KeyValue,
    RequestBase,
    RequestCreate,
    RequestUpdate,
    RequestResponse,
)

from .history import (
    HistoryResponse,
    HistoryListResponse,
)

from .execute import (
    RequestSettings,
    ExecuteRequestInput,
    ExecutionTiming,
    ExecutionResult,
    ExportResponse,
)

__all__ = [
    # Auth schemas
    "AuthConfig",
    "NoAuth",
    "BearerAuth",
    "BasicAuth",
    "ApiKeyAuth",
    "OAuth2Auth",
    "OAuth1Auth",
    "DigestAuth",
    "AwsV4Auth",
    # Request schemas
    "HttpMethod",
    "BodyType",
    "AuthType",
    "KeyValue",
    "RequestBase",
    "RequestCreate",
    "RequestUpdate",
    "RequestResponse",
    # History schemas
    "HistoryResponse",
    "HistoryListResponse",
    # Execute schemas
    "RequestSettings",
    "ExecuteRequestInput",
    "ExecutionTiming",
    "ExecutionResult",
    "ExportResponse",
]
