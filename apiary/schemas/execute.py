"""
Pydantic schemas for request execution.

ExecuteRequestInput is the fully resolved description of one outbound
request; ExecutionResult is what the executor returns for it, success or
failure alike.
"""

from pydantic import BaseModel, Field, field_validator

from .auth import AuthConfig, NoAuth
from .request import AuthType, BodyType, HttpMethod, KeyValue


class RequestSettings(BaseModel):
    """Per-execution transport policy."""
    timeout_ms: int = Field(default=30000, ge=0)
    follow_redirects: bool = True
    max_redirects: int = Field(default=10, ge=0)


class ExecuteRequestInput(BaseModel):
    """
    Schema for a request ready to be sent.

    Environment variables must already be substituted by the caller.
    """
    method: HttpMethod = HttpMethod.GET
    url: str
    headers: list[KeyValue] = []
    query_params: list[KeyValue] = []
    body_type: BodyType = BodyType.NONE
    body_content: str | None = None
    auth_type: AuthType = AuthType.NONE
    auth_config: AuthConfig = Field(default_factory=NoAuth)
    settings: RequestSettings = Field(default_factory=RequestSettings)

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, value):
        if isinstance(value, str):
            return HttpMethod.parse(value)
        return value


class ExecutionTiming(BaseModel):
    """
    Timing of one execution in milliseconds.

    Connection-phase timings are reserved and always None with the
    current transport.
    """
    dns_ms: float | None = None
    connect_ms: float | None = None
    tls_ms: float | None = None
    first_byte_ms: float = 0.0
    total_ms: float = 0.0


class ExecutionResult(BaseModel):
    """
    Schema for the outcome of an execution.

    status == 0 with an error means no response was received. A non-zero
    status with an error means the headers arrived but the body could not
    be read.
    """
    status: int = 0
    status_text: str = ""
    headers: list[KeyValue] = []
    body: str = ""
    size_bytes: int = 0
    timing: ExecutionTiming = Field(default_factory=ExecutionTiming)
    error: str | None = None


class ExportResponse(BaseModel):
    """Schema for a request rendered as a command-line or code snippet."""
    format: str
    snippet: str
