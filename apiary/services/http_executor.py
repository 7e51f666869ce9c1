"""
HTTP execution service for sending HTTP requests.

Turns a fully resolved ExecuteRequestInput into exactly one outbound
exchange using httpx: method mapping, URL and header assembly, auth
injection, body encoding, timing capture and error classification.

execute() never raises. Failures are returned as an ExecutionResult with
``error`` set and whatever partial data was received.
"""

import time

import httpx

from ..logging_config import get_logger
from ..schemas.execute import ExecuteRequestInput, ExecutionResult, ExecutionTiming, RequestSettings
from ..schemas.request import HttpMethod, KeyValue
from .auth import apply_auth
from .body_encoding import encode_body
from .headers import set_header
from .percent_encoding import build_url


logger = get_logger(__name__)

SUPPORTED_METHODS = frozenset(method.value for method in HttpMethod)


def map_method(method: HttpMethod | str) -> str:
    """Return the method name to send. Anything unsupported falls back to GET."""
    name = method.value if isinstance(method, HttpMethod) else method
    if name in SUPPORTED_METHODS:
        return name
    return "GET"


def build_headers(headers: list[KeyValue]) -> httpx.Headers:
    """
    Collect the enabled headers in order.

    A later header replaces an earlier one with the same name. Malformed
    names or values are dropped.
    """
    result = httpx.Headers()
    for kv in headers:
        if kv.enabled:
            set_header(result, kv.key, kv.value)
    return result


def build_client(
    settings: RequestSettings,
    transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    """Create a client bound to the timeout and redirect policy of one execution."""
    return httpx.AsyncClient(
        timeout=settings.timeout_ms / 1000,
        follow_redirects=settings.follow_redirects,
        max_redirects=settings.max_redirects,
        transport=transport,
    )


def classify_transport_error(exc: Exception) -> str:
    """Describe a failure that happened before any response was received."""
    if isinstance(exc, httpx.TimeoutException):
        return "Request timed out"
    if isinstance(exc, httpx.ConnectError):
        return f"Connection failed: {exc}"
    return f"Request failed: {exc}"


def decode_headers(response: httpx.Response) -> list[KeyValue]:
    """Copy response headers. Values that are not valid UTF-8 become empty strings."""
    result = []
    for raw_name, raw_value in response.headers.raw:
        try:
            value = raw_value.decode("utf-8")
        except UnicodeDecodeError:
            value = ""
        result.append(KeyValue(key=raw_name.decode("latin-1"), value=value, enabled=True))
    return result


def elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


async def execute(
    request: ExecuteRequestInput,
    transport: httpx.AsyncBaseTransport | None = None
) -> ExecutionResult:
    """
    Execute an HTTP request and return the result.

    Args:
        request: The resolved request to send
        transport: Optional httpx transport, used instead of the network

    Returns:
        ExecutionResult; ``error`` is set if anything failed
    """
    method = map_method(request.method)
    try:
        url = build_url(request.url, request.query_params)
        headers = build_headers(request.headers)
        url = apply_auth(request.auth_config, headers, url)

        content, content_type = encode_body(request.body_type, request.body_content)
        if content_type is not None:
            headers["Content-Type"] = content_type
    except Exception as e:
        logger.warning("Failed to build %s request: %s", method, e)
        return ExecutionResult(error=f"Request failed: {e}")

    try:
        client = build_client(request.settings, transport)
    except Exception as e:
        logger.warning("Failed to create HTTP client: %s", e)
        return ExecutionResult(error=f"Failed to create HTTP client: {e}")

    log_url = url.split("?", 1)[0]
    start = time.perf_counter()

    async with client:
        try:
            outgoing = client.build_request(method, url, headers=headers, content=content)
            response = await client.send(outgoing, stream=True)
        except Exception as e:
            total_ms = elapsed_ms(start)
            error = classify_transport_error(e)
            logger.info("%s %s failed after %.1f ms: %s", method, log_url, total_ms, error)
            return ExecutionResult(
                timing=ExecutionTiming(first_byte_ms=0.0, total_ms=total_ms),
                error=error,
            )

        first_byte_ms = elapsed_ms(start)
        status = response.status_code
        status_text = httpx.codes.get_reason_phrase(status)
        response_headers = decode_headers(response)

        try:
            raw = await response.aread()
        except Exception as e:
            total_ms = elapsed_ms(start)
            logger.info("%s %s -> %d, body read failed: %s", method, log_url, status, e)
            return ExecutionResult(
                status=status,
                status_text=status_text,
                headers=response_headers,
                timing=ExecutionTiming(first_byte_ms=first_byte_ms, total_ms=total_ms),
                error=f"Failed to read response body: {e}",
            )
        finally:
            await response.aclose()

    total_ms = elapsed_ms(start)
    logger.info("%s %s -> %d in %.1f ms", method, log_url, status, total_ms)

    return ExecutionResult(
        status=status,
        status_text=status_text,
        headers=response_headers,
        body=raw.decode("utf-8", errors="replace"),
        size_bytes=len(raw),
        timing=ExecutionTiming(first_byte_ms=first_byte_ms, total_ms=total_ms),
    )
