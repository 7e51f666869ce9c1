"""
Render a request as a shell command or code snippet.

Supports curl, wget, JavaScript fetch and HTTPie. The URL is built with
the same query encoding the executor uses; auth settings are not
included in the output.
"""

import json
from typing import Callable, Literal

from ..schemas.execute import ExecuteRequestInput
from ..schemas.request import BodyType, KeyValue
from .body_encoding import build_graphql_body
from .percent_encoding import build_url


ExportFormat = Literal["curl", "wget", "fetch", "httpie"]

EXPORT_CONTENT_TYPES = {
    BodyType.JSON: "application/json",
    BodyType.FORM_URL_ENCODED: "application/x-www-form-urlencoded",
    BodyType.TEXT: "text/plain",
    BodyType.MULTIPART: "multipart/form-data",
    BodyType.GRAPHQL: "application/json",
}


def shell_quote(value: str) -> str:
    """Single-quote a string for POSIX shells."""
    return "'" + value.replace("'", "'\\''") + "'"


def _export_url(request: ExecuteRequestInput) -> str:
    params = [kv for kv in request.query_params if kv.key.strip()]
    return build_url(request.url, params)


def _export_headers(request: ExecuteRequestInput) -> list[KeyValue]:
    """Enabled, non-blank headers plus a Content-Type for the body type if none was given."""
    headers = [kv for kv in request.headers if kv.enabled and kv.key.strip()]
    content_type = EXPORT_CONTENT_TYPES.get(request.body_type)
    has_content_type = any(kv.key.lower() == "content-type" for kv in headers)
    if content_type and not has_content_type:
        headers.append(KeyValue(key="Content-Type", value=content_type))
    return headers


def _export_body(request: ExecuteRequestInput) -> str | None:
    if not request.body_content or request.body_type == BodyType.NONE:
        return None
    if request.body_type == BodyType.GRAPHQL:
        return build_graphql_body(request.body_content)
    return request.body_content


def export_curl(request: ExecuteRequestInput) -> str:
    parts = ["curl"]
    if request.method.value != "GET":
        parts.append(f"-X {request.method.value}")
    for header in _export_headers(request):
        parts.append(f"-H {shell_quote(f'{header.key}: {header.value}')}")
    body = _export_body(request)
    if body is not None:
        parts.append(f"-d {shell_quote(body)}")
    parts.append(shell_quote(_export_url(request)))

    if len(parts) > 2:
        return " \\\n  ".join(parts)
    return " ".join(parts)


def export_wget(request: ExecuteRequestInput) -> str:
    parts = ["wget", f"--method={request.method.value}"]
    for header in _export_headers(request):
        parts.append(f"--header={shell_quote(f'{header.key}: {header.value}')}")
    body = _export_body(request)
    if body is not None:
        parts.append(f"--body-data={shell_quote(body)}")
    parts.append("-O -")
    parts.append(shell_quote(_export_url(request)))

    if len(parts) > 3:
        return " \\\n  ".join(parts)
    return " ".join(parts)


def export_fetch(request: ExecuteRequestInput) -> str:
    options: dict = {"method": request.method.value}
    headers = _export_headers(request)
    if headers:
        options["headers"] = {header.key: header.value for header in headers}
    body = _export_body(request)
    if body is not None:
        options["body"] = body

    url = json.dumps(_export_url(request), ensure_ascii=False)
    return f"fetch({url}, {json.dumps(options, indent=2, ensure_ascii=False)})"


def export_httpie(request: ExecuteRequestInput) -> str:
    parts = ["http", request.method.value, shell_quote(_export_url(request))]
    for header in _export_headers(request):
        parts.append(f"{shell_quote(header.key)}:{shell_quote(header.value)}")

    body = _export_body(request)
    if body is not None:
        return f"echo {shell_quote(body)} | {' '.join(parts)}"

    if len(parts) > 3:
        return " \\\n  ".join(parts)
    return " ".join(parts)


EXPORTERS: dict[str, Callable[[ExecuteRequestInput], str]] = {
    "curl": export_curl,
    "wget": export_wget,
    "fetch": export_fetch,
    "httpie": export_httpie,
}


def export_request(request: ExecuteRequestInput, format: ExportFormat) -> str:
    """
    Render a request in the given format.

    Raises:
        ValueError: If the format is not supported
    """
    try:
        exporter = EXPORTERS[format]
    except KeyError:
        raise ValueError(f"Unsupported export format: {format}") from None
    return exporter(request)
