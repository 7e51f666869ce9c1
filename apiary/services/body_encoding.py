"""
Request body encoding by body type.

Returns the content to send and the Content-Type it should be sent
with. JSON, text and form bodies are sent verbatim; GraphQL bodies are
rebuilt from the editor's envelope.
"""

import json
from typing import Any

from ..logging_config import get_logger
from ..schemas.request import BodyType


logger = get_logger(__name__)

CONTENT_TYPES = {
    BodyType.JSON: "application/json",
    BodyType.TEXT: "text/plain",
    BodyType.FORM_URL_ENCODED: "application/x-www-form-urlencoded",
    BodyType.GRAPHQL: "application/json",
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def build_graphql_body(content: str) -> str:
    """
    Convert a GraphQL editor envelope into the JSON body sent to the server.

    The envelope is ``{"query": ..., "variables": "<json text>",
    "operationName": ...}``. Variables are parsed from their JSON text;
    blank variables or operationName are left out of the output. Content
    that is not a JSON object, or is nested too deeply to parse, is
    returned unchanged.

    Example:
        >>> build_graphql_body('{"query": "{ me }", "variables": "", "operationName": ""}')
        '{"query": "{ me }"}'
    """
    try:
        envelope = json.loads(content)
    except (ValueError, RecursionError):
        logger.debug("GraphQL body is not valid JSON, sending as-is")
        return content

    if not isinstance(envelope, dict):
        return content

    payload: dict[str, Any] = {"query": envelope.get("query", "")}

    variables = envelope.get("variables")
    if isinstance(variables, str):
        if variables.strip():
            try:
                payload["variables"] = json.loads(variables)
            except (ValueError, RecursionError):
                logger.debug("GraphQL variables are not valid JSON, omitting them")
    elif variables is not None:
        payload["variables"] = variables

    operation_name = envelope.get("operationName")
    if not _is_blank(operation_name):
        payload["operationName"] = operation_name

    return json.dumps(payload)


def encode_body(body_type: BodyType, body_content: str | None) -> tuple[str | None, str | None]:
    """
    Encode a request body.

    Args:
        body_type: Declared body type
        body_content: Raw body from the request, or None

    Returns:
        Tuple of (content to send, Content-Type header value). Both are None
        when nothing should be attached.
    """
    if body_content is None:
        return None, None

    if body_type == BodyType.GRAPHQL:
        return build_graphql_body(body_content), CONTENT_TYPES[body_type]

    if body_type in (BodyType.JSON, BodyType.TEXT, BodyType.FORM_URL_ENCODED):
        return body_content, CONTENT_TYPES[body_type]

    # NONE and MULTIPART attach nothing
    return None, None
