"""
Validation helpers for outgoing header names and values.

Names must be RFC 7230 tokens. Values may contain visible ASCII, space
and horizontal tab only.
"""

import re

import httpx

from ..logging_config import get_logger


logger = get_logger(__name__)

HEADER_NAME_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
HEADER_VALUE_PATTERN = re.compile(r"[\t\x20-\x7e]*")


def is_valid_header(name: str, value: str) -> bool:
    """Return True if the transport would accept this header as-is."""
    return (
        HEADER_NAME_PATTERN.fullmatch(name) is not None
        and HEADER_VALUE_PATTERN.fullmatch(value) is not None
    )


def set_header(headers: httpx.Headers, name: str, value: str) -> bool:
    """
    Set a header, replacing any existing value with the same name.

    Malformed headers are skipped and False is returned.
    """
    if not is_valid_header(name, value):
        logger.debug("Dropping malformed header %r", name)
        return False
    headers[name] = value
    return True
