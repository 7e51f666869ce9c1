"""
Percent-encoding for URL query components.

Bytes in [A-Za-z0-9] and "-_.~" pass through unchanged; every other byte
of the UTF-8 encoding is written as %XX with uppercase hex digits.
"""

from typing import Iterable

from ..schemas.request import KeyValue


UNRESERVED = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b"0123456789"
    b"-_.~"
)


def percent_encode(value: str) -> str:
    """
    Percent-encode a string byte by byte.

    Example:
        >>> percent_encode("café")
        'caf%C3%A9'
        >>> percent_encode("a&b=c")
        'a%26b%3Dc'
    """
    encoded = []
    for byte in value.encode("utf-8"):
        if byte in UNRESERVED:
            encoded.append(chr(byte))
        else:
            encoded.append(f"%{byte:02X}")
    return "".join(encoded)


def append_query(url: str, pairs: Iterable[tuple[str, str]]) -> str:
    """
    Append encoded key=value pairs to a raw URL.

    Uses "&" when the URL already has a "?", otherwise starts the query
    with "?". Returns the URL unchanged when there are no pairs.
    """
    query = "&".join(f"{percent_encode(key)}={percent_encode(value)}" for key, value in pairs)
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def build_url(url: str, query_params: list[KeyValue]) -> str:
    """Append the enabled query parameters to a URL, preserving their order."""
    return append_query(url, ((kv.key, kv.value) for kv in query_params if kv.enabled))
