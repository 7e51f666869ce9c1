# Services package

from .percent_encoding import percent_encode, append_query, build_url
from .auth import AuthStrategy, apply_auth, get_strategy
from .body_encoding import build_graphql_body, encode_body
from .http_executor import execute, map_method
from .code_export import export_request
from .history_service import save_history

__all__ = [
    "percent_encode",
    "append_query",
    "build_url",
    "AuthStrategy",
    "apply_auth",
    "get_strategy",
    "build_graphql_body",
    "encode_body",
    "execute",
    "map_method",
    "export_request",
    "save_history",
]
