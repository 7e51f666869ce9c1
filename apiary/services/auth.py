"""
Authentication strategies applied to an outgoing request.

Each AuthConfig variant has one AuthStrategy. A strategy may set headers
and may return a modified URL. OAuth1, Digest and AWS Signature v4 are
placeholders: they do not sign anything.
"""

import base64
from abc import ABC, abstractmethod

import httpx

from ..schemas.auth import (
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
from .headers import set_header
from .percent_encoding import append_query, percent_encode


AWS_ACCESS_KEY_HEADER = "X-Amz-Access-Key"


def basic_credentials(username: str, password: str) -> str:
    """Return the value of a Basic Authorization header."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class AuthStrategy(ABC):
    """Base class for auth schemes."""

    def __init__(self, config: AuthConfig):
        self.config = config

    @abstractmethod
    def apply(self, headers: httpx.Headers, url: str) -> str:
        """
        Apply the scheme to the outgoing request.

        Args:
            headers: Outgoing headers, modified in place
            url: Request URL including query string

        Returns:
            The URL to send the request to
        """
        pass


class NoAuthStrategy(AuthStrategy):
    def apply(self, headers: httpx.Headers, url: str) -> str:
        return url


class BearerStrategy(AuthStrategy):
    config: BearerAuth

    def apply(self, headers: httpx.Headers, url: str) -> str:
        set_header(headers, "Authorization", f"Bearer {self.config.token}")
        return url


class BasicStrategy(AuthStrategy):
    config: BasicAuth

    def apply(self, headers: httpx.Headers, url: str) -> str:
        set_header(headers, "Authorization", basic_credentials(self.config.username, self.config.password))
        return url


class ApiKeyStrategy(AuthStrategy):
    """Sends the key as a query parameter when location is "query", else as a header."""
    config: ApiKeyAuth

    def apply(self, headers: httpx.Headers, url: str) -> str:
        if self.config.location == "query":
            return append_query(url, [(self.config.key, self.config.value)])
        set_header(headers, self.config.key, self.config.value)
        return url


class OAuth2Strategy(AuthStrategy):
    """Uses a pre-acquired access token. Token acquisition happens elsewhere."""
    config: OAuth2Auth

    def apply(self, headers: httpx.Headers, url: str) -> str:
        if self.config.access_token:
            set_header(headers, "Authorization", f"Bearer {self.config.access_token}")
        return url


class OAuth1Strategy(AuthStrategy):
    """
    Placeholder OAuth 1.0 header.

    Carries the consumer key and token only. There is no signature,
    timestamp or nonce, so servers that verify signatures will reject it.
    """
    config: OAuth1Auth

    def apply(self, headers: httpx.Headers, url: str) -> str:
        value = (
            f'OAuth oauth_consumer_key="{percent_encode(self.config.consumer_key)}", '
            f'oauth_token="{percent_encode(self.config.token)}"'
        )
        set_header(headers, "Authorization", value)
        return url


class DigestStrategy(AuthStrategy):
    """Placeholder: sends Basic credentials instead of a digest challenge response."""
    config: DigestAuth

    def apply(self, headers: httpx.Headers, url: str) -> str:
        set_header(headers, "Authorization", basic_credentials(self.config.username, self.config.password))
        return url


class AwsV4Strategy(AuthStrategy):
    """Placeholder: exposes the access key in a header. No request signing."""
    config: AwsV4Auth

    def apply(self, headers: httpx.Headers, url: str) -> str:
        set_header(headers, AWS_ACCESS_KEY_HEADER, self.config.access_key)
        return url


STRATEGIES: dict[type, type[AuthStrategy]] = {
    NoAuth: NoAuthStrategy,
    BearerAuth: BearerStrategy,
    BasicAuth: BasicStrategy,
    ApiKeyAuth: ApiKeyStrategy,
    OAuth2Auth: OAuth2Strategy,
    OAuth1Auth: OAuth1Strategy,
    DigestAuth: DigestStrategy,
    AwsV4Auth: AwsV4Strategy,
}


def get_strategy(config: AuthConfig) -> AuthStrategy:
    """Return the strategy for an auth configuration."""
    return STRATEGIES[type(config)](config)


def apply_auth(config: AuthConfig, headers: httpx.Headers, url: str) -> str:
    """
    Apply an auth configuration to the outgoing headers and URL.

    Returns:
        The URL to send the request to
    """
    return get_strategy(config).apply(headers, url)
