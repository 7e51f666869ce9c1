"""
Pydantic schemas for request authentication settings.

AuthConfig is a discriminated union keyed by ``type``. Every field has an
empty default so partially filled configurations from the editor validate;
only the fields needed by the execution logic are read, the rest are
carried for persistence.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class NoAuth(BaseModel):
    type: Literal["none"] = "none"


class BearerAuth(BaseModel):
    type: Literal["bearer"] = "bearer"
    token: str = ""


class BasicAuth(BaseModel):
    type: Literal["basic"] = "basic"
    username: str = ""
    password: str = ""


class ApiKeyAuth(BaseModel):
    """API key sent either as a header or as a query parameter."""
    type: Literal["api_key"] = "api_key"
    key: str = ""
    value: str = ""
    location: str = "header"


class OAuth2Auth(BaseModel):
    """OAuth 2.0 settings. Only a pre-acquired access_token is used when sending."""
    type: Literal["oauth2"] = "oauth2"
    grant_type: str = "authorization_code"
    access_token: str = ""
    token_url: str = ""
    auth_url: str = ""
    client_id: str = ""
    client_secret: str = ""
    scope: str = ""
    username: str = ""
    password: str = ""
    redirect_uri: str = ""


class OAuth1Auth(BaseModel):
    type: Literal["oauth1"] = "oauth1"
    consumer_key: str = ""
    consumer_secret: str = ""
    token: str = ""
    token_secret: str = ""
    signature_method: str = "HMAC-SHA1"


class DigestAuth(BaseModel):
    type: Literal["digest"] = "digest"
    username: str = ""
    password: str = ""


class AwsV4Auth(BaseModel):
    type: Literal["aws_v4"] = "aws_v4"
    access_key: str = ""
    secret_key: str = ""
    region: str = ""
    service: str = ""


AuthConfig = Annotated[
    Union[
        NoAuth,
        BearerAuth,
        BasicAuth,
        ApiKeyAuth,
        OAuth2Auth,
        OAuth1Auth,
        DigestAuth,
        AwsV4Auth,
    ],
    Field(discriminator="type"),
]
