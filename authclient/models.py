"""Response shapes returned by the authorization server."""

from __future__ import annotations

from typing import Any, List, Mapping, Union

from pydantic import ConfigDict, TypeAdapter, with_config
from typing_extensions import NotRequired, TypedDict


@with_config(ConfigDict(extra="allow"))
class TokenExchangeResponse(TypedDict):
    """Result of an RFC 8693 token exchange."""

    access_token: str
    issued_token_type: str
    token_type: str
    expires_in: int


@with_config(ConfigDict(extra="allow"))
class IntrospectResponse(TypedDict):
    """Result of an RFC 7662 introspection.

    Only ``active`` is guaranteed; servers may omit every other claim for
    inactive or opaque tokens, and may add claims such as ``scope``.
    """

    active: bool
    token_type: NotRequired[str]
    sub: NotRequired[str]
    iat: NotRequired[int]
    exp: NotRequired[int]
    aud: NotRequired[Union[str, List[str]]]
    iss: NotRequired[str]
    jti: NotRequired[str]
    nbf: NotRequired[int]
    client_id: NotRequired[str]


_token_exchange_adapter = TypeAdapter(TokenExchangeResponse)
_introspect_adapter = TypeAdapter(IntrospectResponse)


def validate_token_exchange(data: Mapping[str, Any]) -> TokenExchangeResponse:
    """Check a decoded ``/token`` body against :class:`TokenExchangeResponse`.

    Validation is strict: values are never coerced and unknown keys are kept,
    so the result equals ``data``.

    Raises:
        pydantic.ValidationError: If a required field is missing or mistyped.
    """
    return _token_exchange_adapter.validate_python(data, strict=True)


def validate_introspection(data: Mapping[str, Any]) -> IntrospectResponse:
    """Check a decoded ``/introspect`` body against :class:`IntrospectResponse`."""
    return _introspect_adapter.validate_python(data, strict=True)


__all__ = [
    "IntrospectResponse",
    "TokenExchangeResponse",
    "validate_introspection",
    "validate_token_exchange",
]
