"""authclient: token exchange and introspection client for OAuth 2.0 servers."""

from .config import AuthClientConfig, Resolver, env_resolver, load_config
from .exceptions import HttpException
from .models import (
    IntrospectResponse,
    TokenExchangeResponse,
    validate_introspection,
    validate_token_exchange,
)
from .service import AuthService

__version__ = "0.1.0"
__all__ = [
    "AuthClientConfig",
    "AuthService",
    "HttpException",
    "IntrospectResponse",
    "Resolver",
    "TokenExchangeResponse",
    "env_resolver",
    "load_config",
    "validate_introspection",
    "validate_token_exchange",
]
