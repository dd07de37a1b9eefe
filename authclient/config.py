from __future__ import annotations

import os
from typing import Callable, Optional

import yaml
from pydantic import BaseModel, SecretStr

Resolver = Callable[[], str]

DEFAULT_CONFIG_PATH = "authclient.yaml"

_ENV_OVERRIDES = {
    "base_url": "AUTHCLIENT_BASE_URL",
    "client_id": "AUTHCLIENT_CLIENT_ID",
    "client_secret": "AUTHCLIENT_CLIENT_SECRET",
}


class AuthClientConfig(BaseModel):
    """Connection settings for the authorization server."""

    base_url: str = ""
    client_id: str = ""
    client_secret: SecretStr = SecretStr("")


def load_config(path: Optional[str] = None) -> AuthClientConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to AUTHCLIENT_CONFIG env
            variable or 'authclient.yaml' in the current directory.

    ``AUTHCLIENT_BASE_URL``, ``AUTHCLIENT_CLIENT_ID`` and
    ``AUTHCLIENT_CLIENT_SECRET`` take precedence over values from the file.
    """

    config_path = path or os.getenv("AUTHCLIENT_CONFIG", DEFAULT_CONFIG_PATH)
    data: dict = {}
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

    for field, env_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[field] = value
    return AuthClientConfig(**data)


def env_resolver(name: str, default: str = "") -> Resolver:
    """Return a resolver that reads ``name`` from the environment on every call."""

    def resolve() -> str:
        return os.getenv(name, default)

    return resolve
