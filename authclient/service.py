"""Client for the token exchange and introspection endpoints."""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Optional

import httpx

from .config import AuthClientConfig, Resolver, env_resolver
from .exceptions import HttpException
from .models import IntrospectResponse, TokenExchangeResponse

logger = logging.getLogger(__name__)


class AuthService:
    """Talks to an authorization server using client credentials.

    The base URL and credentials are resolvers rather than values so that
    rotated secrets or per-environment endpoints are picked up on the next
    request without rebuilding the service.
    """

    def __init__(
        self,
        base_url: Resolver,
        client_id: Resolver,
        client_secret: Resolver,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            base_url: Returns the base URL of the authorization server.
            client_id: Returns the client id used for Basic auth.
            client_secret: Returns the client secret used for Basic auth.
            http_client: Optional client owned by the caller. When omitted a
                short-lived ``httpx.AsyncClient`` is opened per request.
        """
        self._base_url = base_url
        self._client_id = client_id
        self._client_secret = client_secret
        self._http_client = http_client

    @classmethod
    def from_config(
        cls,
        config: AuthClientConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "AuthService":
        """Create a service bound to a loaded :class:`AuthClientConfig`."""
        return cls(
            lambda: config.base_url,
            lambda: config.client_id,
            lambda: config.client_secret.get_secret_value(),
            http_client=http_client,
        )

    @classmethod
    def from_env(cls, http_client: Optional[httpx.AsyncClient] = None) -> "AuthService":
        """Create a service that reads its settings from the environment per request."""
        return cls(
            env_resolver("AUTHCLIENT_BASE_URL"),
            env_resolver("AUTHCLIENT_CLIENT_ID"),
            env_resolver("AUTHCLIENT_CLIENT_SECRET"),
            http_client=http_client,
        )

    async def exchange_token(
        self, resource: str, subject_token: str
    ) -> TokenExchangeResponse:
        """Exchange ``subject_token`` for an access token scoped to ``resource``.

        Raises:
            HttpException: If the server answers with a non-success status.
        """
        response = await self._post(
            "/token",
            {
                "grant_type": "token_exchange",
                "resource": resource,
                "requested_token_type": "access_token",
                "subject_token": subject_token,
                "subject_token_type": "access_token",
            },
            headers={"Accept": "application/json"},
        )
        return response.json()

    async def introspect_token(self, token: str) -> IntrospectResponse:
        """Ask the server whether ``token`` is active and what it carries.

        Raises:
            HttpException: If the server answers with a non-success status.
        """
        response = await self._post("/introspect", {"token": token})
        return response.json()

    def get_basic_auth(self) -> str:
        credentials = f"{self._client_id()}:{self._client_secret()}"
        return base64.b64encode(credentials.encode("utf-8")).decode("ascii")

    async def _post(
        self,
        path: str,
        body: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        url = f"{self._base_url().rstrip('/')}{path}"
        request_headers = {
            "Authorization": f"Basic {self.get_basic_auth()}",
            "Content-Type": "application/json",
        }
        request_headers.update(headers or {})

        logger.debug("POST %s", url)
        if self._http_client is not None:
            response = await self._http_client.post(
                url, json=body, headers=request_headers
            )
        else:
            async with httpx.AsyncClient() as client:
                response = await client.post(url, json=body, headers=request_headers)

        if not response.is_success:
            logger.warning("POST %s failed with status %s", url, response.status_code)
            raise HttpException.from_response(response)
        return response
