"""Shared fixtures for authclient tests."""

import json
from typing import Callable, List

import httpx
import pytest
import pytest_asyncio

from authclient import AuthService

BASE_URL = "https://auth.example.com"


class FakeAuthServer:
    """Records requests and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: (
            httpx.Response(200, json={})
        )

    def respond_with(self, response: httpx.Response) -> None:
        self.responder = lambda request: response

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def server() -> FakeAuthServer:
    return FakeAuthServer()


@pytest_asyncio.fixture
async def http_client(server):
    async with httpx.AsyncClient(transport=httpx.MockTransport(server.handle)) as client:
        yield client


@pytest.fixture
def service(http_client) -> AuthService:
    return AuthService(
        lambda: BASE_URL,
        lambda: "abc",
        lambda: "xyz",
        http_client=http_client,
    )
