"""Error raised when the authorization server answers with a failure status."""

from __future__ import annotations

import json
from typing import Any, Union

import httpx


class HttpException(Exception):
    """A completed HTTP exchange that returned a non-success status.

    ``response`` holds the decoded JSON body when the server declared
    ``application/json``, otherwise the raw text.
    """

    def __init__(self, response: Union[str, Any], status: int) -> None:
        self.response = response
        self.status = status
        self.message = response if isinstance(response, str) else json.dumps(response)
        super().__init__(self.message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "HttpException":
        """Build an exception from a failed ``httpx`` response."""
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            body: Any = response.json()
        else:
            body = response.text
        return cls(body, response.status_code)

    def __reduce__(self):
        return (type(self), (self.response, self.status))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status!r}, response={self.response!r})"
