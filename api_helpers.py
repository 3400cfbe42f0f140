import json
import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Optional, Union

import httpx

PETSTORE_BASE_URL = "https://petstore.swagger.io/v2"
REQRES_BASE_URL = "https://reqres.in"
REQRES_API_KEY = "reqres-free-v1"

DEFAULT_TIMEOUT = 10

logger = logging.getLogger("api_suite.http")


class ProtocolError(AssertionError):
    """Response body could not be read as JSON."""


@dataclass
class ApiResponse:
    status_code: int
    reason_phrase: str
    http_version: str
    headers: httpx.Headers
    content: bytes
    url: str

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "ApiResponse":
        return cls(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            http_version=response.http_version,
            headers=response.headers,
            content=response.content,
            url=str(response.url),
        )

    @property
    def status_line(self) -> str:
        return f"{self.http_version} {self.status_code} {self.reason_phrase}".rstrip()

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    @cached_property
    def data(self) -> Any:
        try:
            return json.loads(self.content)
        except ValueError as e:
            raise ProtocolError(
                f"Response was not JSON. status={self.status_code} url={self.url} body={self.text[:1000]}"
            ) from e

    def json(self) -> Any:
        return self.data

    def pretty(self) -> str:
        try:
            return json.dumps(self.data, indent=2)
        except ProtocolError:
            return self.text


def build_url(path: str, *, base_url: str, params: Optional[Dict[str, Any]] = None) -> str:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    return str(httpx.URL(url, params=params))


def make_request(
    method: str,
    path: str,
    *,
    base_url: str,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, Any]] = None,
    body: Union[str, bytes, None] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ApiResponse:
    """
    Send one request and return the fully read response.

    No retries: a RequestError (DNS, connect, TLS, timeout) goes straight to
    the caller. Status codes are never raised on, tests assert them.
    """
    url = build_url(path, base_url=base_url, params=params)
    content = body.encode("utf-8") if isinstance(body, str) else body

    logger.debug("%s %s headers=%s", method.upper(), url, headers or {})

    # The client is closed on exit, which releases the connection.
    with httpx.Client(timeout=timeout, verify=True) as client:
        response = client.request(method.upper(), url, headers=headers, content=content)

    return ApiResponse.from_httpx(response)
