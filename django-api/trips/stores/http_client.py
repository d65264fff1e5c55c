"""HTTP client for the remote Tahwisa REST API.

Maps HTTP outcomes onto domain errors:
- 401 -> AuthorizationError
- 404 -> NotFoundError
- other 4xx -> DomainRejectedError carrying the server message verbatim
- 5xx, network failures, non-JSON bodies -> TransportError

No request is ever retried here.
"""

import logging
from typing import Any

import httpx
from django.conf import settings

from trips.domain.errors import (
    AuthorizationError,
    DomainRejectedError,
    NotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)

USER_AGENT = "Tahwisa-Django/1.0"


class TahwisaApiClient:
    """Synchronous JSON client; attaches the bearer token to every request."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.TAHWISA_API_BASE_URL
        self.timeout = timeout or settings.TAHWISA_API_TIMEOUT
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers=headers,
            transport=transport,
            follow_redirects=True,
        )

    def __enter__(self) -> "TahwisaApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def has_token(self) -> bool:
        return "Authorization" in self._client.headers

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def request(self, method: str, path: str, json: Any = None) -> Any:
        try:
            response = self._client.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise TransportError(str(exc)) from exc
        return self._handle(method, path, response)

    def _handle(self, method: str, path: str, response: httpx.Response) -> Any:
        status = response.status_code
        if status == 401:
            logger.info("%s %s answered 401", method, path)
            raise AuthorizationError(server_message=_message_of(response))
        if status == 404:
            logger.debug("%s %s returned 404", method, path)
            raise NotFoundError(path)
        if 400 <= status < 500:
            body = _json_or_none(response)
            message = _message_of(response)
            remote_code = body.get("code") if isinstance(body, dict) else None
            logger.info("%s %s rejected with %d: %s", method, path, status, message)
            raise DomainRejectedError(message, status_code=status, remote_code=remote_code)
        if status >= 500:
            logger.warning("%s %s failed with %d", method, path, status)
            raise TransportError(f"HTTP {status}")
        if status == 204 or not response.content:
            return None
        body = _json_or_none(response)
        if body is None:
            logger.warning("%s %s returned a non-JSON body", method, path)
            raise TransportError("Response is not JSON")
        return body


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _message_of(response: httpx.Response) -> str | None:
    body = _json_or_none(response)
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"] or None
    return None
