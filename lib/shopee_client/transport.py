from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError, ErrorKind, NetworkError, classify_status, error_for_kind
from .response import ResponseData

logger = logging.getLogger(__name__)


class Transport:
    """Sends prepared requests and maps HTTP failures to typed errors.

    Any ``httpx.Client`` can be injected; the transport closes only the
    client it created itself.
    """

    def __init__(self, cfg: ClientConfig, http_client: httpx.Client | None = None):
        self._cfg = cfg
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=cfg.timeout_s,
            follow_redirects=True,
        )

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def send(self, request: httpx.Request) -> ResponseData:
        logger.debug("%s %s", request.method, request.url.path)
        try:
            response = self._client.send(request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise api_error_from_response(e.response, cause=e) from e
        except httpx.RequestError as e:
            raise NetworkError(f"{request.method} {request.url.path} failed: {e}", cause=e) from e

        logger.debug("%s %s -> %s", request.method, request.url.path, response.status_code)
        return ResponseData(response)


def api_error_from_response(response: httpx.Response, cause: BaseException | None = None) -> ApiError:
    status = response.status_code
    kind = classify_status(status) or ErrorKind.UNEXPECTED
    body = response.text
    payload: Any = None
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None

    msg = f"{response.request.method} {response.request.url.path} failed with {status}"
    if isinstance(payload, dict):
        upstream = payload.get("msg") or payload.get("message") or payload.get("error")
        if upstream:
            msg = f"{msg}: {upstream}"

    logger.debug("request failed: kind=%s status=%s", kind.value, status)
    return error_for_kind(kind)(status, msg, body=body, payload=payload, cause=cause)
