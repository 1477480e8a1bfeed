from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Mapping
from urllib.parse import urlencode

import httpx

from .config_types import ClientConfig
from .parameters import SupportsToDict, as_dict
from .signing import sign_body, sign_query
from .uri import compose_uri, parse_base_url

logger = logging.getLogger(__name__)

Parameters = Mapping[str, Any] | SupportsToDict | None


def encode_json(data: Mapping[str, Any]) -> bytes:
    """Serialize once; the returned bytes are both signed and sent."""
    return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


class RequestBuilder:
    """Turns ``(path, parameters)`` into fully signed :class:`httpx.Request` objects."""

    def __init__(self, cfg: ClientConfig, *, clock: Callable[[], float] = time.time):
        self._cfg = cfg
        self._base_url = parse_base_url(cfg.base_url)
        self._clock = clock

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def timestamp(self) -> int:
        return int(self._clock())

    def default_parameters(self) -> dict[str, Any]:
        # Recomputed per request: the timestamp bounds the replay window.
        return {
            "partner_id": self._cfg.partner_id,
            "shopid": self._cfg.shop_id,
            "timestamp": self.timestamp(),
        }

    def format_uri(self, path: str | httpx.URL) -> httpx.URL:
        return compose_uri(self._base_url, path)

    def json_body(self, parameters: Parameters = None) -> bytes:
        # partner_id, shopid and timestamp always come from the defaults.
        data = as_dict(parameters)
        data.update(self.default_parameters())
        return encode_json(data)

    def new_request(
            self,
            path: str | httpx.URL,
            headers: Mapping[str, str] | None = None,
            parameters: Parameters = None,
    ) -> httpx.Request:
        uri = self.format_uri(path)
        body = self.json_body(parameters)

        merged = dict(headers or {})
        merged["Authorization"] = sign_body(self._cfg.secret, uri, body)
        merged["User-Agent"] = self._cfg.user_agent
        merged["Content-Type"] = "application/json"
        logger.debug("built request POST %s", uri.path)
        return httpx.Request("POST", uri, headers=merged, content=body)

    # --- authorization flow (query-mode signing) ---

    def authorization_url(self, path: str, redirect: str) -> str:
        """Shop authorization link; the literal ``path`` is echoed in the query."""
        timestamp = self.timestamp()
        query = {
            "partner_id": self._cfg.partner_id,
            "path": path,
            "timestamp": timestamp,
            "sign": sign_query(self._cfg.secret, self._cfg.partner_id, path, timestamp),
            "redirect": redirect,
        }
        return f"{self.format_uri(path)}?{urlencode(query)}"

    def signed_auth_url(self, path: str) -> str:
        """Token endpoint URL signed over ``partner_id + path + timestamp + shop_id``.

        Used for both token fetch and token refresh; ``shop_id`` is part of the
        signature and is sent alongside it so the server can recompute it.
        """
        timestamp = self.timestamp()
        query = {
            "partner_id": self._cfg.partner_id,
            "timestamp": timestamp,
            "shop_id": self._cfg.shop_id,
            "sign": sign_query(
                self._cfg.secret, self._cfg.partner_id, path, timestamp, self._cfg.shop_id
            ),
        }
        return f"{self.format_uri(path)}?{urlencode(query)}"

    def auth_request(self, url: str | httpx.URL, body: Mapping[str, Any]) -> httpx.Request:
        """Unsigned-body POST; the signature lives only in ``url``."""
        headers = {
            "User-Agent": self._cfg.user_agent,
            "Content-Type": "application/json",
        }
        return httpx.Request("POST", url, headers=headers, content=encode_json(body))

    def token_request(self, path: str, code: str) -> httpx.Request:
        body = {
            "code": code,
            "shop_id": self._cfg.shop_id,
            "partner_id": self._cfg.partner_id,
        }
        return self.auth_request(self.signed_auth_url(path), body)

    def refresh_request(self, path: str, refresh_token: str) -> httpx.Request:
        # Signed like token_request, shop_id included.
        body = {
            "refresh_token": refresh_token,
            "shop_id": self._cfg.shop_id,
            "partner_id": self._cfg.partner_id,
        }
        return self.auth_request(self.signed_auth_url(path), body)
