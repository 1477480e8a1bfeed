"""HMAC-SHA256 request signatures.

Two canonical forms exist:

* body mode, for regular API calls: ``canonical_url + "|" + json_body``;
  the hex digest goes into the ``Authorization`` header as-is.
* query mode, for the shop authorization flow:
  ``partner_id + path + timestamp [+ shop_id]`` with no separator; the
  digest is sent as the ``sign`` query parameter.
"""
from __future__ import annotations

import hashlib
import hmac

import httpx

from .uri import canonical_url


def hmac_sha256_hex(secret: str | bytes | None, message: str | bytes) -> str:
    # An empty secret still produces a deterministic (insecure) digest.
    key = secret.encode("utf-8") if isinstance(secret, str) else (secret or b"")
    msg = message.encode("utf-8") if isinstance(message, str) else message
    return hmac.new(key, msg, hashlib.sha256).hexdigest()


def body_base_string(uri: str | httpx.URL, body: bytes) -> bytes:
    return canonical_url(uri).encode("utf-8") + b"|" + body


def sign_body(secret: str | bytes | None, uri: str | httpx.URL, body: bytes) -> str:
    return hmac_sha256_hex(secret, body_base_string(uri, body))


def query_base_string(partner_id: int, path: str, timestamp: int, shop_id: int | None = None) -> str:
    base = f"{partner_id}{path}{timestamp}"
    if shop_id is not None:
        base += str(shop_id)
    return base


def sign_query(
        secret: str | bytes | None,
        partner_id: int,
        path: str,
        timestamp: int,
        shop_id: int | None = None,
) -> str:
    return hmac_sha256_hex(secret, query_base_string(partner_id, path, timestamp, shop_id))
