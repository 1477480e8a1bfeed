from __future__ import annotations

import hashlib
import hmac
import json
import time
from urllib.parse import parse_qs, urlsplit

import pytest

from shopee_client import ClientConfig, RequestParameters
from shopee_client.errors import ConfigurationError
from shopee_client.request import RequestBuilder

SECRET = "test-secret"
NOW = 1700000000


def _builder(**cfg_kwargs) -> RequestBuilder:
    values = {
        "base_url": "https://partner.example.com/v2",
        "secret": SECRET,
        "partner_id": 1000,
        "shop_id": 2000,
        "user_agent": "shopee-tests/1.0",
    }
    values.update(cfg_kwargs)
    return RequestBuilder(ClientConfig(**values), clock=lambda: NOW)


def test_new_request_body_is_parameters_plus_defaults() -> None:
    req = _builder().new_request("/item/list", parameters={"item_id": 7, "tags": ["a", "b"]})
    assert req.method == "POST"
    assert json.loads(req.content) == {
        "item_id": 7,
        "tags": ["a", "b"],
        "partner_id": 1000,
        "shopid": 2000,
        "timestamp": NOW,
    }


def test_new_request_timestamp_is_current_wall_clock() -> None:
    builder = RequestBuilder(ClientConfig(secret=SECRET, partner_id=1, shop_id=2))
    before = int(time.time())
    req = builder.new_request("/api/v1/shop/get")
    after = int(time.time())
    assert before <= json.loads(req.content)["timestamp"] <= after


def test_timestamp_is_recomputed_per_request() -> None:
    ticks = iter([100, 200])
    builder = RequestBuilder(ClientConfig(secret=SECRET), clock=lambda: next(ticks))
    first = json.loads(builder.new_request("/a").content)
    second = json.loads(builder.new_request("/a").content)
    assert (first["timestamp"], second["timestamp"]) == (100, 200)


def test_defaults_always_win_over_caller_parameters() -> None:
    req = _builder().new_request(
        "/item/list",
        parameters={"timestamp": 1, "partner_id": 9, "shopid": 9, "keep": True},
    )
    body = json.loads(req.content)
    assert body["timestamp"] == NOW
    assert body["partner_id"] == 1000
    assert body["shopid"] == 2000
    assert body["keep"] is True


def test_authorization_header_signs_exact_transmitted_bytes() -> None:
    req = _builder().new_request("/item/list?debug=1", parameters={"item_id": 7})
    expected = hmac.new(
        SECRET.encode(),
        b"https://partner.example.com/v2/item/list|" + req.content,
        hashlib.sha256,
    ).hexdigest()
    assert req.headers["Authorization"] == expected
    assert str(req.url) == "https://partner.example.com/v2/item/list?debug=1"


def test_new_request_sets_standard_headers_and_keeps_custom_ones() -> None:
    req = _builder().new_request("/item/list", headers={"X-Trace": "abc", "User-Agent": "ignored"})
    assert req.headers["User-Agent"] == "shopee-tests/1.0"
    assert req.headers["Content-Type"] == "application/json"
    assert req.headers["X-Trace"] == "abc"


def test_new_request_accepts_request_parameters_object() -> None:
    params = RequestParameters(item_id=5).set("variation_id", None).set("stock", 3)
    req = _builder().new_request("/items/update_stock", parameters=params)
    body = json.loads(req.content)
    assert body["item_id"] == 5
    assert body["stock"] == 3
    assert "variation_id" not in body


def test_new_request_rejects_unsupported_parameters_type() -> None:
    with pytest.raises(TypeError):
        _builder().new_request("/item/list", parameters=[("a", 1)])  # type: ignore[arg-type]


def test_builder_rejects_malformed_base_url() -> None:
    with pytest.raises(ConfigurationError):
        RequestBuilder(ClientConfig(base_url="ftp://partner.example.com"))


def test_authorization_url_contains_signed_query() -> None:
    url = _builder().authorization_url("/api/v2/shop/auth_partner", "https://shop.example.com/callback")
    parts = urlsplit(url)
    query = {k: v[0] for k, v in parse_qs(parts.query).items()}

    assert parts.path == "/v2/api/v2/shop/auth_partner"
    assert set(query) == {"partner_id", "path", "timestamp", "sign", "redirect"}
    assert query["path"] == "/api/v2/shop/auth_partner"
    assert query["redirect"] == "https://shop.example.com/callback"
    base = f"{query['partner_id']}/api/v2/shop/auth_partner{query['timestamp']}"
    assert query["sign"] == hmac.new(SECRET.encode(), base.encode(), hashlib.sha256).hexdigest()


def test_token_request_keeps_signature_out_of_body() -> None:
    req = _builder().token_request("/api/v2/auth/token/get", "auth-code")
    body = json.loads(req.content)
    query = {k: v[0] for k, v in parse_qs(req.url.query.decode()).items()}

    assert body == {"code": "auth-code", "shop_id": 2000, "partner_id": 1000}
    assert "Authorization" not in req.headers
    assert query["sign"] == hmac.new(
        SECRET.encode(), f"1000/api/v2/auth/token/get{NOW}2000".encode(), hashlib.sha256
    ).hexdigest()
    assert query["shop_id"] == "2000"


def test_refresh_request_body_shape() -> None:
    req = _builder().refresh_request("/api/v2/auth/access_token/get", "refresh-me")
    body = json.loads(req.content)
    assert body == {"refresh_token": "refresh-me", "shop_id": 2000, "partner_id": 1000}
    assert "sign" not in body
    assert "sign=" in req.url.query.decode()


def test_refresh_request_signs_over_shop_id() -> None:
    req = _builder().refresh_request("/api/v2/auth/access_token/get", "refresh-me")
    query = {k: v[0] for k, v in parse_qs(req.url.query.decode()).items()}

    assert set(query) == {"partner_id", "timestamp", "shop_id", "sign"}
    assert query["shop_id"] == "2000"
    assert query["sign"] == hmac.new(
        SECRET.encode(), f"1000/api/v2/auth/access_token/get{NOW}2000".encode(), hashlib.sha256
    ).hexdigest()
