from __future__ import annotations

import hashlib
import hmac
import json
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from shopee_client import AuthError, ClientConfig, ShopeeClient, UnknownNodeError
from shopee_client.nodes import Item, Public

SECRET = "partner-secret"
NOW = 1700000000


def _client(handler, **cfg_kwargs) -> ShopeeClient:
    values = {
        "base_url": "https://partner.example.com",
        "secret": SECRET,
        "partner_id": 1000,
        "shop_id": 2000,
    }
    values.update(cfg_kwargs)
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return ShopeeClient(ClientConfig(**values), http_client, clock=lambda: NOW)


def _recording_handler(calls: list, payload: dict | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=payload if payload is not None else {"request_id": "r-1"})
    return handler


def test_node_method_posts_signed_request() -> None:
    calls: list[httpx.Request] = []
    client = _client(_recording_handler(calls, {"items": [], "more": False}))

    resp = client.item.get_items_list({"pagination_offset": 0})

    assert resp.data == {"items": [], "more": False}
    req = calls[0]
    assert req.method == "POST"
    assert str(req.url) == "https://partner.example.com/api/v1/items/get"
    assert json.loads(req.content) == {
        "pagination_offset": 0,
        "partner_id": 1000,
        "shopid": 2000,
        "timestamp": NOW,
    }
    expected = hmac.new(
        SECRET.encode(), b"https://partner.example.com/api/v1/items/get|" + req.content, hashlib.sha256
    ).hexdigest()
    assert req.headers["Authorization"] == expected


def test_nodes_are_reachable_by_name_and_property() -> None:
    client = _client(_recording_handler([]))
    assert isinstance(client.item, Item)
    assert client.node("public") is client.public
    assert isinstance(client.public, Public)
    for name in ("item", "logistics", "order", "returns", "shop", "discount", "authorization", "public"):
        assert client.node(name).client is client


def test_unknown_node_raises() -> None:
    client = _client(_recording_handler([]))
    with pytest.raises(UnknownNodeError) as exc_info:
        client.node("inventory")
    assert isinstance(exc_info.value, KeyError)
    assert "inventory" in str(exc_info.value)


def test_authorization_url_via_node() -> None:
    client = _client(_recording_handler([]))
    url = client.authorization.get_authorization_url("https://shop.example.com/cb")
    parts = urlsplit(url)
    query = {k: v[0] for k, v in parse_qs(parts.query).items()}

    assert parts.path == "/api/v2/shop/auth_partner"
    assert query["partner_id"] == "1000"
    assert query["timestamp"] == str(NOW)
    assert query["redirect"] == "https://shop.example.com/cb"
    assert query["sign"] == hmac.new(
        SECRET.encode(), f"1000/api/v2/shop/auth_partner{NOW}".encode(), hashlib.sha256
    ).hexdigest()


def test_get_access_token_posts_plain_body() -> None:
    calls: list[httpx.Request] = []
    token_payload = {"access_token": "at", "refresh_token": "rt", "expire_in": 14400}
    client = _client(_recording_handler(calls, token_payload))

    resp = client.authorization.get_access_token("code-123")

    assert resp["access_token"] == "at"
    req = calls[0]
    assert req.url.path == "/api/v2/auth/token/get"
    assert json.loads(req.content) == {"code": "code-123", "shop_id": 2000, "partner_id": 1000}
    assert "Authorization" not in req.headers
    assert "sign" in parse_qs(req.url.query.decode())


def test_refresh_token_posts_plain_body() -> None:
    calls: list[httpx.Request] = []
    client = _client(_recording_handler(calls))

    client.authorization.refresh_token("rt-1")

    req = calls[0]
    assert req.url.path == "/api/v2/auth/access_token/get"
    assert json.loads(req.content) == {"refresh_token": "rt-1", "shop_id": 2000, "partner_id": 1000}


def test_auth_failure_surfaces_upstream_payload() -> None:
    payload = {"error": "error_auth", "msg": "Invalid access_token."}
    client = _client(lambda request: httpx.Response(403, json=payload))
    with pytest.raises(AuthError) as exc_info:
        client.shop.get_shop_info()
    assert exc_info.value.error == "error_auth"
    assert exc_info.value.status_code == 403


def test_client_mounted_under_sub_path() -> None:
    calls: list[httpx.Request] = []
    client = _client(_recording_handler(calls), base_url="https://gateway.example.com/shopee")
    client.order.get_order_details({"ordersn_list": ["A1"]})
    assert str(calls[0].url) == "https://gateway.example.com/shopee/api/v1/orders/detail"


def test_context_manager_keeps_injected_http_client_open() -> None:
    http_client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
    with ShopeeClient(ClientConfig(), http_client) as client:
        client.public.get_payment_list()
    assert not http_client.is_closed


def test_config_secret_not_in_repr() -> None:
    client = _client(_recording_handler([]))
    assert SECRET not in repr(client.config)
