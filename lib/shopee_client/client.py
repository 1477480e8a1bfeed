from __future__ import annotations

import time
from typing import Any, Callable, Mapping

import httpx

from .config_types import ClientConfig
from .errors import UnknownNodeError
from .nodes import NODE_TYPES, Authorization, Discount, Item, Logistics, Node, Order, Public, Returns, Shop
from .request import Parameters, RequestBuilder
from .response import ResponseData
from .transport import Transport


class ShopeeClient:
    """Shopee partner API client.

    Usage::

        cfg = ClientConfig.from_env()
        with ShopeeClient(cfg) as client:
            items = client.item.get_items_list({"pagination_offset": 0, "pagination_entries_per_page": 50})
    """

    def __init__(
            self,
            cfg: ClientConfig,
            http_client: httpx.Client | None = None,
            *,
            clock: Callable[[], float] = time.time,
    ):
        self._cfg = cfg
        self._builder = RequestBuilder(cfg, clock=clock)
        self._t = Transport(cfg, http_client)
        self._nodes: dict[str, Node] = {name: node_type(self) for name, node_type in NODE_TYPES.items()}

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> ShopeeClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # --- resource nodes ---
    def node(self, name: str) -> Node:
        try:
            return self._nodes[name]
        except KeyError:
            raise UnknownNodeError(name) from None

    @property
    def item(self) -> Item:
        return self._nodes["item"]  # type: ignore[return-value]

    @property
    def logistics(self) -> Logistics:
        return self._nodes["logistics"]  # type: ignore[return-value]

    @property
    def order(self) -> Order:
        return self._nodes["order"]  # type: ignore[return-value]

    @property
    def returns(self) -> Returns:
        return self._nodes["returns"]  # type: ignore[return-value]

    @property
    def shop(self) -> Shop:
        return self._nodes["shop"]  # type: ignore[return-value]

    @property
    def discount(self) -> Discount:
        return self._nodes["discount"]  # type: ignore[return-value]

    @property
    def authorization(self) -> Authorization:
        return self._nodes["authorization"]  # type: ignore[return-value]

    @property
    def public(self) -> Public:
        return self._nodes["public"]  # type: ignore[return-value]

    # --- request pipeline ---
    def default_parameters(self) -> dict[str, Any]:
        return self._builder.default_parameters()

    def format_uri(self, path: str | httpx.URL) -> httpx.URL:
        return self._builder.format_uri(path)

    def new_request(
            self,
            path: str | httpx.URL,
            headers: Mapping[str, str] | None = None,
            parameters: Parameters = None,
    ) -> httpx.Request:
        return self._builder.new_request(path, headers, parameters)

    def send(self, request: httpx.Request) -> ResponseData:
        return self._t.send(request)

    def post(self, path: str, parameters: Parameters = None) -> ResponseData:
        return self.send(self.new_request(path, parameters=parameters))

    # --- authorization flow ---
    def generate_authorization_url(self, path: str, redirect: str) -> str:
        return self._builder.authorization_url(path, redirect)

    def get_access_token(self, path: str, code: str) -> ResponseData:
        return self.send(self._builder.token_request(path, code))

    def refresh_token(self, path: str, refresh_token: str) -> ResponseData:
        return self.send(self._builder.refresh_request(path, refresh_token))

    def auth_request(self, url: str, body: Mapping[str, Any]) -> ResponseData:
        return self.send(self._builder.auth_request(url, body))
