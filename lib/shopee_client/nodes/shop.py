from __future__ import annotations

from ..request import Parameters
from ..response import ResponseData
from .base import Node


class Shop(Node):
    def get_shop_info(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/shop/get", parameters)

    def update_shop_info(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/shop/update", parameters)

    def performance(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/shop/performance", parameters)
