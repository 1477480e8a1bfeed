from __future__ import annotations

from ..request import Parameters
from ..response import ResponseData
from .base import Node


class Discount(Node):
    def add_discount(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/discount/add", parameters)

    def add_discount_item(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/discount/items/add", parameters)

    def delete_discount(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/discount/delete", parameters)

    def get_discount_detail(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/discount/detail", parameters)

    def get_discounts_list(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/discounts/get", parameters)
