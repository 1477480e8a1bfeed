from __future__ import annotations

from ..request import Parameters
from ..response import ResponseData
from .base import Node


class Item(Node):
    def add(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/item/add", parameters)

    def delete(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/item/delete", parameters)

    def get_item_detail(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/item/get", parameters)

    def get_items_list(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/items/get", parameters)

    def update_item(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/item/update", parameters)

    def update_price(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/items/update_price", parameters)

    def update_stock(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/items/update_stock", parameters)

    def get_categories(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/item/categories/get", parameters)

    def get_attributes(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/item/attributes/get", parameters)
