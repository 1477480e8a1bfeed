from __future__ import annotations

from ..request import Parameters
from ..response import ResponseData
from .base import Node


class Order(Node):
    def get_orders_list(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/orders/basics", parameters)

    def get_orders_by_status(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/orders/get", parameters)

    def get_order_details(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/orders/detail", parameters)

    def cancel_order(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/orders/cancel", parameters)

    def get_my_income(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/orders/my_income", parameters)
