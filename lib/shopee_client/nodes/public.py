from __future__ import annotations

from ..request import Parameters
from ..response import ResponseData
from .base import Node


class Public(Node):
    def get_shops_by_partner(self, parameters: Parameters = None) -> ResponseData:
        """Basic info of shops which have authorized the partner."""
        return self.post("/api/v1/shop/get_partner_shop", parameters)

    def get_categories_by_country(self, parameters: Parameters = None) -> ResponseData:
        """Category list filtered by country and cross border, without a shop id."""
        return self.post("/api/v1/item/categories/get_by_country", parameters)

    def get_payment_list(self, parameters: Parameters = None) -> ResponseData:
        """Supported payment methods by country."""
        return self.post("/api/v1/payment/list", parameters)
