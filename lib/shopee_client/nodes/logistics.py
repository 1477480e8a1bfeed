from __future__ import annotations

from ..request import Parameters
from ..response import ResponseData
from .base import Node


class Logistics(Node):
    def get_logistics(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/logistics/channel/get", parameters)

    def get_address(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/logistics/address/get", parameters)

    def init(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/logistics/init", parameters)

    def get_tracking_info(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/logistics/tracking", parameters)

    def get_airway_bill(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/logistics/airway_bill/get_mass", parameters)
