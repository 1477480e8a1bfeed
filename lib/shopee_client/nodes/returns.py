from __future__ import annotations

from ..request import Parameters
from ..response import ResponseData
from .base import Node


class Returns(Node):
    def get_return_list(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/returns/get", parameters)

    def get_return_detail(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/returns/detail", parameters)

    def confirm_return(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/returns/confirm", parameters)

    def dispute_return(self, parameters: Parameters = None) -> ResponseData:
        return self.post("/api/v1/returns/dispute", parameters)
