from __future__ import annotations

from typing import TYPE_CHECKING

from ..request import Parameters
from ..response import ResponseData

if TYPE_CHECKING:
    from ..client import ShopeeClient


class Node:
    """A named group of endpoints; each method only names a path."""

    def __init__(self, client: ShopeeClient):
        self.client = client

    def post(self, path: str, parameters: Parameters = None) -> ResponseData:
        return self.client.post(path, parameters)
