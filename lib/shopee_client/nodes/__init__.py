from .authorization import Authorization
from .base import Node
from .discount import Discount
from .item import Item
from .logistics import Logistics
from .order import Order
from .public import Public
from .returns import Returns
from .shop import Shop

NODE_TYPES: dict[str, type[Node]] = {
    "item": Item,
    "logistics": Logistics,
    "order": Order,
    "returns": Returns,
    "shop": Shop,
    "discount": Discount,
    "authorization": Authorization,
    "public": Public,
}

__all__ = [
    "NODE_TYPES",
    "Node",
    "Authorization",
    "Discount",
    "Item",
    "Logistics",
    "Order",
    "Public",
    "Returns",
    "Shop",
]
