"""Composite pattern: priceable box trees and the delivery service."""
from .boxes import (
    Book,
    Box,
    BoxKind,
    CompositeBox,
    Product,
    VideoGame,
    calculate_price,
    count_items,
    iter_leaves,
)
from .delivery_service import DeliveryService
from .order_document import box_from_dict, box_to_dict, boxes_from_document, demo_order

__all__ = [
    "Book",
    "Box",
    "BoxKind",
    "CompositeBox",
    "Product",
    "VideoGame",
    "calculate_price",
    "count_items",
    "iter_leaves",
    "DeliveryService",
    "box_from_dict",
    "box_to_dict",
    "boxes_from_document",
    "demo_order",
]
