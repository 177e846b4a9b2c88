"""Delivery service pricing an order made of nested boxes."""
from oopatterns.domain.base.exceptions import InvalidBoxError
from oopatterns.domain.composite.boxes import Box, CompositeBox, calculate_price, count_items
from oopatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class DeliveryService:
    """Holds the root box of the current order and prices it."""

    def __init__(self, box: Box):
        if not isinstance(box, Box):
            raise InvalidBoxError("Delivery service needs a root box")
        self._box = box

    @property
    def box(self) -> Box:
        return self._box

    def setup_order(self, *boxes: Box) -> None:
        """Replace the current order with a composite of ``boxes``."""
        self._box = CompositeBox(*boxes)
        logger.info("Order set up", boxes=len(boxes), items=count_items(self._box))

    def calculate_order_price(self) -> float:
        price = calculate_price(self._box)
        logger.info("Order priced", price=price)
        return price
