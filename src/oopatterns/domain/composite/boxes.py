# src/oopatterns/domain/composite/boxes.py
"""
Priceable boxes arranged as a tree.

A box is either a leaf item with a fixed price (``Product`` and its
``Book`` and ``VideoGame`` variants) or a ``CompositeBox`` holding an
ordered tuple of child boxes. Trees are immutable once built. Prices are
aggregated by a fold over the tree rather than by each node summing its
own children, so arbitrarily deep trees are priced without recursion.
"""
from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, ClassVar, Iterator, Tuple

from oopatterns.domain.base.exceptions import InvalidBoxError


class BoxKind(str, Enum):
    """Tag distinguishing the box variants."""
    PRODUCT = "product"
    BOOK = "book"
    VIDEO_GAME = "video_game"
    COMPOSITE = "composite"


_ITEM_ID = re.compile(r'^[a-zA-Z0-9_-]+$')


class Box(ABC):
    """Anything that can report a price."""

    @property
    @abstractmethod
    def kind(self) -> BoxKind:
        """Tag of the concrete variant."""

    def calculate_price(self) -> float:
        return calculate_price(self)


@dataclass(frozen=True)
class Product(Box):
    """Leaf item with an identifier and a fixed price."""
    item_id: str
    price: float

    kind: ClassVar[BoxKind] = BoxKind.PRODUCT

    def __post_init__(self):
        if not isinstance(self.item_id, str) or not _ITEM_ID.match(self.item_id):
            raise InvalidBoxError(f"Invalid item ID: {self.item_id!r}")
        if isinstance(self.price, bool) or not isinstance(self.price, Real):
            raise InvalidBoxError(f"Price of item {self.item_id} must be a number, got {self.price!r}")
        try:
            finite = math.isfinite(self.price)
        except OverflowError:
            finite = False
        if not finite:
            raise InvalidBoxError(f"Price of item {self.item_id} must be finite")
        if self.price < 0:
            raise InvalidBoxError(f"Price of item {self.item_id} must not be negative")


@dataclass(frozen=True)
class Book(Product):
    kind: ClassVar[BoxKind] = BoxKind.BOOK


@dataclass(frozen=True)
class VideoGame(Product):
    kind: ClassVar[BoxKind] = BoxKind.VIDEO_GAME


class CompositeBox(Box):
    """Box holding an ordered sequence of child boxes."""

    kind: ClassVar[BoxKind] = BoxKind.COMPOSITE
    __slots__ = ("_children",)

    def __init__(self, *children: Box):
        for index, child in enumerate(children):
            if child is None:
                raise InvalidBoxError(f"Child {index} of composite box is None")
            if not isinstance(child, Box):
                raise InvalidBoxError(
                    f"Child {index} of composite box is not a box: {type(child).__name__}"
                )
            if not isinstance(child, (Product, CompositeBox)):
                raise InvalidBoxError(
                    f"Child {index} of composite box has unsupported box type {type(child).__name__}"
                )
        object.__setattr__(self, "_children", tuple(children))

    @property
    def children(self) -> Tuple[Box, ...]:
        return self._children

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("CompositeBox is immutable")

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Box]:
        return iter(self._children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeBox):
            return NotImplemented
        return self._children == other._children

    def __hash__(self) -> int:
        return hash((CompositeBox, self._children))

    def __repr__(self) -> str:
        return f"CompositeBox({', '.join(repr(child) for child in self._children)})"


def iter_leaves(box: Box) -> Iterator[Product]:
    """Yield the leaf items under ``box`` depth-first, in insertion order."""
    stack = [box]
    while stack:
        node = stack.pop()
        if isinstance(node, CompositeBox):
            stack.extend(reversed(node.children))
        elif isinstance(node, Product):
            yield node
        else:
            raise InvalidBoxError(f"Unsupported box type: {type(node).__name__}")


def calculate_price(box: Box) -> float:
    """
    Total price of ``box``.

    A leaf's total is its own price; a composite's is the sum over all of
    its leaves, however deeply they are nested. An empty composite totals 0.
    """
    return math.fsum(leaf.price for leaf in iter_leaves(box))


def count_items(box: Box) -> int:
    """Number of leaf items under ``box``."""
    return sum(1 for _ in iter_leaves(box))
