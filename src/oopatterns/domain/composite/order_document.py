"""
Conversion between order documents and box trees.

An order document is plain nested data, as read from JSON or YAML::

    {"order": [
        {"type": "composite", "children": [
            {"type": "video_game", "id": "1", "price": 100}
        ]},
        {"type": "book", "id": "2", "price": 200}
    ]}

A document is either a single node or a mapping with an ``order`` list,
whose entries become the top-level boxes of a delivery order.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from oopatterns.domain.base.exceptions import InvalidBoxError, OrderFormatError
from oopatterns.domain.composite.boxes import (
    Book,
    Box,
    BoxKind,
    CompositeBox,
    Product,
    VideoGame,
)

LEAF_TYPES: Dict[str, Type[Product]] = {
    BoxKind.PRODUCT.value: Product,
    BoxKind.BOOK.value: Book,
    BoxKind.VIDEO_GAME.value: VideoGame,
}


def _node_type(node: Any, path: str) -> Any:
    if not isinstance(node, Mapping):
        raise OrderFormatError(path, f"expected a mapping, got {type(node).__name__}")

    box_type = node.get("type")
    if box_type is None:
        raise OrderFormatError(path, "missing 'type'")
    return box_type


def _leaf_from_dict(node: Mapping, box_type: Any, path: str) -> Product:
    leaf_class = LEAF_TYPES.get(box_type)
    if leaf_class is None:
        allowed = ", ".join([BoxKind.COMPOSITE.value, *LEAF_TYPES])
        raise OrderFormatError(path, f"unknown type {box_type!r} (expected one of {allowed})")

    missing = [key for key in ("id", "price") if node.get(key) is None]
    if missing:
        raise OrderFormatError(path, f"missing {', '.join(repr(key) for key in missing)}")

    try:
        return leaf_class(str(node["id"]), node["price"])
    except InvalidBoxError as e:
        raise OrderFormatError(path, str(e)) from e


def box_from_dict(node: Any, path: str = "$") -> Box:
    """
    Build a box tree from a document node.

    Nodes are visited depth-first in document order with an explicit stack,
    and each composite is built once all of its children are, so nesting
    depth is not limited by the interpreter's recursion limit.

    Raises:
        OrderFormatError: naming the path of the first malformed node
    """
    built: List[Box] = []
    # A child count marks a composite whose children have all been built
    stack: List[Tuple[Any, str, Optional[int]]] = [(node, path, None)]
    while stack:
        current, current_path, child_count = stack.pop()
        if child_count is not None:
            start = len(built) - child_count
            children = built[start:]
            del built[start:]
            built.append(CompositeBox(*children))
            continue

        box_type = _node_type(current, current_path)
        if box_type != BoxKind.COMPOSITE.value:
            built.append(_leaf_from_dict(current, box_type, current_path))
            continue

        children = current.get("children", [])
        if not isinstance(children, list):
            raise OrderFormatError(current_path, "'children' must be a list")
        stack.append((current, "", len(children)))
        stack.extend(
            (child, f"{current_path}.children[{index}]", None)
            for index, child in reversed(list(enumerate(children)))
        )
    return built[0]


def boxes_from_document(document: Any) -> List[Box]:
    """
    Read the top-level boxes of an order document.

    A mapping with an ``order`` key yields one box per entry; any other
    node yields a single box.
    """
    if isinstance(document, Mapping) and "order" in document:
        entries = document["order"]
        if not isinstance(entries, list):
            raise OrderFormatError("order", "'order' must be a list")
        return [box_from_dict(entry, f"order[{index}]") for index, entry in enumerate(entries)]
    return [box_from_dict(document)]


def box_to_dict(box: Box) -> Dict[str, Any]:
    root: Dict[str, Any] = {}
    stack: List[Tuple[Box, Dict[str, Any]]] = [(box, root)]
    while stack:
        current, target = stack.pop()
        if isinstance(current, CompositeBox):
            child_nodes: List[Dict[str, Any]] = [{} for _ in current.children]
            target.update({"type": current.kind.value, "children": child_nodes})
            stack.extend(zip(current.children, child_nodes))
        elif isinstance(current, Product):
            target.update({"type": current.kind.value, "id": current.item_id, "price": current.price})
        else:
            raise InvalidBoxError(f"Unsupported box type: {type(current).__name__}")
    return root


def demo_order() -> List[Box]:
    """Top-level boxes of the classroom delivery example, totalling 1500."""
    return [
        CompositeBox(
            VideoGame("1", 100)
        ),
        CompositeBox(
            CompositeBox(
                Book("2", 200),
                Book("3", 300)
            ),
            VideoGame("4", 400),
            VideoGame("5", 500)
        ),
    ]
