"""
Extraction of border and outline geometry into draw primitives.

Extraction runs once per frame over the whole paint-order stack, since
visibility, clipping and paint order can change without the geometry
changing. For every node in stack order it emits one DrawPrimitive per
present edge rectangle, edges in Left, Right, Top, Bottom order.

A handle in the stack that no longer names a node is skipped: the stack
and the node data can be briefly out of step in a live tree.
"""

import logging
from typing import Callable, Iterator, List, Optional, Protocol, Sequence, Tuple

from .models import Color, DrawPrimitive, EdgeGeometry, Transform
from .tree import UiNode

logger = logging.getLogger(__name__)


class NodeSource(Protocol):
    """Read-only lookup of nodes by handle (a UiTree satisfies this)."""

    def get(self, handle: int) -> Optional[UiNode]:
        ...


class ExtractedUiNodes:
    """The frame's draw primitives, handed to the rendering backend."""

    def __init__(self):
        self.uinodes: List[DrawPrimitive] = []

    def push(self, primitive: DrawPrimitive) -> None:
        self.uinodes.append(primitive)

    def clear(self) -> None:
        self.uinodes.clear()

    def sort_by_stack_index(self) -> None:
        """Stable sort on stack index, for merging the output of several passes."""
        self.uinodes.sort(key=lambda primitive: primitive.stack_index)

    def __len__(self) -> int:
        return len(self.uinodes)

    def __iter__(self) -> Iterator[DrawPrimitive]:
        return iter(self.uinodes)

    def __getitem__(self, index: int) -> DrawPrimitive:
        return self.uinodes[index]


def _extract_edges(
    extracted: ExtractedUiNodes,
    ui_stack: Sequence[int],
    nodes: NodeSource,
    kind: str,
    select: Callable[[UiNode], Optional[Tuple[EdgeGeometry, Color]]],
) -> int:
    emitted = 0
    for stack_index, entity in enumerate(ui_stack):
        node = nodes.get(entity)
        if node is None or node.content_sized:
            continue
        selected = select(node)
        if selected is None:
            continue
        geometry, color = selected

        # Skip invisible nodes
        if not node.computed_visible or color.a == 0.0:
            continue

        transform = node.global_transform
        for edge, rect in geometry:
            extracted.push(
                DrawPrimitive(
                    stack_index=stack_index,
                    transform=transform @ Transform.from_translation(rect.center),
                    color=color,
                    size=rect.size,
                    clip=node.clip,
                    entity=entity,
                    edge=edge,
                    kind=kind,
                )
            )
            emitted += 1
    return emitted


def _border_of(node: UiNode):
    if node.border_color is None:
        return None
    return node.calculated_border, node.border_color


def _outline_of(node: UiNode):
    if node.outline is None:
        return None
    return node.calculated_outline, node.outline_color


def extract_uinode_borders(
    extracted: ExtractedUiNodes, ui_stack: Sequence[int], nodes: NodeSource
) -> int:
    """
    Append a primitive for every visible border edge, in stack order.

    Args:
        extracted: Output list to append to
        ui_stack: Node handles in paint order
        nodes: Node lookup

    Returns:
        Number of primitives emitted
    """
    emitted = _extract_edges(extracted, ui_stack, nodes, "border", _border_of)
    logger.debug("extract_uinode_borders emitted %d primitive(s)", emitted)
    return emitted


def extract_uinode_outlines(
    extracted: ExtractedUiNodes, ui_stack: Sequence[int], nodes: NodeSource
) -> int:
    """Append a primitive for every visible outline edge, in stack order."""
    emitted = _extract_edges(extracted, ui_stack, nodes, "outline", _outline_of)
    logger.debug("extract_uinode_outlines emitted %d primitive(s)", emitted)
    return emitted
