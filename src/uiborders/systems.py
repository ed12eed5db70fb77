"""
Change-driven recompute passes for border and outline geometry.

Each pass keeps a ChangeTracker holding, per node, the change ticks it saw
the last time it computed that node's geometry. A node is recomputed only
when its size, thickness spec, parent handle or its parent's size carries a
tick the tracker has not seen; every other node keeps its geometry as is.
"""

import logging
from typing import Dict, Hashable, Iterable, List, Optional

from .geometry import compute_border_edges, compute_outline_edges
from .tree import UiNode, UiTree

logger = logging.getLogger(__name__)


class ChangeTracker:
    """Remembers the last-seen change key of every node a pass has handled."""

    def __init__(self):
        self._seen: Dict[int, Hashable] = {}

    def __len__(self) -> int:
        return len(self._seen)

    def is_changed(self, handle: int, key: Hashable) -> bool:
        return self._seen.get(handle) != key

    def mark_seen(self, handle: int, key: Hashable) -> None:
        self._seen[handle] = key

    def forget(self, handles: Iterable[int]) -> None:
        for handle in handles:
            self._seen.pop(handle, None)

    def prune(self, tree: UiTree) -> None:
        """Drop entries for nodes that are no longer in the tree."""
        self.forget([handle for handle in self._seen if handle not in tree])

    def clear(self) -> None:
        self._seen.clear()


def _parent_state(tree: UiTree, node: UiNode):
    """Parent width and the parent part of the change key."""
    parent: Optional[UiNode] = tree.get_parent(node)
    if parent is None:
        return 0.0, None
    return parent.size.x, parent.size_tick


def calculate_borders(tree: UiTree, tracker: ChangeTracker) -> List[int]:
    """
    Recompute border geometry for nodes whose inputs changed.

    Nodes without a border color, and content-sized nodes, are skipped.

    Returns:
        Handles of the nodes that were recomputed
    """
    recomputed = []
    for node in tree:
        if not node.has_border or node.content_sized:
            continue
        parent_width, parent_size_tick = _parent_state(tree, node)
        key = (node.size_tick, node.border_tick, node.parent_tick, parent_size_tick)
        if not tracker.is_changed(node.handle, key):
            continue

        node.calculated_border.edges = compute_border_edges(
            node.size, node.border, parent_width
        )
        tracker.mark_seen(node.handle, key)
        recomputed.append(node.handle)

    tracker.prune(tree)
    logger.debug("calculate_borders recomputed %d node(s)", len(recomputed))
    return recomputed


def calculate_outlines(tree: UiTree, tracker: ChangeTracker) -> List[int]:
    """
    Recompute outline geometry for nodes whose inputs changed.

    Returns:
        Handles of the nodes that were recomputed
    """
    recomputed = []
    for node in tree:
        if not node.has_outline:
            continue
        parent_width, parent_size_tick = _parent_state(tree, node)
        key = (node.size_tick, node.outline_tick, node.parent_tick, parent_size_tick)
        if not tracker.is_changed(node.handle, key):
            continue

        node.calculated_outline.edges = compute_outline_edges(
            node.size, node.outline, parent_width
        )
        tracker.mark_seen(node.handle, key)
        recomputed.append(node.handle)

    tracker.prune(tree)
    logger.debug("calculate_outlines recomputed %d node(s)", len(recomputed))
    return recomputed
