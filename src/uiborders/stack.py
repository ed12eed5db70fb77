"""
Host-side hierarchy passes: paint order, visibility, transforms and clipping.

These passes belong to the host UI system rather than to the border
pipeline. They are provided so a UiTree can be driven end to end without a
separate layout engine; the extraction passes only read their results.

Uses networkx for:
- Hierarchy representation (parent -> child edges under a virtual root)
- Depth-first paint ordering with z-index sorted siblings
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import networkx as nx

from .models import Rect, Transform, Vec2
from .tree import UiNode, UiTree

# Virtual root that every top-level node hangs from
_WINDOW = -1


@dataclass
class UiStack:
    """
    Paint order of UI nodes.

    ``uinodes[0]`` is painted first (furthest back); each later handle is
    painted over the ones before it. The position of a handle in the list
    is its stack index.
    """

    uinodes: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.uinodes)


def hierarchy_graph(tree: UiTree) -> nx.DiGraph:
    """
    Build a parent -> child graph of the tree under a virtual window root.

    Nodes with a missing or dangling parent hang directly from the root.
    Each node records its rank among its siblings as the ``rank`` attribute.
    """
    graph = nx.DiGraph()
    graph.add_node(_WINDOW, rank=0)
    for rank, root in enumerate(tree.roots()):
        graph.add_node(root.handle, rank=rank)
        graph.add_edge(_WINDOW, root.handle)
    for node in tree:
        for rank, child in enumerate(node.children):
            if child in tree:
                graph.add_node(child, rank=rank)
                graph.add_edge(node.handle, child)
    return graph


def build_ui_stack(tree: UiTree) -> UiStack:
    """
    Compute the paint order of every node in the tree.

    Parents are painted before their children. Siblings are painted in
    ascending z-index, ties keeping their insertion order.
    """
    graph = hierarchy_graph(tree)

    def sort_siblings(handles):
        return sorted(
            handles, key=lambda h: (tree[h].z_index, graph.nodes[h]["rank"])
        )

    order = nx.dfs_preorder_nodes(graph, source=_WINDOW, sort_neighbors=sort_siblings)
    return UiStack(uinodes=[handle for handle in order if handle != _WINDOW])


def _walk(tree: UiTree) -> List[UiNode]:
    """Nodes in parent-before-child order."""
    pending = list(reversed(tree.roots()))
    ordered = []
    while pending:
        node = pending.pop()
        ordered.append(node)
        children = [tree.get(child) for child in node.children]
        pending.extend(child for child in reversed(children) if child is not None)
    return ordered


def propagate_visibility(tree: UiTree) -> None:
    """A node is computed visible only if it and all its ancestors are visible."""
    for node in _walk(tree):
        parent = tree.get_parent(node)
        inherited = parent.computed_visible if parent is not None else True
        node.computed_visible = node.visible and inherited


def propagate_transforms(tree: UiTree) -> None:
    """Compose each node's local translation with its parent's world transform."""
    for node in _walk(tree):
        parent = tree.get_parent(node)
        base = parent.global_transform if parent is not None else Transform.identity()
        node.global_transform = base @ Transform.from_translation(node.translation)


def node_world_rect(node: UiNode) -> Rect:
    """World-space box of a node, ignoring rotation."""
    scale = node.global_transform.scale
    return Rect.from_center_size(
        node.global_transform.translation,
        Vec2(node.size.x * scale.x, node.size.y * scale.y),
    )


def update_clipping(tree: UiTree) -> None:
    """
    Propagate clip rectangles down the hierarchy.

    A node's clip is the region its ancestors allow it to draw in: the
    intersection of the boxes of every ancestor with ``clip_children`` set.
    Run after ``propagate_transforms``.
    """
    child_clips: Dict[int, Optional[Rect]] = {}
    for node in _walk(tree):
        parent = tree.get_parent(node)
        node.clip = child_clips.get(parent.handle) if parent is not None else None

        if node.clip_children:
            own = node_world_rect(node)
            child_clips[node.handle] = (
                own if node.clip is None else node.clip.intersect(own)
            )
        else:
            child_clips[node.handle] = node.clip
