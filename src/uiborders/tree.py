"""
Arena of UI nodes addressed by integer handles.

The tree stands in for the scene storage of a host UI system. Each node
carries the inputs the border pipeline reads (box size, thickness specs,
colors, visibility, transform, clip) and the two EdgeGeometry outputs it
writes. Parent links are plain handles, so looking up a parent's width is
an indexed read.

Inputs that gate recomputation (size, border, outline, parent) must be
changed through the UiTree setters: each setter stamps the node with the
tree's next change tick, which the recompute passes compare against the
ticks they last saw.
"""

from dataclasses import dataclass, field, fields
from typing import Iterator, List, Optional

from .models import Color, EdgeGeometry, Rect, Transform, UiRect, Vec2


class NodeError(KeyError):
    """Raised when a handle does not name a live node."""


@dataclass
class UiNode:
    """
    A single UI node.

    Attributes:
        handle: Index of the node in its tree.
        size: Resolved box size, owned by the layout engine.
        parent: Handle of the parent node, or None for a root.
        children: Child handles in insertion order.
        border: Border thickness per edge.
        border_color: Border color; None when the node draws no border.
        outline: Outline thickness per edge; None when the node has no outline.
        outline_color: Outline color.
        background_color: Fill color of the box (drawn by the host).
        visible: Node's own visibility flag.
        computed_visible: Visibility after inheriting hidden ancestors.
        z_index: Paint order among siblings; higher paints later.
        translation: Offset of the node's center from its parent's center.
        global_transform: World transform of the node's center.
        clip_children: Whether descendants are clipped to this node's box.
        clip: World-space clip rectangle inherited from ancestors.
        content_sized: True for nodes sized from their content (e.g. text),
            which never draw a border.
        calculated_border: Border rectangles, written by the recompute pass.
        calculated_outline: Outline rectangles, written by the recompute pass.
    """

    handle: int
    size: Vec2 = field(default_factory=Vec2)
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    border: UiRect = field(default_factory=UiRect)
    border_color: Optional[Color] = None
    outline: Optional[UiRect] = None
    outline_color: Color = Color.WHITE
    background_color: Color = Color.NONE
    visible: bool = True
    computed_visible: bool = True
    z_index: int = 0
    translation: Vec2 = field(default_factory=Vec2)
    global_transform: Transform = field(default_factory=Transform)
    clip_children: bool = False
    clip: Optional[Rect] = None
    content_sized: bool = False
    calculated_border: EdgeGeometry = field(default_factory=EdgeGeometry)
    calculated_outline: EdgeGeometry = field(default_factory=EdgeGeometry)

    # Change ticks
    size_tick: int = 0
    border_tick: int = 0
    outline_tick: int = 0
    parent_tick: int = 0

    @property
    def has_border(self) -> bool:
        return self.border_color is not None

    @property
    def has_outline(self) -> bool:
        return self.outline is not None


_SPAWN_FIELDS = {
    f.name
    for f in fields(UiNode)
    if f.name
    not in (
        "handle",
        "parent",
        "children",
        "calculated_border",
        "calculated_outline",
        "size_tick",
        "border_tick",
        "outline_tick",
        "parent_tick",
    )
}


class UiTree:
    """
    Arena of UI nodes.

    Handles are indices into the arena and are never reused, so a handle
    held after its node was despawned reads as missing rather than naming
    a different node.

    Example:
        >>> tree = UiTree()
        >>> root = tree.spawn(size=Vec2(200, 200))
        >>> child = tree.spawn(
        ...     parent=root,
        ...     size=Vec2(100, 100),
        ...     border=UiRect.all(Val.px(10)),
        ...     border_color=Color.RED,
        ... )
    """

    def __init__(self):
        self._nodes: List[Optional[UiNode]] = []
        self._tick = 0

    def _next_tick(self) -> int:
        self._tick += 1
        return self._tick

    @property
    def tick(self) -> int:
        """The most recent change tick handed out."""
        return self._tick

    def spawn(self, *bundles, parent: Optional[int] = None, **components) -> int:
        """
        Create a node and return its handle.

        Args:
            *bundles: Bundle objects whose ``components()`` are applied in order
            parent: Optional parent handle
            **components: UiNode fields, applied after the bundles

        Returns:
            The new node's handle

        Raises:
            NodeError: If ``parent`` is not a live node
            TypeError: If a component name is not a UiNode field
        """
        if parent is not None:
            self[parent]

        values = {}
        for bundle in bundles:
            values.update(bundle.components())
        values.update(components)
        unknown = set(values) - _SPAWN_FIELDS
        if unknown:
            raise TypeError(f"Unknown node components: {sorted(unknown)}")

        handle = len(self._nodes)
        tick = self._next_tick()
        node = UiNode(
            handle=handle,
            parent=parent,
            size_tick=tick,
            border_tick=tick,
            outline_tick=tick,
            parent_tick=tick,
            **values,
        )
        self._nodes.append(node)
        if parent is not None:
            self._nodes[parent].children.append(handle)
        return handle

    def despawn(self, handle: int) -> List[int]:
        """
        Remove a node and all of its descendants.

        Returns:
            Handles of every removed node
        """
        node = self[handle]
        if node.parent is not None:
            parent = self.get(node.parent)
            if parent is not None and handle in parent.children:
                parent.children.remove(handle)

        removed = []
        pending = [handle]
        while pending:
            current = pending.pop()
            current_node = self._nodes[current]
            if current_node is None:
                continue
            pending.extend(current_node.children)
            self._nodes[current] = None
            removed.append(current)
        return removed

    def get(self, handle: int) -> Optional[UiNode]:
        """Return the node for a handle, or None if it is not live."""
        if 0 <= handle < len(self._nodes):
            return self._nodes[handle]
        return None

    def __getitem__(self, handle: int) -> UiNode:
        node = self.get(handle)
        if node is None:
            raise NodeError(handle)
        return node

    def __contains__(self, handle: int) -> bool:
        return self.get(handle) is not None

    def __iter__(self) -> Iterator[UiNode]:
        return (node for node in self._nodes if node is not None)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def handles(self) -> List[int]:
        return [node.handle for node in self]

    def roots(self) -> List[UiNode]:
        """Nodes without a live parent, in insertion order."""
        return [node for node in self if self.get_parent(node) is None]

    def get_parent(self, node: UiNode) -> Optional[UiNode]:
        """The node's parent, or None for a root or a dangling parent handle."""
        if node.parent is None:
            return None
        return self.get(node.parent)

    def parent_width(self, handle: int) -> float:
        """Box width of a node's parent, 0 when there is no live parent."""
        parent = self.get_parent(self[handle])
        return parent.size.x if parent is not None else 0.0

    def ancestors(self, handle: int) -> Iterator[UiNode]:
        """Walk from the node's parent up to its root."""
        node = self.get_parent(self[handle])
        while node is not None:
            yield node
            node = self.get_parent(node)

    # Setters for inputs that gate recomputation

    def set_size(self, handle: int, size: Vec2) -> None:
        node = self[handle]
        if node.size != size:
            node.size = size
            node.size_tick = self._next_tick()

    def set_border(self, handle: int, border: UiRect) -> None:
        node = self[handle]
        if node.border != border:
            node.border = border
            node.border_tick = self._next_tick()

    def set_outline(self, handle: int, outline: Optional[UiRect]) -> None:
        node = self[handle]
        if node.outline != outline:
            node.outline = outline
            node.outline_tick = self._next_tick()

    def set_parent(self, handle: int, parent: Optional[int]) -> None:
        """
        Move a node under a new parent, or make it a root with None.

        Raises:
            NodeError: If either handle is not live
            ValueError: If the move would make a node its own ancestor
        """
        node = self[handle]
        if parent is not None:
            if parent == handle or any(
                ancestor.handle == handle for ancestor in self.ancestors(parent)
            ):
                raise ValueError(
                    f"Cannot parent node {handle} under its descendant {parent}"
                )
            new_parent = self[parent]
        if node.parent == parent:
            return

        old_parent = self.get(node.parent) if node.parent is not None else None
        if old_parent is not None and handle in old_parent.children:
            old_parent.children.remove(handle)
        if parent is not None:
            new_parent.children.append(handle)
        node.parent = parent
        node.parent_tick = self._next_tick()

    def touch(self, handle: int) -> None:
        """Mark every recompute input of a node as changed."""
        node = self[handle]
        tick = self._next_tick()
        node.size_tick = node.border_tick = node.outline_tick = node.parent_tick = tick
