"""
Debug utilities for uiborders.

This module provides tools for understanding and troubleshooting border and
outline output. The main component is TracedExtractedNodes, which wraps the
frame's primitive list and logs every primitive pushed into it.

Key Components:
- TracedExtractedNodes: output list wrapper that records every push
- primitive_diff: compare two primitive lists entry by entry
- GeometryInspector: read-only queries over a tree's calculated geometry

Usage:
    # TracedExtractedNodes is used internally by BordersPlugin when
    # BordersConfig.debug is set. You typically access traces via the plugin:

    >>> plugin = BordersPlugin(BordersConfig(debug=True))
    >>> plugin.run_frame(tree)
    >>> trace = plugin.get_trace()

    # For comparing expected vs actual output:
    >>> from uiborders.debug import primitive_diff
    >>> print(primitive_diff(expected, actual))
"""

from typing import Iterator, List, Protocol, Sequence, Tuple

from .extract import ExtractedUiNodes
from .models import DrawPrimitive, Edge, Rect
from .tracer import FrameTrace, PrimitiveRecord
from .tree import UiTree


class PrimitiveSink(Protocol):
    """Protocol for ExtractedUiNodes-like objects."""

    def push(self, primitive: DrawPrimitive) -> None:
        """Append a primitive."""
        ...


class TracedExtractedNodes:
    """
    Output list wrapper that records every pushed primitive to a FrameTrace.

    The wrapper keeps a "current source" naming the pass that is pushing.
    Use set_source() before running a pass.

    Example:
        >>> extracted = ExtractedUiNodes()
        >>> trace = FrameTrace()
        >>> traced = TracedExtractedNodes(extracted, trace)
        >>> traced.set_source("extract_uinode_borders")
        >>> extract_uinode_borders(traced, stack.uinodes, tree)
        >>> print(trace.primitives[-1])
    """

    def __init__(self, extracted: ExtractedUiNodes, trace: FrameTrace):
        self._extracted = extracted
        self._trace = trace
        self._current_source = "unknown"

    @property
    def uinodes(self) -> List[DrawPrimitive]:
        return self._extracted.uinodes

    def set_source(self, source: str) -> None:
        self._current_source = source

    def push(self, primitive: DrawPrimitive) -> None:
        """Append a primitive to the wrapped list and record it."""
        self._extracted.push(primitive)
        translation = primitive.transform.translation
        self._trace.add_primitive(
            PrimitiveRecord(
                stack_index=primitive.stack_index,
                entity=primitive.entity,
                kind=primitive.kind,
                edge=primitive.edge.name,
                x=translation.x,
                y=translation.y,
                width=primitive.size.x,
                height=primitive.size.y,
                source=self._current_source,
            )
        )

    def __len__(self) -> int:
        return len(self._extracted)

    def __iter__(self) -> Iterator[DrawPrimitive]:
        return iter(self._extracted)


def describe_primitive(primitive: DrawPrimitive) -> str:
    """One-line description of a primitive, stable across runs."""
    t = primitive.transform.translation
    clip = ""
    if primitive.clip is not None:
        c = primitive.clip
        clip = f" clip=[{c.min.x:g},{c.min.y:g} {c.max.x:g},{c.max.y:g}]"
    return (
        f"#{primitive.stack_index} {primitive.kind} {primitive.edge.name} "
        f"node={primitive.entity} at=({t.x:g},{t.y:g}) "
        f"size={primitive.size.x:g}x{primitive.size.y:g} "
        f"rgba={primitive.color.to_rgba8()}{clip}"
    )


def primitive_diff(
    expected: Sequence[DrawPrimitive], actual: Sequence[DrawPrimitive]
) -> str:
    """
    Generate an entry-by-entry diff between two primitive lists.

    Useful for debugging test failures where the emitted primitives differ
    from a snapshot. Matching entries are omitted.

    Args:
        expected: The expected primitives
        actual: The actual primitives

    Returns:
        A formatted string showing the differences
    """
    output: List[str] = ["=" * 60, "PRIMITIVE DIFF", "=" * 60]

    exp_lines = [describe_primitive(p) for p in expected]
    act_lines = [describe_primitive(p) for p in actual]
    max_len = max(len(exp_lines), len(act_lines))

    diff_indices = [
        i
        for i in range(max_len)
        if (exp_lines[i] if i < len(exp_lines) else None)
        != (act_lines[i] if i < len(act_lines) else None)
    ]

    if not diff_indices:
        output.append("No differences found.")
        return "\n".join(output)

    output.append(f"Found {len(diff_indices)} differing entr(y/ies)")
    if len(exp_lines) != len(act_lines):
        output.append(f"Expected {len(exp_lines)} primitive(s), got {len(act_lines)}")
    output.append("")

    for i in diff_indices:
        exp_line = exp_lines[i] if i < len(exp_lines) else "<missing>"
        act_line = act_lines[i] if i < len(act_lines) else "<missing>"
        output.append(f"{i:3d}: E {exp_line}")
        output.append(f"     A {act_line}")

    return "\n".join(output)


class GeometryInspector:
    """
    Read-only queries over the calculated geometry of a tree.

    Provides methods for listing a node's edge rectangles and checking the
    tiling invariants of a border or outline ring.
    """

    def __init__(self, tree: UiTree):
        self._tree = tree

    def edges(self, handle: int, kind: str = "border") -> List[Tuple[Edge, Rect]]:
        """Present edge rectangles of a node, in Edge order."""
        node = self._tree[handle]
        if kind == "border":
            geometry = node.calculated_border
        else:
            geometry = node.calculated_outline
        return list(geometry)

    def overlaps(self, handle: int, kind: str = "border") -> List[Tuple[Edge, Edge]]:
        """Pairs of edges whose rectangles share positive area."""
        present = self.edges(handle, kind)
        pairs = []
        for i, (edge_a, rect_a) in enumerate(present):
            for edge_b, rect_b in present[i + 1 :]:
                if rect_a.overlap_area(rect_b) > 0:
                    pairs.append((edge_a, edge_b))
        return pairs

    def covered_area(self, handle: int, kind: str = "border") -> float:
        """Total area of the edge rectangles."""
        return sum(rect.width * rect.height for _, rect in self.edges(handle, kind))

    def describe(self, handle: int) -> str:
        """Multi-line listing of both rings of a node."""
        node = self._tree[handle]
        lines = [f"node {handle} size={node.size.x:g}x{node.size.y:g}"]
        for kind in ("border", "outline"):
            for edge, rect in self.edges(handle, kind):
                lines.append(
                    f"  {kind} {edge.name}: "
                    f"[{rect.min.x:g},{rect.min.y:g}] -> "
                    f"[{rect.max.x:g},{rect.max.y:g}]"
                )
        return "\n".join(lines)
