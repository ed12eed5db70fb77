"""
Frame tracing infrastructure for uiborders.

This module provides data structures for capturing what happened during a
frame of the border pipeline. When debug mode is enabled, the plugin
records every pass it ran and every primitive the extraction passes
emitted.

This is primarily useful for:
1. Debugging geometry issues (seeing which nodes were recomputed and why
   an edge was or was not drawn)
2. Understanding the frame schedule (seeing the passes in order)
3. Writing targeted tests (verifying specific extraction decisions)

Usage:
    >>> plugin = BordersPlugin(BordersConfig(debug=True))
    >>> plugin.run_frame(tree)
    >>> trace = plugin.get_trace()
    >>> print(trace.summary())
    >>> trace.dump_to_file("frame_trace.txt")
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PrimitiveRecord:
    """
    Record of a single emitted draw primitive.

    Attributes:
        stack_index: Paint order index of the owning node
        entity: Handle of the owning node
        kind: "border" or "outline"
        edge: Edge name (e.g. "LEFT")
        x: World x coordinate of the rectangle's center
        y: World y coordinate of the rectangle's center
        width: Rectangle width
        height: Rectangle height
        source: The pass that emitted the primitive
    """

    stack_index: int
    entity: int
    kind: str
    edge: str
    x: float
    y: float
    width: float
    height: float
    source: str

    def __str__(self) -> str:
        return (
            f"#{self.stack_index} node {self.entity} {self.kind} {self.edge}: "
            f"center=({self.x:g},{self.y:g}) size={self.width:g}x{self.height:g} "
            f"from {self.source}"
        )


@dataclass
class PassRecord:
    """
    Snapshot of one pass of a frame.

    A frame runs these passes in order:
    1. propagate - host hierarchy state (visibility, transforms, clips)
    2. calculate_borders - border geometry for changed nodes
    3. calculate_outlines - outline geometry for changed nodes
    4. ui_stack - paint order
    5. extract_borders - border primitives
    6. extract_outlines - outline primitives

    Attributes:
        name: Name of the pass
        data: Counters and other values describing the pass
    """

    name: str
    data: Dict[str, Any]

    def __str__(self) -> str:
        lines = [f"=== Pass: {self.name} ==="]
        for key, value in self.data.items():
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        return "\n".join(lines)


@dataclass
class FrameTrace:
    """
    Complete trace of one frame.

    Attributes:
        frame: Frame number, starting at 1
        passes: Pass records in the order the passes ran
        primitives: Every primitive emitted during the frame
    """

    frame: int = 0
    passes: List[PassRecord] = field(default_factory=list)
    primitives: List[PrimitiveRecord] = field(default_factory=list)

    def add_pass(self, name: str, data: Dict[str, Any]) -> None:
        self.passes.append(PassRecord(name, data.copy()))

    def add_primitive(self, record: PrimitiveRecord) -> None:
        self.primitives.append(record)

    def get_pass(self, name: str) -> Optional[PassRecord]:
        """Get a specific pass record by name."""
        for record in self.passes:
            if record.name == name:
                return record
        return None

    def get_primitives_for(self, entity: int) -> List[PrimitiveRecord]:
        """All primitives emitted for one node."""
        return [p for p in self.primitives if p.entity == entity]

    def get_primitives_by_kind(self, kind: str) -> List[PrimitiveRecord]:
        return [p for p in self.primitives if p.kind == kind]

    def summary(self) -> str:
        """Generate a human-readable summary of the trace."""
        lines = [
            "=" * 60,
            "FRAME TRACE SUMMARY",
            "=" * 60,
            "",
            f"Frame: {self.frame}",
            f"Passes: {len(self.passes)}",
        ]
        for record in self.passes:
            lines.append(f"  {record.name}")

        lines.extend(["", f"Total primitives: {len(self.primitives)}"])

        kind_counts: Dict[str, int] = {}
        for p in self.primitives:
            kind_counts[p.kind] = kind_counts.get(p.kind, 0) + 1
        for kind, count in sorted(kind_counts.items()):
            lines.append(f"  {kind}: {count}")

        return "\n".join(lines)

    def dump(self) -> str:
        """Summary followed by every pass record and every primitive."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]

        lines.append("PASSES:")
        lines.append("-" * 40)
        for record in self.passes:
            lines.append(str(record))
            lines.append("")

        lines.append("PRIMITIVES:")
        lines.append("-" * 40)
        for p in self.primitives:
            lines.append(str(p))

        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
