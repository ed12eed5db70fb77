"""
Edge-ring decomposition for borders and outlines.

A border and an outline are both a ring of up to four rectangles around a
node's box. The border ring is carved inward from the box bounds and eats
into the content area; the outline ring is carved outward and lies fully
outside the box. Both use the same tiling:

    +------+-----------------+-------+
    |      |       Top       |       |
    |      +-----------------+       |
    | Left |     (inner)     | Right |
    |      +-----------------+       |
    |      |     Bottom      |       |
    +------+-----------------+-------+

Left and Right span the full outer height, Top and Bottom span only the
inner width, so the four rectangles never overlap. When opposite edges are
thicker than the box, the inner rectangle collapses to a line instead of
inverting.
"""

from enum import Enum
from typing import List, Optional

from .models import Rect, UiRect, Vec2
from .thickness import ResolvedThickness, resolve_edges


class CarveDirection(Enum):
    """Which side of the box bounds the ring is carved on."""

    INWARD = "inward"
    OUTWARD = "outward"


def decompose_edge_ring(
    size: Vec2, thickness: ResolvedThickness, direction: CarveDirection
) -> List[Optional[Rect]]:
    """
    Split the ring around a box into Left, Right, Top and Bottom rectangles.

    Args:
        size: Size of the node's box
        thickness: Resolved thickness of each edge
        direction: INWARD for a border, OUTWARD for an outline

    Returns:
        Four entries in Edge order; an entry is None when its rectangle
        has no positive width or height
    """
    half_size = size * 0.5
    if direction is CarveDirection.OUTWARD:
        outer_min = -Vec2(half_size.x + thickness.left, half_size.y + thickness.top)
        outer_max = Vec2(
            half_size.x + thickness.right, half_size.y + thickness.bottom
        )
    else:
        outer_min = -half_size
        outer_max = half_size

    inner_min = outer_min + Vec2(thickness.left, thickness.top)
    inner_max = (outer_max - Vec2(thickness.right, thickness.bottom)).max(inner_min)

    candidates = [
        # Left
        Rect(outer_min, Vec2(inner_min.x, outer_max.y)),
        # Right
        Rect(Vec2(inner_max.x, outer_min.y), outer_max),
        # Top
        Rect(Vec2(inner_min.x, outer_min.y), Vec2(inner_max.x, inner_min.y)),
        # Bottom
        Rect(Vec2(inner_min.x, inner_max.y), Vec2(inner_max.x, outer_max.y)),
    ]
    return [None if rect.is_empty() else rect for rect in candidates]


def _compute_ring(
    size: Vec2, spec: UiRect, parent_width: float, direction: CarveDirection
) -> List[Optional[Rect]]:
    if size.x <= 0 or size.y <= 0:
        return [None] * 4
    thickness = resolve_edges(spec, parent_width)
    return decompose_edge_ring(size, thickness, direction)


def compute_border_edges(
    size: Vec2, border: UiRect, parent_width: float = 0.0
) -> List[Optional[Rect]]:
    """Border rectangles of a node; all None for a collapsed box."""
    return _compute_ring(size, border, parent_width, CarveDirection.INWARD)


def compute_outline_edges(
    size: Vec2, outline: UiRect, parent_width: float = 0.0
) -> List[Optional[Rect]]:
    """Outline rectangles of a node; all None for a collapsed box."""
    return _compute_ring(size, outline, parent_width, CarveDirection.OUTWARD)
