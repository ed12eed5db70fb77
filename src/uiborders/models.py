"""
Value types shared by the geometry, recompute and extraction stages.

This module contains the small immutable types that flow through the
border/outline pipeline: thickness values, per-edge specifications,
vectors, rectangles, colors, 2D transforms, the per-node edge geometry and
the draw primitives handed to a rendering backend.

Classes:
    Val: A single thickness value (fixed length, percent, or none).
    UiRect: Per-edge thickness specification.
    Vec2: 2D vector.
    Rect: Axis-aligned rectangle given by its min and max corners.
    Color: RGBA color with float channels.
    Transform: 2D affine transform.
    Edge: Index of one of the four edges.
    EdgeGeometry: Up to four edge rectangles of a border or outline.
    DrawPrimitive: One positioned, colored, clipped rectangle to draw.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, List, Optional, Tuple


class ValKind(Enum):
    """Kind of a thickness value."""

    UNDEFINED = "undefined"
    AUTO = "auto"
    PX = "px"
    PERCENT = "percent"


@dataclass(frozen=True)
class Val:
    """
    A thickness value for one edge.

    ``PX`` is a fixed length, ``PERCENT`` is a percentage of the parent
    node's width, and ``AUTO``/``UNDEFINED`` both mean zero thickness.
    Negative lengths and percentages are rejected at construction.
    """

    kind: ValKind = ValKind.UNDEFINED
    value: float = 0.0

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"thickness must be non-negative, got {self.value}")

    @classmethod
    def px(cls, length: float) -> "Val":
        return cls(ValKind.PX, float(length))

    @classmethod
    def percent(cls, percent: float) -> "Val":
        return cls(ValKind.PERCENT, float(percent))

    @classmethod
    def auto(cls) -> "Val":
        return cls(ValKind.AUTO)

    @classmethod
    def undefined(cls) -> "Val":
        return cls(ValKind.UNDEFINED)

    def __str__(self) -> str:
        if self.kind is ValKind.PX:
            return f"{self.value:g}px"
        if self.kind is ValKind.PERCENT:
            return f"{self.value:g}%"
        return self.kind.value


@dataclass(frozen=True)
class UiRect:
    """Per-edge thickness specification for a border or an outline."""

    left: Val = field(default_factory=Val.undefined)
    right: Val = field(default_factory=Val.undefined)
    top: Val = field(default_factory=Val.undefined)
    bottom: Val = field(default_factory=Val.undefined)

    @classmethod
    def all(cls, value: Val) -> "UiRect":
        """Same thickness on every edge."""
        return cls(left=value, right=value, top=value, bottom=value)

    @classmethod
    def horizontal(cls, value: Val) -> "UiRect":
        """Thickness on the left and right edges only."""
        return cls(left=value, right=value)

    @classmethod
    def vertical(cls, value: Val) -> "UiRect":
        """Thickness on the top and bottom edges only."""
        return cls(top=value, bottom=value)

    @classmethod
    def left_only(cls, value: Val) -> "UiRect":
        return cls(left=value)

    @classmethod
    def right_only(cls, value: Val) -> "UiRect":
        return cls(right=value)

    @classmethod
    def top_only(cls, value: Val) -> "UiRect":
        return cls(top=value)

    @classmethod
    def bottom_only(cls, value: Val) -> "UiRect":
        return cls(bottom=value)


@dataclass(frozen=True)
class Vec2:
    """2D vector in layout units."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def max(self, other: "Vec2") -> "Vec2":
        """Component-wise maximum."""
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def min(self, other: "Vec2") -> "Vec2":
        """Component-wise minimum."""
        return Vec2(min(self.x, other.x), min(self.y, other.y))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its min and max corners."""

    min: Vec2 = field(default_factory=Vec2)
    max: Vec2 = field(default_factory=Vec2)

    @classmethod
    def from_corners(cls, x0: float, y0: float, x1: float, y1: float) -> "Rect":
        return cls(Vec2(x0, y0), Vec2(x1, y1))

    @classmethod
    def from_center_size(cls, center: Vec2, size: Vec2) -> "Rect":
        half = size * 0.5
        return cls(center - half, center + half)

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @property
    def center(self) -> Vec2:
        return Vec2(
            (self.min.x + self.max.x) * 0.5, (self.min.y + self.max.y) * 0.5
        )

    def is_empty(self) -> bool:
        """True if the rectangle has no positive area."""
        return not (self.min.x < self.max.x and self.min.y < self.max.y)

    def intersect(self, other: "Rect") -> "Rect":
        """Intersection of two rectangles (may be empty)."""
        return Rect(self.min.max(other.min), self.max.min(other.max))

    def overlap_area(self, other: "Rect") -> float:
        """Area shared by both rectangles, 0 if they only touch."""
        overlap = self.intersect(other)
        if overlap.is_empty():
            return 0.0
        return overlap.width * overlap.height


@dataclass(frozen=True)
class Color:
    """RGBA color with channels in the range 0.0 to 1.0."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        """Convert to an 8-bit RGBA tuple, clamping each channel."""
        return tuple(  # type: ignore[return-value]
            max(0, min(255, round(c * 255))) for c in (self.r, self.g, self.b, self.a)
        )

    def with_alpha(self, a: float) -> "Color":
        return Color(self.r, self.g, self.b, a)


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0, 1.0)
Color.NONE = Color(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Transform:
    """
    2D affine transform.

    Maps a point (x, y) to (a*x + c*y + tx, b*x + d*y + ty). Composition
    with ``@`` applies the right-hand transform first, matching matrix
    multiplication.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def from_translation(cls, offset: Vec2) -> "Transform":
        return cls(tx=offset.x, ty=offset.y)

    @classmethod
    def from_scale(cls, sx: float, sy: Optional[float] = None) -> "Transform":
        return cls(a=sx, d=sx if sy is None else sy)

    def __matmul__(self, other: "Transform") -> "Transform":
        return Transform(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            tx=self.a * other.tx + self.c * other.ty + self.tx,
            ty=self.b * other.tx + self.d * other.ty + self.ty,
        )

    @property
    def translation(self) -> Vec2:
        return Vec2(self.tx, self.ty)

    @property
    def scale(self) -> Vec2:
        """Length of the transformed x and y basis vectors."""
        return Vec2(
            (self.a * self.a + self.b * self.b) ** 0.5,
            (self.c * self.c + self.d * self.d) ** 0.5,
        )

    def transform_point(self, point: Vec2) -> Vec2:
        return Vec2(
            self.a * point.x + self.c * point.y + self.tx,
            self.b * point.x + self.d * point.y + self.ty,
        )


class Edge(IntEnum):
    """Index of an edge inside an EdgeGeometry."""

    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3


@dataclass
class EdgeGeometry:
    """
    The calculated rectangles of a node's border or outline.

    ``edges`` always holds four entries indexed by ``Edge``. A ``None``
    entry marks an edge with no positive area that must not be drawn.
    Rectangles are in node-local coordinates centered on the node.
    """

    edges: List[Optional[Rect]] = field(default_factory=lambda: [None] * 4)

    def __getitem__(self, edge: Edge) -> Optional[Rect]:
        return self.edges[edge]

    def __iter__(self) -> Iterator[Tuple[Edge, Rect]]:
        """Iterate over the present rectangles in Left, Right, Top, Bottom order."""
        for edge in Edge:
            rect = self.edges[edge]
            if rect is not None:
                yield edge, rect

    def reset(self) -> None:
        self.edges = [None] * 4

    def is_empty(self) -> bool:
        return all(rect is None for rect in self.edges)


@dataclass(frozen=True)
class DrawPrimitive:
    """
    A single solid rectangle ready for the rendering backend.

    Attributes:
        stack_index: Position of the owning node in the paint order.
        transform: World transform of the rectangle's center.
        color: Fill color.
        size: Width and height of the rectangle.
        clip: Optional world-space clip rectangle.
        entity: Handle of the node the rectangle belongs to.
        edge: Which edge the rectangle draws.
        kind: "border" or "outline".
    """

    stack_index: int
    transform: Transform
    color: Color
    size: Vec2
    clip: Optional[Rect] = None
    entity: int = -1
    edge: Edge = Edge.LEFT
    kind: str = "border"

    def world_rect(self) -> Rect:
        """Axis-aligned world rectangle, ignoring any rotation in the transform."""
        scale = self.transform.scale
        return Rect.from_center_size(
            self.transform.translation,
            Vec2(self.size.x * scale.x, self.size.y * scale.y),
        )
