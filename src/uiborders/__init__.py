"""
uiborders - Border and outline geometry for retained-mode UI trees

Computes up to four non-overlapping edge rectangles per UI node for its
border (carved inward from the box) and outline (carved outward, outside
the layout box), recomputes them only when their inputs change, and
extracts them every frame into an ordered list of draw primitives.

Example:
    >>> from uiborders import BordersPlugin, BorderedNodeBundle, UiTree
    >>> from uiborders import UiRect, Val, Vec2
    >>> tree = UiTree()
    >>> tree.spawn(BorderedNodeBundle(size=Vec2(100, 100),
    ...                               border=UiRect.all(Val.px(10))))
    >>> primitives = BordersPlugin().run_frame(tree)

Debug Mode Example:
    >>> plugin = BordersPlugin(BordersConfig(debug=True))
    >>> plugin.run_frame(tree)
    >>> print(plugin.get_trace().summary())
"""

from .bundles import BorderBundle, BorderedNodeBundle, OutlineBundle, OutlinedNodeBundle
from .config import BordersConfig
from .debug import GeometryInspector, TracedExtractedNodes, primitive_diff
from .extract import ExtractedUiNodes, extract_uinode_borders, extract_uinode_outlines
from .geometry import (
    CarveDirection,
    compute_border_edges,
    compute_outline_edges,
    decompose_edge_ring,
)
from .models import (
    Color,
    DrawPrimitive,
    Edge,
    EdgeGeometry,
    Rect,
    Transform,
    UiRect,
    Val,
    ValKind,
    Vec2,
)
from .plugin import BordersPlugin
from .png_renderer import PNGRenderer, render_to_png
from .stack import (
    UiStack,
    build_ui_stack,
    propagate_transforms,
    propagate_visibility,
    update_clipping,
)
from .systems import ChangeTracker, calculate_borders, calculate_outlines
from .thickness import ResolvedThickness, resolve_edges, resolve_thickness
from .tracer import FrameTrace, PassRecord, PrimitiveRecord
from .tree import NodeError, UiNode, UiTree

__version__ = "0.1.0"

__all__ = [
    # Main API
    "BordersPlugin",
    "BordersConfig",
    # Tree
    "UiTree",
    "UiNode",
    "NodeError",
    # Bundles
    "BorderBundle",
    "BorderedNodeBundle",
    "OutlineBundle",
    "OutlinedNodeBundle",
    # Values
    "Val",
    "ValKind",
    "UiRect",
    "Vec2",
    "Rect",
    "Color",
    "Transform",
    "Edge",
    "EdgeGeometry",
    "DrawPrimitive",
    # Geometry
    "ResolvedThickness",
    "resolve_thickness",
    "resolve_edges",
    "CarveDirection",
    "decompose_edge_ring",
    "compute_border_edges",
    "compute_outline_edges",
    # Passes
    "ChangeTracker",
    "calculate_borders",
    "calculate_outlines",
    "ExtractedUiNodes",
    "extract_uinode_borders",
    "extract_uinode_outlines",
    # Host hierarchy
    "UiStack",
    "build_ui_stack",
    "propagate_visibility",
    "propagate_transforms",
    "update_clipping",
    # Rendering aid
    "PNGRenderer",
    "render_to_png",
    # Debug/Tracing (for development and debugging)
    "FrameTrace",
    "PassRecord",
    "PrimitiveRecord",
    "TracedExtractedNodes",
    "GeometryInspector",
    "primitive_diff",
]
