"""
Frame schedule for the border pipeline.

BordersPlugin runs the passes of one frame in a fixed order:

    propagate -> calculate_borders -> calculate_outlines
              -> ui_stack -> extract_borders -> extract_outlines

The recompute passes run after the host has finalized node sizes, and each
extraction pass runs after its recompute pass. The primitive list is built
fresh every frame.

Example:
    >>> plugin = BordersPlugin()
    >>> tree = UiTree()
    >>> tree.spawn(BorderedNodeBundle(size=Vec2(100, 100),
    ...                               border=UiRect.all(Val.px(10))))
    >>> extracted = plugin.run_frame(tree)
    >>> len(extracted)
    4
"""

import logging
from typing import Optional, Sequence

from .config import BordersConfig
from .debug import TracedExtractedNodes
from .extract import ExtractedUiNodes, extract_uinode_borders, extract_uinode_outlines
from .stack import (
    build_ui_stack,
    propagate_transforms,
    propagate_visibility,
    update_clipping,
)
from .systems import ChangeTracker, calculate_borders, calculate_outlines
from .tracer import FrameTrace
from .tree import UiTree

logger = logging.getLogger(__name__)


class BordersPlugin:
    """
    Runs border and outline recompute and extraction once per frame.

    The plugin owns the change trackers of both recompute passes, so one
    plugin instance should be used per tree.
    """

    def __init__(self, config: Optional[BordersConfig] = None):
        self.config = config or BordersConfig()
        self.border_tracker = ChangeTracker()
        self.outline_tracker = ChangeTracker()
        self.frame = 0
        self._trace: Optional[FrameTrace] = None

    def get_trace(self) -> Optional[FrameTrace]:
        """Trace of the last frame, or None if debug mode is off."""
        return self._trace

    def update(self, tree: UiTree, trace: Optional[FrameTrace] = None) -> None:
        """Run the propagate and recompute passes."""
        if self.config.propagate:
            propagate_visibility(tree)
            propagate_transforms(tree)
            update_clipping(tree)
            if trace is not None:
                trace.add_pass("propagate", {"nodes": len(tree)})

        if self.config.borders:
            recomputed = calculate_borders(tree, self.border_tracker)
            if trace is not None:
                trace.add_pass(
                    "calculate_borders",
                    {"recomputed": len(recomputed), "handles": recomputed},
                )

        if self.config.outlines:
            recomputed = calculate_outlines(tree, self.outline_tracker)
            if trace is not None:
                trace.add_pass(
                    "calculate_outlines",
                    {"recomputed": len(recomputed), "handles": recomputed},
                )

    def extract(
        self,
        tree: UiTree,
        ui_stack: Sequence[int],
        trace: Optional[FrameTrace] = None,
    ) -> ExtractedUiNodes:
        """Run both extraction passes over a paint-order stack."""
        extracted = ExtractedUiNodes()
        sink = extracted if trace is None else TracedExtractedNodes(extracted, trace)

        if self.config.borders:
            if trace is not None:
                sink.set_source("extract_uinode_borders")
            emitted = extract_uinode_borders(sink, ui_stack, tree)
            if trace is not None:
                trace.add_pass("extract_borders", {"emitted": emitted})

        if self.config.outlines:
            if trace is not None:
                sink.set_source("extract_uinode_outlines")
            emitted = extract_uinode_outlines(sink, ui_stack, tree)
            if trace is not None:
                trace.add_pass("extract_outlines", {"emitted": emitted})

        if self.config.sort_output:
            extracted.sort_by_stack_index()
        return extracted

    def run_frame(
        self, tree: UiTree, ui_stack: Optional[Sequence[int]] = None
    ) -> ExtractedUiNodes:
        """
        Run one full frame.

        Args:
            tree: The UI tree, with node sizes already finalized
            ui_stack: Paint order to extract in; built from the tree if None

        Returns:
            The frame's draw primitives
        """
        self.frame += 1
        trace = FrameTrace(frame=self.frame) if self.config.debug else None

        self.update(tree, trace)

        if ui_stack is None:
            ui_stack = build_ui_stack(tree).uinodes
            if trace is not None:
                trace.add_pass("ui_stack", {"nodes": len(ui_stack)})

        extracted = self.extract(tree, ui_stack, trace)
        self._trace = trace
        logger.debug("frame %d: %d primitive(s)", self.frame, len(extracted))
        return extracted
