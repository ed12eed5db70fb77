"""Centralized configuration for the border pipeline."""

from dataclasses import dataclass


@dataclass
class BordersConfig:
    """
    Configuration for BordersPlugin.

    Attributes:
        borders: Run the border recompute and extraction passes.
        outlines: Run the outline recompute and extraction passes.
        propagate: Run the host hierarchy passes (visibility, transforms,
            clipping) at the start of each frame. Disable when a host
            system already maintains them.
        sort_output: Stable-sort the frame's primitives on stack index after
            both extraction passes.
        debug: Record a FrameTrace for each frame.
    """

    borders: bool = True
    outlines: bool = True
    propagate: bool = True
    sort_output: bool = True
    debug: bool = False
