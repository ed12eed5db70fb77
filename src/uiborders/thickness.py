"""
Thickness resolution shared by borders and outlines.

Percentage thickness on every edge, including top and bottom, is resolved
against the width of the parent node. A node without a parent resolves
percentages against a width of 0.
"""

from dataclasses import dataclass

from .models import UiRect, Val, ValKind


@dataclass(frozen=True)
class ResolvedThickness:
    """Four non-negative edge thicknesses in layout units."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


def resolve_thickness(value: Val, parent_width: float) -> float:
    """
    Resolve a single thickness value to a length.

    Args:
        value: The thickness value
        parent_width: Width of the parent node's box, 0 if there is none

    Returns:
        The thickness, never negative
    """
    if value.kind is ValKind.PX:
        return value.value
    if value.kind is ValKind.PERCENT:
        return max(parent_width, 0.0) * value.value / 100.0
    return 0.0


def resolve_edges(spec: UiRect, parent_width: float) -> ResolvedThickness:
    """Resolve all four edges of a thickness specification."""
    return ResolvedThickness(
        left=resolve_thickness(spec.left, parent_width),
        right=resolve_thickness(spec.right, parent_width),
        top=resolve_thickness(spec.top, parent_width),
        bottom=resolve_thickness(spec.bottom, parent_width),
    )
