"""
Component presets for spawning bordered and outlined nodes.

Each bundle is a plain dataclass whose ``components()`` returns the UiNode
fields it sets, so bundles can be combined in ``UiTree.spawn``:

    >>> tree.spawn(
    ...     BorderedNodeBundle(size=Vec2(50, 50), border=UiRect.all(Val.px(10))),
    ...     OutlineBundle.new(UiRect.all(Val.px(5)), Color.BLUE),
    ... )
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .models import Color, UiRect, Val, Vec2


@dataclass
class BorderBundle:
    """Adds a border color to a node so its border is drawn."""

    border_color: Color = Color.WHITE

    @classmethod
    def new(cls, color: Color) -> "BorderBundle":
        return cls(border_color=color)

    def components(self) -> Dict[str, Any]:
        return {"border_color": self.border_color}


@dataclass
class OutlineBundle:
    """Adds an outline that is drawn outside the node's box."""

    outline: UiRect = field(default_factory=UiRect)
    outline_color: Color = Color.WHITE

    @classmethod
    def new(cls, edges: UiRect, color: Color) -> "OutlineBundle":
        return cls(outline=edges, outline_color=color)

    @classmethod
    def all(cls, color: Color, thickness: Val) -> "OutlineBundle":
        """Outline of the same thickness on every edge."""
        return cls(outline=UiRect.all(thickness), outline_color=color)

    def components(self) -> Dict[str, Any]:
        return {"outline": self.outline, "outline_color": self.outline_color}


@dataclass
class BorderedNodeBundle:
    """
    A basic UI node with a border.

    The background is transparent and the border white unless set.
    """

    size: Vec2 = field(default_factory=Vec2)
    border: UiRect = field(default_factory=UiRect)
    background_color: Color = Color.NONE
    border_color: Color = Color.WHITE
    translation: Vec2 = field(default_factory=Vec2)
    z_index: int = 0
    visible: bool = True

    def components(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "border": self.border,
            "background_color": self.background_color,
            "border_color": self.border_color,
            "translation": self.translation,
            "z_index": self.z_index,
            "visible": self.visible,
        }


@dataclass
class OutlinedNodeBundle(BorderedNodeBundle):
    """A bordered node that also carries an outline."""

    outline: UiRect = field(default_factory=UiRect)
    outline_color: Color = Color.WHITE

    def components(self) -> Dict[str, Any]:
        components = super().components()
        components["outline"] = self.outline
        components["outline_color"] = self.outline_color
        return components
