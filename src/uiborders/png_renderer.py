"""
PNG Renderer module for draw primitives.

Rasterizes a frame's primitive list as solid, alpha-blended rectangles.
This is a debugging and snapshot aid, not a rendering backend: rotation
and shear in a primitive's transform are ignored.
"""

from typing import Iterable, Optional, Tuple

from PIL import Image, ImageDraw

from .models import DrawPrimitive, Rect


class PNGRenderer:
    """Renders draw primitives into an RGBA image."""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        scale: int = 1,
        bg_color: Tuple[int, int, int, int] = (0, 0, 0, 255),
    ):
        self.width = width
        self.height = height
        self.scale = scale
        self.bg_color = bg_color

    def _pixel_box(self, rect: Rect) -> Optional[Tuple[int, int, int, int]]:
        """
        Snap a world rectangle to an inclusive pixel box, None if empty.

        Shared edges snap to the same pixel boundary, so tiled rectangles
        never overdraw each other.
        """
        x0 = round(rect.min.x * self.scale)
        y0 = round(rect.min.y * self.scale)
        x1 = round(rect.max.x * self.scale)
        y1 = round(rect.max.y * self.scale)
        if x1 <= x0 or y1 <= y0:
            return None
        return x0, y0, x1 - 1, y1 - 1

    def render_image(self, primitives: Iterable[DrawPrimitive]) -> Image.Image:
        """
        Draw primitives in the order given.

        Args:
            primitives: Primitives sorted by stack index

        Returns:
            The rendered PIL image
        """
        img = Image.new(
            "RGBA", (self.width * self.scale, self.height * self.scale), self.bg_color
        )
        draw = ImageDraw.Draw(img, "RGBA")

        for primitive in primitives:
            rect = primitive.world_rect()
            if primitive.clip is not None:
                rect = rect.intersect(primitive.clip)
            if rect.is_empty():
                continue
            box = self._pixel_box(rect)
            if box is None:
                continue
            draw.rectangle(box, fill=primitive.color.to_rgba8())

        return img

    def render(
        self, primitives: Iterable[DrawPrimitive], output_path: str = "frame.png"
    ) -> str:
        """
        Render primitives and save them as a PNG file.

        Returns:
            Path to the saved PNG file
        """
        self.render_image(primitives).save(output_path)
        return output_path


def render_to_png(
    primitives: Iterable[DrawPrimitive],
    output_path: str,
    width: int = 800,
    height: int = 600,
    scale: int = 1,
) -> str:
    """Convenience wrapper around PNGRenderer.render."""
    renderer = PNGRenderer(width=width, height=height, scale=scale)
    return renderer.render(primitives, output_path)
