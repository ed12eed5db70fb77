"""Tests for the PNG renderer module."""

import dataclasses
import os
import tempfile

from uiborders import (
    BordersPlugin,
    Color,
    Rect,
    UiRect,
    Val,
    Vec2,
)
from uiborders.png_renderer import PNGRenderer, render_to_png


def _frame(tree):
    tree.spawn(
        size=Vec2(20, 20),
        translation=Vec2(20, 20),
        border=UiRect.all(Val.px(2)),
        border_color=Color.RED,
    )
    return BordersPlugin().run_frame(tree)


class TestPNGRenderer:
    def test_border_pixels(self, tree):
        img = PNGRenderer(width=40, height=40).render_image(_frame(tree))

        assert img.size == (40, 40)
        assert img.getpixel((10, 10)) == (255, 0, 0, 255)
        assert img.getpixel((29, 29)) == (255, 0, 0, 255)
        # Inside the border ring
        assert img.getpixel((20, 20)) == (0, 0, 0, 255)
        # Outside the node
        assert img.getpixel((5, 5)) == (0, 0, 0, 255)

    def test_scale(self, tree):
        img = PNGRenderer(width=40, height=40, scale=2).render_image(_frame(tree))
        assert img.size == (80, 80)
        assert img.getpixel((20, 20)) == (255, 0, 0, 255)

    def test_clip_limits_drawing(self, tree):
        primitives = list(_frame(tree))
        clipped = [
            dataclasses.replace(p, clip=Rect.from_corners(0, 0, 20, 40))
            for p in primitives
        ]
        img = PNGRenderer(width=40, height=40).render_image(clipped)
        assert img.getpixel((10, 20)) == (255, 0, 0, 255)
        assert img.getpixel((29, 20)) == (0, 0, 0, 255)

    def test_render_to_png(self, tree):
        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            output_path = f.name

        try:
            result = render_to_png(_frame(tree), output_path, width=40, height=40)
            assert result == output_path
            assert os.path.exists(output_path)
            assert os.path.getsize(output_path) > 0
        finally:
            if os.path.exists(output_path):
                os.unlink(output_path)

    def test_empty_frame(self):
        img = PNGRenderer(width=10, height=10).render_image([])
        assert img.getpixel((0, 0)) == (0, 0, 0, 255)
