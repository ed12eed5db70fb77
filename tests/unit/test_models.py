"""Unit tests for the models module."""

import pytest

from uiborders.models import (
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


class TestVal:
    """Tests for Val constructors."""

    def test_px(self):
        val = Val.px(10)
        assert val.kind is ValKind.PX
        assert val.value == 10.0

    def test_percent(self):
        val = Val.percent(25)
        assert val.kind is ValKind.PERCENT
        assert val.value == 25.0

    def test_default_is_undefined(self):
        assert Val().kind is ValKind.UNDEFINED

    def test_auto(self):
        assert Val.auto().kind is ValKind.AUTO

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Val.px(-1)
        with pytest.raises(ValueError):
            Val.percent(-5)

    def test_str(self):
        assert str(Val.px(10)) == "10px"
        assert str(Val.percent(12.5)) == "12.5%"
        assert str(Val.auto()) == "auto"


class TestUiRect:
    """Tests for UiRect constructors."""

    def test_default_all_undefined(self):
        rect = UiRect()
        for value in (rect.left, rect.right, rect.top, rect.bottom):
            assert value.kind is ValKind.UNDEFINED

    def test_all(self):
        rect = UiRect.all(Val.px(3))
        assert rect.left == rect.right == rect.top == rect.bottom == Val.px(3)

    def test_horizontal(self):
        rect = UiRect.horizontal(Val.px(3))
        assert rect.left == Val.px(3)
        assert rect.right == Val.px(3)
        assert rect.top == Val.undefined()
        assert rect.bottom == Val.undefined()

    def test_vertical(self):
        rect = UiRect.vertical(Val.px(3))
        assert rect.top == Val.px(3)
        assert rect.bottom == Val.px(3)
        assert rect.left == Val.undefined()

    def test_single_edge(self):
        assert UiRect.left_only(Val.px(1)).left == Val.px(1)
        assert UiRect.right_only(Val.px(1)).right == Val.px(1)
        assert UiRect.top_only(Val.px(1)).top == Val.px(1)
        assert UiRect.bottom_only(Val.px(1)).bottom == Val.px(1)
        assert UiRect.left_only(Val.px(1)).right == Val.undefined()


class TestRect:
    """Tests for Rect."""

    def test_size_and_center(self):
        rect = Rect.from_corners(-50, -50, -40, 50)
        assert rect.width == 10
        assert rect.height == 100
        assert rect.size == Vec2(10, 100)
        assert rect.center == Vec2(-45, 0)

    def test_from_center_size(self):
        rect = Rect.from_center_size(Vec2(10, 10), Vec2(4, 6))
        assert rect == Rect.from_corners(8, 7, 12, 13)

    def test_is_empty(self):
        assert Rect.from_corners(0, 0, 0, 10).is_empty()
        assert Rect.from_corners(0, 0, 10, 0).is_empty()
        assert Rect.from_corners(5, 0, 0, 10).is_empty()
        assert not Rect.from_corners(0, 0, 1, 1).is_empty()

    def test_overlap_area(self):
        a = Rect.from_corners(0, 0, 10, 10)
        b = Rect.from_corners(5, 5, 15, 15)
        assert a.overlap_area(b) == 25

    def test_touching_rects_do_not_overlap(self):
        a = Rect.from_corners(0, 0, 10, 10)
        b = Rect.from_corners(10, 0, 20, 10)
        assert a.overlap_area(b) == 0


class TestColor:
    """Tests for Color."""

    def test_to_rgba8(self):
        assert Color.RED.to_rgba8() == (255, 0, 0, 255)
        assert Color.NONE.to_rgba8() == (0, 0, 0, 0)

    def test_to_rgba8_clamps(self):
        assert Color(2.0, -1.0, 0.5, 1.0).to_rgba8() == (255, 0, 128, 255)

    def test_with_alpha(self):
        assert Color.WHITE.with_alpha(0.0).a == 0.0


class TestTransform:
    """Tests for Transform."""

    def test_identity(self):
        assert Transform.identity().transform_point(Vec2(3, 4)) == Vec2(3, 4)

    def test_translation_composition(self):
        combined = Transform.from_translation(Vec2(100, 50)) @ Transform.from_translation(
            Vec2(-45, 0)
        )
        assert combined.translation == Vec2(55, 50)

    def test_scale_applies_to_child_translation(self):
        combined = Transform.from_scale(2) @ Transform.from_translation(Vec2(10, 5))
        assert combined.translation == Vec2(20, 10)
        assert combined.scale == Vec2(2, 2)

    def test_right_hand_applies_first(self):
        combined = Transform.from_translation(Vec2(1, 0)) @ Transform.from_scale(3)
        assert combined.transform_point(Vec2(1, 1)) == Vec2(4, 3)


class TestEdgeGeometry:
    """Tests for EdgeGeometry."""

    def test_default_all_none(self):
        geometry = EdgeGeometry()
        assert geometry.edges == [None, None, None, None]
        assert geometry.is_empty()

    def test_iter_skips_none_in_edge_order(self):
        top = Rect.from_corners(0, 0, 1, 1)
        left = Rect.from_corners(2, 2, 3, 3)
        geometry = EdgeGeometry([left, None, top, None])
        assert list(geometry) == [(Edge.LEFT, left), (Edge.TOP, top)]

    def test_getitem(self):
        left = Rect.from_corners(0, 0, 1, 1)
        geometry = EdgeGeometry([left, None, None, None])
        assert geometry[Edge.LEFT] == left
        assert geometry[Edge.BOTTOM] is None

    def test_reset(self):
        geometry = EdgeGeometry([Rect.from_corners(0, 0, 1, 1), None, None, None])
        geometry.reset()
        assert geometry.is_empty()


class TestDrawPrimitive:
    """Tests for DrawPrimitive."""

    def test_world_rect(self):
        primitive = DrawPrimitive(
            stack_index=0,
            transform=Transform.from_translation(Vec2(55, 100)),
            color=Color.RED,
            size=Vec2(10, 100),
        )
        assert primitive.world_rect() == Rect.from_corners(50, 50, 60, 150)
