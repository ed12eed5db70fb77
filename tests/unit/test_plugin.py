"""Unit tests for BordersPlugin and BordersConfig."""

from uiborders import (
    BordersConfig,
    BordersPlugin,
    Color,
    UiRect,
    Val,
    Vec2,
)


def _spawn_outlined(tree):
    return tree.spawn(
        size=Vec2(100, 100),
        translation=Vec2(100, 100),
        border=UiRect.all(Val.px(10)),
        border_color=Color.WHITE,
        outline=UiRect.all(Val.px(5)),
        outline_color=Color.BLUE,
    )


class TestBordersConfig:
    def test_defaults(self):
        config = BordersConfig()
        assert config.borders is True
        assert config.outlines is True
        assert config.propagate is True
        assert config.sort_output is True
        assert config.debug is False


class TestBordersPlugin:
    def test_run_frame_emits_borders_then_outlines(self, tree, plugin):
        _spawn_outlined(tree)
        extracted = plugin.run_frame(tree)
        assert [p.kind for p in extracted] == ["border"] * 4 + ["outline"] * 4

    def test_frame_counter(self, tree, plugin):
        plugin.run_frame(tree)
        plugin.run_frame(tree)
        assert plugin.frame == 2

    def test_no_trace_by_default(self, tree, plugin):
        plugin.run_frame(tree)
        assert plugin.get_trace() is None

    def test_debug_trace(self, tree):
        _spawn_outlined(tree)
        plugin = BordersPlugin(BordersConfig(debug=True))
        plugin.run_frame(tree)

        trace = plugin.get_trace()
        assert [record.name for record in trace.passes] == [
            "propagate",
            "calculate_borders",
            "calculate_outlines",
            "ui_stack",
            "extract_borders",
            "extract_outlines",
        ]
        assert trace.get_pass("calculate_borders").data["recomputed"] == 1
        assert len(trace.primitives) == 8

    def test_second_frame_recomputes_nothing(self, tree):
        _spawn_outlined(tree)
        plugin = BordersPlugin(BordersConfig(debug=True))
        plugin.run_frame(tree)
        extracted = plugin.run_frame(tree)

        trace = plugin.get_trace()
        assert trace.frame == 2
        assert trace.get_pass("calculate_borders").data["recomputed"] == 0
        assert trace.get_pass("calculate_outlines").data["recomputed"] == 0
        assert len(extracted) == 8

    def test_outlines_disabled(self, tree):
        _spawn_outlined(tree)
        plugin = BordersPlugin(BordersConfig(outlines=False))
        extracted = plugin.run_frame(tree)
        assert {p.kind for p in extracted} == {"border"}

    def test_borders_disabled(self, tree):
        _spawn_outlined(tree)
        plugin = BordersPlugin(BordersConfig(borders=False))
        extracted = plugin.run_frame(tree)
        assert {p.kind for p in extracted} == {"outline"}

    def test_explicit_stack(self, tree, plugin):
        a = _spawn_outlined(tree)
        _spawn_outlined(tree)
        extracted = plugin.run_frame(tree, ui_stack=[a])
        assert {p.entity for p in extracted} == {a}

    def test_propagate_disabled_uses_host_state(self, tree):
        handle = _spawn_outlined(tree)
        tree[handle].computed_visible = False
        tree[handle].visible = True
        plugin = BordersPlugin(BordersConfig(propagate=False))
        assert len(plugin.run_frame(tree)) == 0

    def test_empty_tree(self, tree, plugin):
        assert len(plugin.run_frame(tree)) == 0
