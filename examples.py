#!/usr/bin/env python3
"""
Examples of using uiborders.

Run this file to render the example scenes as PNG files.
"""

from uiborders import (
    BorderedNodeBundle,
    BordersConfig,
    BordersPlugin,
    Color,
    OutlineBundle,
    PNGRenderer,
    UiRect,
    UiTree,
    Val,
    Vec2,
)

TILE_BORDERS = [
    UiRect(),
    UiRect.all(Val.px(10)),
    UiRect.left_only(Val.px(10)),
    UiRect.right_only(Val.px(10)),
    UiRect.top_only(Val.px(10)),
    UiRect.bottom_only(Val.px(10)),
    UiRect.horizontal(Val.px(10)),
    UiRect.vertical(Val.px(10)),
    UiRect(left=Val.px(10), top=Val.px(10)),
    UiRect(left=Val.px(10), bottom=Val.px(10)),
    UiRect(right=Val.px(10), top=Val.px(10)),
    UiRect(right=Val.px(10), bottom=Val.px(10)),
    UiRect(right=Val.px(10), top=Val.px(10), bottom=Val.px(10)),
    UiRect(left=Val.px(10), top=Val.px(10), bottom=Val.px(10)),
    UiRect(left=Val.px(10), right=Val.px(10), top=Val.px(10)),
    UiRect(left=Val.px(10), right=Val.px(10), bottom=Val.px(10)),
]


def example_minimal():
    """A single node with a 10px red border"""
    print("Example 1: Minimal")

    tree = UiTree()
    tree.spawn(
        BorderedNodeBundle(
            size=Vec2(100, 100),
            border=UiRect.all(Val.px(10)),
            background_color=Color.WHITE,
            border_color=Color.RED,
            translation=Vec2(150, 150),
        )
    )

    extracted = BordersPlugin().run_frame(tree)
    PNGRenderer(width=300, height=300).render(extracted, "example_minimal.png")
    print(f"  {len(extracted)} primitives")
    print("  Saved: example_minimal.png\n")


def example_tiles():
    """All combinations of border edges, each tile with a blue outline"""
    print("Example 2: Tiles")

    tree = UiTree()
    root = tree.spawn(size=Vec2(750, 500), translation=Vec2(400, 275))
    for i in range(64):
        tile = tree.spawn(
            BorderedNodeBundle(
                size=Vec2(50, 50),
                border=TILE_BORDERS[i % len(TILE_BORDERS)],
                background_color=Color.BLUE,
                border_color=Color.WHITE,
                translation=Vec2(-350 + 64 * (i % 11), -225 + 64 * (i // 11)),
            ),
            OutlineBundle.all(Color.BLUE, Val.px(5)),
            parent=root,
        )
        tree.spawn(
            size=Vec2(10, 10),
            background_color=Color.YELLOW,
            parent=tile,
        )

    plugin = BordersPlugin(BordersConfig(debug=True))
    extracted = plugin.run_frame(tree)
    PNGRenderer(width=800, height=550).render(extracted, "example_tiles.png")
    print(plugin.get_trace().summary())
    print("  Saved: example_tiles.png\n")


def example_percent():
    """Border thickness as a percentage of the parent's width"""
    print("Example 3: Percent of parent width")

    tree = UiTree()
    parent = tree.spawn(size=Vec2(200, 200), translation=Vec2(150, 150))
    tree.spawn(
        BorderedNodeBundle(
            size=Vec2(100, 100),
            border=UiRect.all(Val.percent(10)),
            border_color=Color.YELLOW,
        ),
        parent=parent,
    )

    plugin = BordersPlugin()
    plugin.run_frame(tree)
    tree.set_size(parent, Vec2(300, 200))
    extracted = plugin.run_frame(tree)
    PNGRenderer(width=300, height=300).render(extracted, "example_percent.png")
    print("  Saved: example_percent.png\n")


def main():
    """Run all examples."""
    print("=" * 50)
    print("uiborders - Examples")
    print("=" * 50 + "\n")

    example_minimal()
    example_tiles()
    example_percent()

    print("=" * 50)
    print("All examples complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
