"""Pytest configuration and shared fixtures for uiborders tests."""

import pytest

from uiborders import (
    BordersPlugin,
    Color,
    ExtractedUiNodes,
    UiRect,
    UiTree,
    Val,
    Vec2,
)


@pytest.fixture
def tree():
    """Empty UI tree."""
    return UiTree()


@pytest.fixture
def plugin():
    """Default BordersPlugin instance."""
    return BordersPlugin()


@pytest.fixture
def extracted():
    """Empty primitive list."""
    return ExtractedUiNodes()


@pytest.fixture
def border_10px():
    """10px border on every edge."""
    return UiRect.all(Val.px(10))


@pytest.fixture
def bordered_node(tree, border_10px):
    """A 100x100 root node with a red 10px border, returned as its handle."""
    return tree.spawn(size=Vec2(100, 100), border=border_10px, border_color=Color.RED)


@pytest.fixture
def nested_tree():
    """A 200 wide parent with a 100x100 child bordered at 10% of the parent width."""
    tree = UiTree()
    parent = tree.spawn(size=Vec2(200, 200))
    child = tree.spawn(
        parent=parent,
        size=Vec2(100, 100),
        border=UiRect.all(Val.percent(10)),
        border_color=Color.WHITE,
    )
    return tree, parent, child
