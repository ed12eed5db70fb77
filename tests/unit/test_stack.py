"""Unit tests for the host hierarchy passes."""

from uiborders import (
    Rect,
    Transform,
    Vec2,
    build_ui_stack,
    propagate_transforms,
    propagate_visibility,
    update_clipping,
)
from uiborders.stack import hierarchy_graph


class TestBuildUiStack:
    """Tests for build_ui_stack."""

    def test_empty_tree(self, tree):
        assert build_ui_stack(tree).uinodes == []

    def test_parents_before_children(self, tree):
        root = tree.spawn()
        a = tree.spawn(parent=root)
        a1 = tree.spawn(parent=a)
        b = tree.spawn(parent=root)

        assert build_ui_stack(tree).uinodes == [root, a, a1, b]

    def test_siblings_sorted_by_z_index(self, tree):
        root = tree.spawn()
        high = tree.spawn(parent=root, z_index=5)
        low = tree.spawn(parent=root, z_index=-1)
        mid = tree.spawn(parent=root)

        assert build_ui_stack(tree).uinodes == [root, low, mid, high]

    def test_roots_sorted_by_z_index(self, tree):
        front = tree.spawn(z_index=1)
        back = tree.spawn()
        assert build_ui_stack(tree).uinodes == [back, front]

    def test_reparented_child_follows_new_parent(self, tree):
        a = tree.spawn()
        b = tree.spawn()
        child = tree.spawn(parent=a)
        tree.set_parent(child, b)

        assert build_ui_stack(tree).uinodes == [a, b, child]

    def test_hierarchy_graph_has_virtual_root(self, tree):
        root = tree.spawn()
        child = tree.spawn(parent=root)
        graph = hierarchy_graph(tree)
        assert graph.has_edge(-1, root)
        assert graph.has_edge(root, child)


class TestPropagation:
    """Tests for visibility, transform and clip propagation."""

    def test_hidden_parent_hides_children(self, tree):
        root = tree.spawn(visible=False)
        child = tree.spawn(parent=root)
        propagate_visibility(tree)
        assert tree[root].computed_visible is False
        assert tree[child].computed_visible is False

    def test_visible_tree(self, tree):
        root = tree.spawn()
        child = tree.spawn(parent=root)
        propagate_visibility(tree)
        assert tree[child].computed_visible is True

    def test_transforms_accumulate(self, tree):
        root = tree.spawn(translation=Vec2(100, 100))
        child = tree.spawn(parent=root, translation=Vec2(-20, 10))
        propagate_transforms(tree)
        assert tree[root].global_transform == Transform.from_translation(Vec2(100, 100))
        assert tree[child].global_transform.translation == Vec2(80, 110)

    def test_clip_from_ancestor(self, tree):
        root = tree.spawn(size=Vec2(100, 100), translation=Vec2(50, 50), clip_children=True)
        child = tree.spawn(parent=root, size=Vec2(200, 20))
        grandchild = tree.spawn(parent=child, size=Vec2(10, 10))
        propagate_transforms(tree)
        update_clipping(tree)

        assert tree[root].clip is None
        assert tree[child].clip == Rect.from_corners(0, 0, 100, 100)
        assert tree[grandchild].clip == Rect.from_corners(0, 0, 100, 100)

    def test_nested_clips_intersect(self, tree):
        root = tree.spawn(size=Vec2(100, 100), translation=Vec2(50, 50), clip_children=True)
        inner = tree.spawn(
            parent=root, size=Vec2(40, 200), translation=Vec2(30, 0), clip_children=True
        )
        leaf = tree.spawn(parent=inner, size=Vec2(5, 5))
        propagate_transforms(tree)
        update_clipping(tree)

        assert tree[leaf].clip == Rect.from_corners(60, 0, 100, 100)
