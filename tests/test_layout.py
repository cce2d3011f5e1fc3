# tests/test_layout.py

import pytest

from rangetree.utils import compute_layout


def test_layout_positions(sample_tree):
    positions = compute_layout(sample_tree)
    assert len(positions) == sample_tree.node_count

    root = sample_tree.root
    left, right = sample_tree.children(root)
    assert positions[root] == (600.0, 50.0)
    assert positions[left] == (350.0, 130.0)
    assert positions[right] == (850.0, 130.0)

    left_left, left_right = sample_tree.children(left)
    assert positions[left_left] == (225.0, 210.0)
    assert positions[left_right] == (475.0, 210.0)


def test_layout_leaves_ordered_left_to_right(sample_tree):
    positions = compute_layout(sample_tree, x=0, y=0, width=800, vertical_spacing=10)
    leaves = [node for node in sample_tree.iter_nodes() if sample_tree.is_leaf(node)]
    xs = [positions[node].x for node in leaves]
    assert xs == sorted(xs)
    assert {positions[node].y for node in leaves} == {30.0}


def test_layout_does_not_touch_tree(sample_tree, sample_data):
    sample_tree.trace_query(2, 5)
    before = sample_tree.visuals.as_dict()
    compute_layout(sample_tree)
    assert sample_tree.visuals.as_dict() == before
    assert sample_tree.get_leaves() == sample_data


@pytest.mark.parametrize('width', [1000.0, 64.0])
def test_layout_halves_spread_per_level(sample_tree, width):
    positions = compute_layout(sample_tree, x=0, y=0, width=width)
    left, right = sample_tree.children(sample_tree.root)
    assert positions[right].x - positions[left].x == width / 2
