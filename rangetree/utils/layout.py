# rangetree/utils/layout.py

from typing import Dict, NamedTuple

ROOT_X = 600.0
ROOT_Y = 50.0
ROOT_WIDTH = 1000.0
VERTICAL_SPACING = 80.0


class NodePosition(NamedTuple):
    x: float
    y: float


def compute_layout(tree, x=ROOT_X, y=ROOT_Y, width=ROOT_WIDTH,
                   vertical_spacing=VERTICAL_SPACING) -> Dict[int, NodePosition]:
    """
    Assign a 2-D position to every node of a tree.

    Children sit one level lower, a quarter of the parent's spread to either
    side, and get half the parent's spread. A lone child stays centred.
    Coordinates are screen-like: y grows downward.

    Args:
        tree (RangeAggregateTree): Tree to lay out
        x (float): Root x coordinate
        y (float): Root y coordinate
        width (float): Horizontal spread at the root
        vertical_spacing (float): Distance between levels

    Returns:
        dict: Node index -> NodePosition
    """
    positions = {}

    def _place(node, px, py, spread):
        positions[node] = NodePosition(px, py)
        left, right = tree.children(node)
        child_y = py + vertical_spacing
        if left is not None and right is not None:
            _place(left, px - spread / 4, child_y, spread / 2)
            _place(right, px + spread / 4, child_y, spread / 2)
        elif left is not None:
            _place(left, px, child_y, spread / 2)

    _place(tree.root, float(x), float(y), float(width))
    return positions
