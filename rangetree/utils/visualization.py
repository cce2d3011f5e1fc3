# rangetree/utils/visualization.py

from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.patches import Circle, Rectangle

from ..core.highlight import HighlightTag
from .layout import compute_layout

TAG_COLORS = {
    HighlightTag.CONTAINED: 'green',
    HighlightTag.OUTSIDE: 'red',
    HighlightTag.PARTIAL: 'yellow',
    HighlightTag.DEFAULT: 'white'
}

BACKGROUND = (240 / 255, 240 / 255, 240 / 255)
CELL_SIZE = 50.0


def draw_tree(tree, ax=None, positions=None, node_radius=25.0, canvas=(1200, 800),
              leaves_y=700.0, title=None, subtitle=None):
    """Draw the tree, its highlight tags and the leaf array onto an axes.

    Positions are in screen coordinates (y grows downward); the y axis is
    inverted so the root appears at the top.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(12, 8))
    if positions is None:
        positions = compute_layout(tree)

    width, height = canvas
    ax.set_facecolor(BACKGROUND)
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.set_xticks([])
    ax.set_yticks([])

    # Edges first so circles cover them
    for node in tree.iter_nodes():
        x, y = positions[node]
        for child in tree.children(node):
            if child is not None:
                cx, cy = positions[child]
                ax.plot([x, cx], [y, cy], color='black', linewidth=1, zorder=1)

    for node in tree.iter_nodes():
        x, y = positions[node]
        ax.add_patch(Circle((x, y), node_radius, facecolor=TAG_COLORS[tree.tag(node)],
                            edgecolor='black', linewidth=2, zorder=2))
        ax.text(x, y, str(tree.value(node)), ha='center', va='center', fontsize=12, zorder=3)

    leaves = tree.get_leaves()
    start_x = width / 2 - len(leaves) * CELL_SIZE / 2
    for i, leaf in enumerate(leaves):
        left = start_x + i * CELL_SIZE
        ax.add_patch(Rectangle((left, leaves_y), CELL_SIZE, CELL_SIZE,
                               facecolor='white', edgecolor='black', linewidth=1))
        ax.text(left + CELL_SIZE / 2, leaves_y + CELL_SIZE / 2, str(leaf),
                ha='center', va='center', fontsize=12)
        ax.text(left + CELL_SIZE / 2, leaves_y + CELL_SIZE + 10, str(i),
                ha='center', va='center', fontsize=8)

    if title or subtitle:
        lines = [line for line in (title, subtitle) if line]
        ax.text(10, 10, '\n'.join(lines), ha='left', va='top', fontsize=14)

    return ax


def save_frame(tree, save_path, positions=None, node_radius=25.0, canvas=(1200, 800),
               figsize=(12, 8), dpi=100, title=None, subtitle=None):
    """Render the tree to an image file and return its path"""
    sns.set_style('white')
    fig, ax = plt.subplots(figsize=figsize, dpi=dpi)
    try:
        draw_tree(tree, ax=ax, positions=positions, node_radius=node_radius,
                  canvas=canvas, leaves_y=canvas[1] - 100, title=title, subtitle=subtitle)
        fig.tight_layout()

        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, facecolor=BACKGROUND)
    finally:
        plt.close(fig)

    return save_path
