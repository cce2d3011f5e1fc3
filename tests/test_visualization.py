# tests/test_visualization.py

import logging
import os

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle

from experiments.run_demo import main
from rangetree.core import HighlightTag
from rangetree.utils.visualization import TAG_COLORS, draw_tree, save_frame


def test_draw_tree_colours_by_tag(sample_tree):
    sample_tree.trace_query(2, 5)
    fig, ax = plt.subplots()
    try:
        draw_tree(sample_tree, ax=ax, title="Query [2, 5]", subtitle="Result: 19")
        circles = [p for p in ax.patches if isinstance(p, Circle)]
        boxes = [p for p in ax.patches if isinstance(p, Rectangle)]
        assert len(circles) == sample_tree.node_count
        assert len(boxes) == len(sample_tree)

        root_colour = matplotlib.colors.to_rgba(TAG_COLORS[HighlightTag.PARTIAL])
        assert circles[0].get_facecolor() == root_colour
        assert ax.yaxis_inverted()
    finally:
        plt.close(fig)


def test_save_frame_writes_png(sample_tree, tmp_path):
    path = save_frame(sample_tree, tmp_path / 'frames' / 'step_00.png', dpi=40)
    assert path.exists()
    assert path.stat().st_size > 0


def test_run_demo_script(tmp_path):
    out = tmp_path / 'demo'
    recorder = main(['--output-dir', str(out), '--log-level', 'WARNING'])
    assert len(recorder) == 7
    assert (out / 'operations.csv').exists()
    assert (out / 'demo.log').exists()
    assert sorted(p.name for p in out.glob('step_*.png')) == [f'step_{i:02d}.png' for i in range(7)]


def test_run_demo_without_frames(tmp_path):
    out = tmp_path / 'demo'
    recorder = main(['--output-dir', str(out), '--no-frames', '--log-level', 'WARNING'])
    assert recorder.to_dataframe()['result_text'].tolist()[-2] == "Result: 34"
    assert not list(out.glob('*.png'))


def test_repeated_runs_keep_logs_separate(tmp_path):
    first, second = tmp_path / 'a', tmp_path / 'b'
    main(['--output-dir', str(first), '--no-frames'])
    main(['--output-dir', str(second), '--no-frames'])

    logger = logging.getLogger('rangetree')
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert [h.baseFilename for h in file_handlers] == [os.path.abspath(second / 'demo.log')]
    for handler in file_handlers:
        handler.flush()

    assert (first / 'demo.log').read_text().count("Running 7 operations") == 1
    assert (second / 'demo.log').read_text().count("Running 7 operations") == 1
