# tests/test_demo_driver.py

import pandas as pd
import pytest

from rangetree.core import HighlightTag
from rangetree.demo import (
    Operation,
    StepThroughDriver,
    build_operations,
    default_operations
)
from rangetree.utils import OperationRecorder


def test_default_script_shape():
    operations = default_operations()
    assert len(operations) == 7
    assert [op.kind for op in operations] == [
        'reset', 'query', 'update', 'query', 'update_range', 'query', 'reset'
    ]


def test_operation_validation():
    with pytest.raises(ValueError):
        Operation("bad", 'multiply', (1, 2))
    with pytest.raises(ValueError):
        Operation("short", 'update_range', (1, 2))


def test_driver_applies_first_step_on_construction(sample_tree):
    driver = StepThroughDriver(sample_tree, default_operations())
    assert driver.current_index == 0
    assert driver.last_result == ""
    assert not driver.finished


def test_driver_walkthrough(sample_tree):
    driver = StepThroughDriver(sample_tree, default_operations())
    results = []
    for _ in driver.run_all():
        results.append(driver.last_result)

    assert results == [
        "",
        "Result: 19",
        "",
        "Result: 25",
        "",
        "Result: 34",
        ""
    ]
    assert driver.finished
    assert sample_tree.get_leaves() == [2, 4, 6, 13, 8, 7, 8, 9]
    # Final step only resets the highlights
    assert all(sample_tree.tag(node) is HighlightTag.DEFAULT for node in sample_tree.iter_nodes())


def test_driver_stops_at_last_step(sample_tree):
    driver = StepThroughDriver(sample_tree, [Operation("Query", 'query', (0, 7))])
    assert driver.finished
    assert driver.advance() is False
    assert driver.current_index == 0
    assert driver.last_result == "Result: 39"


def test_each_step_starts_from_clean_highlights(sample_tree):
    operations = [
        Operation("Query left", 'query', (0, 1)),
        Operation("Update right", 'update', (7, 0))
    ]
    driver = StepThroughDriver(sample_tree, operations)
    driver.advance()
    tagged = {node for node in sample_tree.iter_nodes()
              if sample_tree.tag(node) is not HighlightTag.DEFAULT}
    assert tagged == set(driver.last_trace.tags)


def test_driver_requires_operations(sample_tree):
    with pytest.raises(ValueError):
        StepThroughDriver(sample_tree, [])


def test_build_operations_from_config():
    operations = build_operations([
        {'name': "Sum all", 'kind': 'query', 'args': [0, 7]},
        {'kind': 'update_range', 'args': [2, 3, 1]},
        {'kind': 'reset'}
    ])
    assert [op.name for op in operations] == ["Sum all", 'update_range', 'reset']
    assert operations[1].args == (2, 3, 1)

    with pytest.raises(KeyError):
        build_operations([{'name': "no kind"}])


def test_recorder_collects_steps(sample_tree, tmp_path):
    recorder = OperationRecorder()
    driver = StepThroughDriver(sample_tree, default_operations(), recorder=recorder)
    list(driver.run_all())
    assert len(recorder) == 7

    df = recorder.to_dataframe()
    assert list(df.columns) == OperationRecorder.COLUMNS
    assert df.loc[5, 'result'] == 34
    assert df.loc[6, 'leaves'] == "2 4 6 13 8 7 8 9"

    path = recorder.export_csv(str(tmp_path / 'out'))
    loaded = pd.read_csv(path)
    assert len(loaded) == 7
    assert loaded['name'].tolist()[2] == "Update T[3] = 10"
