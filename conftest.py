"""Shared pytest fixtures. Living at the project root also puts the root on sys.path."""

import pytest

from rangetree.core import RangeAggregateTree

SAMPLE_DATA = [2, 1, 3, 4, 5, 7, 8, 9]


@pytest.fixture
def sample_data():
    return list(SAMPLE_DATA)


@pytest.fixture
def sample_tree():
    return RangeAggregateTree(SAMPLE_DATA)
