# rangetree/demo/operations.py

from typing import Dict, List

from ..core.segment_tree import Trace

KINDS = {
    'reset': 0,
    'query': 2,
    'update': 2,
    'update_range': 3
}


class Operation:
    """One named step of the demo script.

    Args:
        name (str): Label shown with the step
        kind (str): One of 'reset', 'query', 'update', 'update_range'
        args (sequence of int): Arguments for the tree call
    """

    def __init__(self, name: str, kind: str, args=()):
        if kind not in KINDS:
            raise ValueError(f"Unknown operation kind '{kind}', expected one of {sorted(KINDS)}")
        args = tuple(args)
        if len(args) != KINDS[kind]:
            raise ValueError(f"Operation '{kind}' takes {KINDS[kind]} arguments, got {len(args)}")
        self.name = name
        self.kind = kind
        self.args = args

    def apply(self, tree) -> Trace:
        """Clear highlights, then run the operation on the tree."""
        tree.reset_visuals()
        if self.kind == 'query':
            return tree.trace_query(*self.args)
        if self.kind == 'update':
            return tree.trace_update(*self.args)
        if self.kind == 'update_range':
            return tree.trace_update_range(*self.args)
        return Trace(None, {})

    def result_text(self, trace: Trace) -> str:
        if self.kind == 'query':
            return f"Result: {trace.result}"
        return ""

    def __repr__(self):
        return f"Operation({self.name!r}, {self.kind!r}, {self.args})"


def default_operations() -> List[Operation]:
    """The fixed seven-step walkthrough."""
    return [
        Operation("Initial state", 'reset'),
        Operation("Query [2, 5]", 'query', (2, 5)),
        Operation("Update T[3] = 10", 'update', (3, 10)),
        Operation("Query [2, 5] (post-update)", 'query', (2, 5)),
        Operation("Range update [1, 4] += 3", 'update_range', (1, 4, 3)),
        Operation("Query [2, 5]", 'query', (2, 5)),
        Operation("Final state", 'reset')
    ]


def build_operations(entries: List[Dict]) -> List[Operation]:
    """Build operations from config entries like {'name', 'kind', 'args'}"""
    operations = []
    for i, entry in enumerate(entries):
        if 'kind' not in entry:
            raise KeyError(f"Operation entry {i} is missing 'kind'")
        kind = entry['kind']
        operations.append(Operation(entry.get('name', kind), kind, entry.get('args', ())))
    return operations
