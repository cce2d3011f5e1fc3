# rangetree/demo/driver.py

import logging
from typing import Iterator, List, Optional

from ..utils.data_collector import OperationRecorder
from .operations import Operation

logger = logging.getLogger(__name__)


class StepThroughDriver:
    """Runs a fixed operation script against a tree, one step per advance().

    The first step is applied on construction. Advancing past the last step
    does nothing.
    """

    def __init__(self, tree, operations: List[Operation], recorder: Optional[OperationRecorder] = None):
        if not operations:
            raise ValueError("Driver needs at least one operation")
        self.tree = tree
        self.operations = list(operations)
        self.recorder = recorder
        self.current_index = 0
        self.last_result = ""
        self.last_trace = None
        self._apply_current()

    def _apply_current(self):
        operation = self.current_operation
        trace = operation.apply(self.tree)
        self.last_trace = trace
        self.last_result = operation.result_text(trace)

        logger.info(f"Step {self.current_index}: {operation.name} {self.last_result}".rstrip())
        if self.recorder is not None:
            self.recorder.record(self.current_index, operation, self.last_result,
                                 trace.result, self.tree.get_leaves())

    @property
    def current_operation(self) -> Operation:
        return self.operations[self.current_index]

    @property
    def finished(self) -> bool:
        return self.current_index >= len(self.operations) - 1

    def advance(self) -> bool:
        """Apply the next step. Returns False when already on the last one."""
        if self.finished:
            return False
        self.current_index += 1
        self._apply_current()
        return True

    def run_all(self) -> Iterator[int]:
        """Yield the current step index, then advance until finished."""
        yield self.current_index
        while self.advance():
            yield self.current_index
