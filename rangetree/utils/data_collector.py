# rangetree/utils/data_collector.py

import os
from typing import Dict, List, Optional

import pandas as pd


class OperationRecorder:
    """Collects one record per applied demo step"""

    COLUMNS = ['step', 'name', 'kind', 'args', 'result_text', 'result', 'leaves']

    def __init__(self):
        self.records: List[Dict] = []

    def record(self, step: int, operation, result_text: str, result: Optional[int], leaves: List[int]):
        self.records.append({
            'step': step,
            'name': operation.name,
            'kind': operation.kind,
            'args': ' '.join(str(a) for a in operation.args),
            'result_text': result_text,
            'result': result,
            'leaves': ' '.join(str(v) for v in leaves)
        })

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.records, columns=self.COLUMNS)

    def export_csv(self, output_dir: str) -> str:
        """Export collected records to CSV"""
        os.makedirs(output_dir, exist_ok=True)
        path = os.path.join(output_dir, 'operations.csv')
        self.to_dataframe().to_csv(path, index=False)
        return path

    def __len__(self):
        return len(self.records)
