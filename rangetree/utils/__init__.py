# rangetree/utils/__init__.py

from .logger import get_logger, setup_logger
from .config_loader import load_config, DemoConfig
from .layout import compute_layout, NodePosition
from .data_collector import OperationRecorder

__all__ = [
    'get_logger',
    'setup_logger',
    'load_config',
    'DemoConfig',
    'compute_layout',
    'NodePosition',
    'OperationRecorder'
]
