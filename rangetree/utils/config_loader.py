# rangetree/utils/config_loader.py

import copy
from pathlib import Path

import yaml

from ..core.errors import InvalidInputError

DEFAULT_CONFIG = {
    'data': [2, 1, 3, 4, 5, 7, 8, 9],
    'layout': {
        'root_x': 600.0,
        'root_y': 50.0,
        'width': 1000.0,
        'vertical_spacing': 80.0
    },
    'render': {
        'node_radius': 25.0,
        'canvas': [1200, 800],
        'figsize': [12, 8],
        'dpi': 100,
        'save_frames': True
    },
    'output': {
        'dir': 'logs/demo'
    },
    'operations': None
}


def load_config(config_path):
    """Load configuration from YAML file"""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


def _merge(defaults, overrides):
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class DemoConfig:
    """Validated demo settings with defaults filled in"""
    def __init__(self, config_dict):
        self.data = config_dict['data']
        self.root_x = float(config_dict['layout']['root_x'])
        self.root_y = float(config_dict['layout']['root_y'])
        self.width = float(config_dict['layout']['width'])
        self.vertical_spacing = float(config_dict['layout']['vertical_spacing'])
        self.node_radius = float(config_dict['render']['node_radius'])
        self.canvas = tuple(config_dict['render']['canvas'])
        self.figsize = tuple(config_dict['render']['figsize'])
        self.dpi = int(config_dict['render']['dpi'])
        self.save_frames = bool(config_dict['render']['save_frames'])
        self.output_dir = Path(config_dict['output']['dir'])
        self.operations = config_dict.get('operations')

    @classmethod
    def from_dict(cls, config_dict=None):
        config = _merge(DEFAULT_CONFIG, config_dict or {})

        data = config.get('data')
        if not isinstance(data, list) or not data:
            raise InvalidInputError("'data' must be a non-empty list of integers")
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in data):
            raise InvalidInputError(f"'data' must contain only integers, got {data}")

        for section in ('layout', 'render', 'output'):
            if not isinstance(config.get(section), dict):
                raise KeyError(f"Missing or malformed configuration section: '{section}'")

        operations = config.get('operations')
        if operations is not None and not isinstance(operations, list):
            raise InvalidInputError("'operations' must be a list of operation entries or null")

        return cls(config)

    @classmethod
    def from_file(cls, config_path):
        return cls.from_dict(load_config(config_path))

    def layout_kwargs(self):
        return {
            'x': self.root_x,
            'y': self.root_y,
            'width': self.width,
            'vertical_spacing': self.vertical_spacing
        }
