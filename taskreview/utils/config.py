"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any

from ..exceptions import ConfigError


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            if path.suffix.lower() in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            elif path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {path.suffix}")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")
    return data


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'loader': {
            'delimiter': '\t',
            'date_format': '%Y-%m-%d',
            'time_format': '%H:%M',
            # logical field -> export column header
            'columns': {
                'id': 'タスクID',
                'date': '実行日',
                'name': 'タスク名',
                'estimated_time': '見積時間',
                'begin_time': '開始時間',
                'end_time': '終了時間',
                'comment': 'コメント',
                'project_name': 'プロジェクト名',
                'project_id': 'プロジェクトID',
                'group': 'セクション名',
            },
        },
        'holidays': {
            'country': 'JP',
            'file': None,
            'encoding': 'utf-8',
        },
        'analysis': {
            'group_by': ['holiday', 'weekday', 'group'],
        },
        'report': {
            'format': 'markdown',
            'value_unit': 'page',
        },
        'logging': {
            'level': 'WARNING',
        },
    }


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge override onto a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_config(config_path: str, explicit: bool = True) -> Dict[str, Any]:
    """Load a config file over the defaults.

    A missing file is only tolerated when the path was not given explicitly.
    """
    defaults = get_default_config()
    if not config_path:
        return defaults
    if not explicit and not Path(config_path).exists():
        return defaults
    return merge_config(defaults, load_config(config_path))
