"""Report renderers."""

from .json_report import render_json, to_json
from .markdown import render_markdown

FORMATS = {
    'markdown': 'markdown',
    'md': 'markdown',
    'json': 'json',
}

__all__ = ['render_json', 'to_json', 'render_markdown', 'FORMATS']
