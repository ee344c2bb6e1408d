"""JSON encoding of analysis results."""

import json
import math
from datetime import date, datetime
from typing import Any

from ..models.result import AnalysisResult


def sanitize(value: Any) -> Any:
    """Replace non-finite floats with None throughout a nested structure.

    ``json`` would otherwise emit ``NaN`` and ``Infinity``, which are not JSON.
    """
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {key: sanitize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [sanitize(item) for item in value]
    return value


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def to_json(data: Any, indent: int = 2) -> str:
    """Encode any nested structure as strict JSON."""
    return json.dumps(sanitize(data), indent=indent, ensure_ascii=False, allow_nan=False, default=_default)


def render_json(result: AnalysisResult, indent: int = 2) -> str:
    """Encode an analysis result."""
    return to_json(result.to_dict(), indent=indent)
