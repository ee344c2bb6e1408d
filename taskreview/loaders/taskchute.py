"""Loader for tab-separated TaskChute Cloud task exports."""

import codecs
import csv
import io
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Union

from ..exceptions import LoaderError
from ..models.task import Project, Task
from ..utils.config import get_default_config
from ..utils.datetime_utils import clock_to_timedelta, combine_with_rollover, parse_clock

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('id', 'date', 'name')

_BOMS = [
    (codecs.BOM_UTF8, 'utf-8-sig'),
    (codecs.BOM_UTF16_LE, 'utf-16'),
    (codecs.BOM_UTF16_BE, 'utf-16'),
]


def decode_export(data: bytes) -> str:
    """Decode raw export bytes, honouring a byte-order mark when present."""
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return data.decode(encoding, errors='replace')
    return data.decode('utf-8', errors='replace')


class TaskChuteLoader:
    """Parses export rows into tasks.

    Malformed rows are skipped with a warning rather than failing the load.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        loader_config = (config or get_default_config()).get('loader', {})
        defaults = get_default_config()['loader']
        self.delimiter = loader_config.get('delimiter', defaults['delimiter'])
        self.date_format = loader_config.get('date_format', defaults['date_format'])
        self.time_format = loader_config.get('time_format', defaults['time_format'])
        self.columns = {**defaults['columns'], **loader_config.get('columns', {})}

    def load(self, path: Union[str, Path]) -> List[Task]:
        """Load tasks from an export file."""
        with open(path, 'rb') as f:
            return self.parse(f)

    def parse(self, stream: BinaryIO) -> List[Task]:
        """Parse tasks from a binary stream."""
        text = decode_export(stream.read())
        reader = csv.DictReader(io.StringIO(text, newline=''), delimiter=self.delimiter)

        headers = reader.fieldnames or []
        missing = [self.columns[f] for f in REQUIRED_FIELDS if self.columns[f] not in headers]
        if missing:
            raise LoaderError(f"Export is missing required columns: {', '.join(missing)}")

        tasks = []
        skipped = 0
        # Row 1 is the header
        for line_no, row in enumerate(reader, start=2):
            try:
                tasks.append(self.to_task(row))
            except ValueError as e:
                skipped += 1
                logger.warning("Skipping row %d: %s", line_no, e)

        logger.info("Loaded %d tasks (%d rows skipped)", len(tasks), skipped)
        return tasks

    def _field(self, row: Dict[str, Optional[str]], name: str) -> Optional[str]:
        value = row.get(self.columns.get(name, ''))
        if value is None:
            return None
        value = value.strip()
        return value or None

    def to_task(self, row: Dict[str, Optional[str]]) -> Task:
        """Convert one export row into a task."""
        task_id = self._field(row, 'id')
        if task_id is None:
            raise ValueError("missing task id")

        raw_date = self._field(row, 'date')
        try:
            day = datetime.strptime(raw_date or '', self.date_format).date()
        except ValueError as e:
            raise ValueError(f"invalid date {raw_date!r}") from e

        estimate = parse_clock(self._field(row, 'estimated_time'), self.time_format)
        estimated_time = clock_to_timedelta(estimate) if estimate is not None else None
        if not estimated_time:
            estimated_time = None

        begin = parse_clock(self._field(row, 'begin_time'), self.time_format)
        end = parse_clock(self._field(row, 'end_time'), self.time_format)
        begin_time = end_time = None
        if begin is not None and end is not None:
            begin_time, end_time = combine_with_rollover(day, begin, end)
        elif begin is not None or end is not None:
            logger.debug("Task %s has only one of start/end time; treating as not started", task_id)

        project = None
        project_id = self._field(row, 'project_id')
        project_label = self._field(row, 'project_name')
        if project_id is not None and project_label is not None:
            project = Project(id=project_id, name=project_label)

        return Task(
            id=task_id,
            name=self._field(row, 'name') or '',
            group=self._field(row, 'group'),
            project=project,
            comment=self._field(row, 'comment'),
            estimated_time=estimated_time,
            begin_time=begin_time,
            end_time=end_time,
        )


def load_tasks(path: Union[str, Path], config: Optional[Dict[str, Any]] = None) -> List[Task]:
    """Load tasks from an export file."""
    return TaskChuteLoader(config).load(path)
