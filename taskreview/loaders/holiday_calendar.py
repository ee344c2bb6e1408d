"""Public holiday lookup."""

import csv
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Dict, IO, Iterable, Mapping, Optional, Union

import holidays

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

DATE_FORMATS = ('%Y/%m/%d', '%Y-%m-%d')


def _parse_date(value: str) -> Optional[date]:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError:
            continue
    return None


class HolidayCalendar:
    """Maps calendar dates to holiday names.

    Any mapping with a ``get`` method works as backing store, including the
    lazily expanding tables of the ``holidays`` package.
    """

    def __init__(self, table: Optional[Mapping[date, str]] = None):
        self._table = table if table is not None else {}

    @classmethod
    def empty(cls) -> "HolidayCalendar":
        return cls({})

    @classmethod
    def for_country(cls, country: str, years: Optional[Iterable[int]] = None) -> "HolidayCalendar":
        """Use the public holidays of a country."""
        return cls(holidays.country_holidays(country, years=years))

    @classmethod
    def from_csv(cls, source: Union[str, Path, IO[str]], encoding: str = 'utf-8') -> "HolidayCalendar":
        """Read a two-column ``date,name`` CSV with a header row.

        Rows whose date cannot be parsed are skipped.
        """
        if isinstance(source, (str, Path)):
            with open(source, 'r', encoding=encoding, newline='') as f:
                return cls(cls._read_rows(f))
        return cls(cls._read_rows(source))

    @staticmethod
    def _read_rows(stream: IO[str]) -> Dict[date, str]:
        table = {}
        reader = csv.reader(stream)
        next(reader, None)
        for row in reader:
            if len(row) < 2:
                continue
            day = _parse_date(row[0])
            if day is None:
                logger.warning("Skipping holiday row with invalid date: %r", row[0])
                continue
            table[day] = row[1].strip()
        return table

    def get(self, day: date) -> Optional[str]:
        """Get the holiday name of a date, or None on a workday."""
        return self._table.get(day)

    def is_holiday(self, day: date) -> bool:
        return self.get(day) is not None

    def __contains__(self, day: date) -> bool:
        return self.is_holiday(day)

    def __len__(self) -> int:
        return len(self._table)


def build_holiday_calendar(config: dict) -> HolidayCalendar:
    """Create the holiday lookup described by the ``holidays`` config section."""
    settings = config.get('holidays', {})

    path = settings.get('file')
    if path:
        logger.info("Loading holidays from %s", path)
        return HolidayCalendar.from_csv(path, encoding=settings.get('encoding', 'utf-8'))

    country = settings.get('country')
    if country:
        try:
            return HolidayCalendar.for_country(country)
        except NotImplementedError as e:
            raise ConfigError(f"Unknown holiday country: {country}") from e

    return HolidayCalendar.empty()

