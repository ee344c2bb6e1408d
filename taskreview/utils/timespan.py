"""Duration values and their cascading text breakdown."""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_CEILING
from typing import List, Tuple

PLACEHOLDER = '-'

# (suffix, length in seconds), largest first
UNITS: List[Tuple[str, int]] = [
    ('w', 7 * 24 * 60 * 60),
    ('d', 24 * 60 * 60),
    ('h', 60 * 60),
    ('m', 60),
    ('s', 1),
]

_CENT = Decimal('0.01')


def ceil_hundredths(value: Decimal) -> Decimal:
    """Round toward positive infinity at two decimal places."""
    return value.quantize(_CENT, rounding=ROUND_CEILING)


@dataclass(frozen=True)
class Timespan:
    """A duration in minutes.

    Exact spans come from whole-minute sums. Approximate spans come from
    averages and may be NaN or infinite after a division by zero; those
    render as the placeholder instead of leaking into the text.
    """

    minutes: float
    approximate: bool = False

    @classmethod
    def exact(cls, minutes: int) -> "Timespan":
        return cls(int(minutes), approximate=False)

    @classmethod
    def approx(cls, minutes: float) -> "Timespan":
        return cls(float(minutes), approximate=True)

    def is_blank(self) -> bool:
        """Check if the span renders as the placeholder."""
        if self.approximate and not math.isfinite(self.minutes):
            return True
        return self.minutes == 0

    def total_seconds(self) -> Decimal:
        if self.approximate:
            return Decimal(repr(self.minutes)) * 60
        return Decimal(int(self.minutes) * 60)

    def clauses(self) -> List[str]:
        """Break the span into one clause per populated unit.

        Each clause has the whole count of a unit, the remainder in the next
        smaller unit and the total expressed in that unit alone, e.g.
        ``1h30m (1.50h)``. The minutes clause already carries the seconds
        remainder, so seconds get their own clause only when nothing larger
        is populated.
        """
        if self.is_blank():
            return []

        total = self.total_seconds()
        sign = '-' if total < 0 else ''
        magnitude = abs(total)
        whole_seconds = int(magnitude)

        clauses = []
        for index, (suffix, length) in enumerate(UNITS[:-1]):
            count = whole_seconds // length
            if count == 0 and not clauses:
                continue
            next_suffix, next_length = UNITS[index + 1]
            remainder = (whole_seconds - count * length) // next_length
            equivalent = ceil_hundredths(total / length)
            clauses.append(f"{sign}{count}{suffix}{remainder}{next_suffix} ({equivalent}{suffix})")

        if not clauses:
            clauses.append(f"{sign}{ceil_hundredths(total)}s")

        return clauses

    def render(self) -> str:
        """Render the full breakdown, or the placeholder for an empty span."""
        clauses = self.clauses()
        if not clauses:
            return PLACEHOLDER
        return ', '.join(clauses)

    def __str__(self) -> str:
        return self.render()


def render_minutes(minutes: int) -> str:
    """Render a whole-minute count."""
    return Timespan.exact(minutes).render()


def render_approx_minutes(minutes: float) -> str:
    """Render a possibly non-finite minute value."""
    return Timespan.approx(minutes).render()
