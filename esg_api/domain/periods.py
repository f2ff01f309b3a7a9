"""Trend periods and quarter arithmetic.

Usage:
    from esg_api.domain.periods import TrendPeriod, quarter_bounds

    period = TrendPeriod.parse("Quarter")          # TrendPeriod.QUARTER
    start, end = quarter_bounds(2024, 2)           # 2024-04-01, 2024-06-30
"""

from datetime import date, timedelta
from enum import Enum
from typing import Optional

from esg_api.errors import InvalidArgumentError

INVALID_PERIOD_MESSAGE = "Invalid period. Use: month, quarter or year"


class TrendPeriod(str, Enum):
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @classmethod
    def parse(cls, value: Optional[str]) -> "TrendPeriod":
        """Case-insensitive lookup; ``None`` or blank selects month."""
        if value is None or not value.strip():
            return cls.MONTH
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidArgumentError(INVALID_PERIOD_MESSAGE, details=f"period={value}")


def quarter_of(day: date) -> int:
    """Quarter number (1-4) a date falls in.

    Examples:
        >>> quarter_of(date(2024, 3, 31))
        1
        >>> quarter_of(date(2024, 10, 1))
        4
    """
    return (day.month - 1) // 3 + 1


def quarter_bounds(year: int, quarter: int) -> tuple[date, date]:
    """First and last day (inclusive) of a calendar quarter.

    Examples:
        >>> quarter_bounds(2024, 1)
        (datetime.date(2024, 1, 1), datetime.date(2024, 3, 31))
        >>> quarter_bounds(2024, 4)
        (datetime.date(2024, 10, 1), datetime.date(2024, 12, 31))
    """
    if quarter not in (1, 2, 3, 4):
        raise InvalidArgumentError("Quarter must be between 1 and 4", details=f"quarter={quarter}")

    start = date(year, (quarter - 1) * 3 + 1, 1)
    if quarter == 4:
        next_start = date(year + 1, 1, 1)
    else:
        next_start = date(year, quarter * 3 + 1, 1)
    return start, next_start - timedelta(days=1)


def period_label(period: TrendPeriod, year: int, sub: Optional[int] = None) -> str:
    """Human-readable bucket label: ``2024-03``, ``2024-Q1`` or ``2024``."""
    if period is TrendPeriod.MONTH:
        return f"{year}-{sub:02d}"
    if period is TrendPeriod.QUARTER:
        return f"{year}-Q{sub}"
    return str(year)
