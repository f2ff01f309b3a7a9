"""Ranking metrics and limit validation for the company leaderboard."""

from enum import Enum
from typing import Optional

from esg_api.errors import InvalidArgumentError

INVALID_METRIC_MESSAGE = "Invalid metric. Use: emissions, energy or esg_score"
MAX_RANKING_LIMIT = 100


class RankingMetric(str, Enum):
    EMISSIONS = "emissions"
    ENERGY = "energy"
    ESG_SCORE = "esg_score"

    @classmethod
    def parse(cls, value: Optional[str]) -> "RankingMetric":
        if value is None or not value.strip():
            return cls.EMISSIONS
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidArgumentError(INVALID_METRIC_MESSAGE, details=f"metric={value}")


def validate_limit(limit: int, maximum: int = MAX_RANKING_LIMIT) -> int:
    """Reject limits outside [1, maximum].

    Examples:
        >>> validate_limit(10)
        10
        >>> validate_limit(0)
        Traceback (most recent call last):
        ...
        esg_api.errors.InvalidArgumentError: The limit must be between 1 and 100
    """
    if limit < 1 or limit > maximum:
        raise InvalidArgumentError(f"The limit must be between 1 and {maximum}", details=f"limit={limit}")
    return limit
