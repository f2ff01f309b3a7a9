"""ESG score derivation for sustainability reports.

A report's letter score is derived from three quarterly totals: emitted
tCO2e, consumed kWh and the average renewable share of that energy.

Usage:
    from esg_api.domain.scoring import derive_esg_score

    letter = derive_esg_score(total_emissions=15, total_energy=2000, renewable_percentage=50)  # "A"
"""

from enum import Enum


class ESGScore(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


BASE_SCORE = 100

# (threshold, adjustment) pairs, checked top to bottom; first match wins.
EMISSION_PENALTIES = ((50, -20), (20, -10))
ENERGY_PENALTIES = ((10000, -15), (5000, -8))
RENEWABLE_BONUSES = ((80, 10), (50, 5))
LOW_RENEWABLE_THRESHOLD = 20
LOW_RENEWABLE_PENALTY = -10

LETTER_THRESHOLDS = ((90, ESGScore.A), (80, ESGScore.B), (70, ESGScore.C), (60, ESGScore.D))


def _first_above(value: float, table: tuple[tuple[float, int], ...]) -> int:
    for threshold, adjustment in table:
        if value > threshold:
            return adjustment
    return 0


def esg_numeric_score(total_emissions: float, total_energy: float, renewable_percentage: float) -> int:
    """Numeric score before mapping to a letter.

    Algorithm:
    1. Start at 100.
    2. Emissions > 50 → -20, else > 20 → -10.
    3. Energy > 10000 → -15, else > 5000 → -8.
    4. Renewable > 80 → +10, else > 50 → +5, else < 20 → -10.

    All comparisons are strict, so values sitting exactly on a threshold
    take the milder branch.

    Examples:
        >>> esg_numeric_score(15, 2000, 50)
        100
        >>> esg_numeric_score(60, 12000, 10)
        55
        >>> esg_numeric_score(20, 5000, 20)
        100
    """
    score = BASE_SCORE
    score += _first_above(total_emissions, EMISSION_PENALTIES)
    score += _first_above(total_energy, ENERGY_PENALTIES)

    bonus = _first_above(renewable_percentage, RENEWABLE_BONUSES)
    if bonus:
        score += bonus
    elif renewable_percentage < LOW_RENEWABLE_THRESHOLD:
        score += LOW_RENEWABLE_PENALTY
    return score


def score_to_letter(score: float) -> ESGScore:
    """Map a numeric score to its letter (thresholds are inclusive).

    Examples:
        >>> score_to_letter(90)
        <ESGScore.A: 'A'>
        >>> score_to_letter(89.9)
        <ESGScore.B: 'B'>
        >>> score_to_letter(59)
        <ESGScore.E: 'E'>
    """
    for threshold, letter in LETTER_THRESHOLDS:
        if score >= threshold:
            return letter
    return ESGScore.E


def derive_esg_score(total_emissions: float, total_energy: float, renewable_percentage: float) -> str:
    """Letter score for a reporting period, as stored on the report."""
    numeric = esg_numeric_score(total_emissions, total_energy, renewable_percentage)
    return score_to_letter(numeric).value
