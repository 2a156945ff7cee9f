"""
Band classification for rates, RPE and sleep.

Bands are plain labels; clients map them to colors.
"""
from enum import Enum


class Band(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class RpeBand(str, Enum):
    VERY_HARD = "very_hard"
    HARD = "hard"
    MODERATE = "moderate"
    EASY = "easy"


def rate_band(percentage: float) -> Band:
    """Band for a success or completion percentage."""
    if percentage >= 80:
        return Band.GOOD
    if percentage >= 50:
        return Band.FAIR
    return Band.POOR


def rpe_band(rpe: float) -> RpeBand:
    if rpe >= 9:
        return RpeBand.VERY_HARD
    if rpe >= 7:
        return RpeBand.HARD
    if rpe >= 5:
        return RpeBand.MODERATE
    return RpeBand.EASY


def sleep_band(hours: float) -> Band:
    if hours >= 8:
        return Band.GOOD
    if hours >= 6:
        return Band.FAIR
    return Band.POOR
