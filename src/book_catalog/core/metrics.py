"""Text-derived reading metrics: word counts, difficulty and reading time."""

import math

from book_catalog.config import AVERAGE_READING_SPEED
from book_catalog.models.catalog import Difficulty

# Words longer than this count as "difficult"
DIFFICULT_WORD_LENGTH = 7

# (exclusive upper bound of ratio, tier), checked in order
DIFFICULTY_TIERS: list[tuple[float, Difficulty]] = [
    (15, Difficulty.EASY),
    (30, Difficulty.MEDIUM),
    (50, Difficulty.HARD),
]

LESS_THAN_A_MINUTE = "Less than a minute"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up."""
    return math.floor(value + 0.5)


def split_words(text: str) -> list[str]:
    """Split on the literal space character only.

    Punctuation and other whitespace are left untouched, so "a  b" yields an
    empty token between the two words and "" yields a single empty token.
    """
    return text.split(" ")


def count_words(text: str) -> int:
    return len(split_words(text))


def classify_difficulty(text: str) -> Difficulty:
    """Bucket text by the percentage of words longer than 7 characters."""
    words = split_words(text)
    if not words:
        return Difficulty.EASY

    difficult = sum(1 for word in words if len(word) > DIFFICULT_WORD_LENGTH)
    ratio = 100 * difficult / len(words)

    for upper_bound, tier in DIFFICULTY_TIERS:
        if ratio < upper_bound:
            return tier
    return Difficulty.VERY_HARD


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def estimate_read_time(
    word_count: int, words_per_minute: int = AVERAGE_READING_SPEED
) -> str:
    """Describe reading time in English, e.g. "2 hours and 15 minutes"."""
    minutes = word_count / words_per_minute
    hours = math.floor(minutes / 60)
    remaining_minutes = round_half_up(minutes % 60)

    segments: list[str] = []
    if hours > 0:
        segments.append(_pluralize(hours, "hour"))
    if remaining_minutes > 0:
        segments.append(_pluralize(remaining_minutes, "minute"))

    return " and ".join(segments) or LESS_THAN_A_MINUTE
