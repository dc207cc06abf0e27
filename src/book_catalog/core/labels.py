"""Title-derived labels: display title, rating and signature."""

from typing import Literal

from book_catalog.core.metrics import round_half_up
from book_catalog.core.seeding import seed_from_text, seeded_uniform

RATING_MIN = 7.0
RATING_SPAN = 3.0
# Highest half step below RATING_MIN + RATING_SPAN
RATING_MAX = 9.5

Signature = Literal["RE", "JE"]


def format_title(stem: str) -> str:
    """Turn a filename stem like ``the_great_gatsby`` into a display title.

    Only the first character of each underscore-separated segment is
    upper-cased; the rest keeps its case. Consecutive underscores produce
    empty segments and therefore extra spaces.
    """
    return " ".join(segment[:1].upper() + segment[1:] for segment in stem.split("_"))


def generate_rating(title: str) -> float:
    """Deterministic rating in [7.0, 9.5], in steps of 0.5."""
    raw = RATING_MIN + seeded_uniform(seed_from_text(title)) * RATING_SPAN
    return min(round_half_up(raw * 2) / 2, RATING_MAX)


def generate_signature(title: str) -> Signature:
    """Return "RE" when the title seed is even, "JE" when it is odd."""
    return "RE" if seed_from_text(title) % 2 == 0 else "JE"
