"""Deterministic seeds and random draws derived from text.

The seed is the classic ``h = h * 31 + c`` string hash computed over UTF-16
code units with signed 32-bit wraparound, so the same title yields the same
seed in any implementation that follows the same rule.
"""

import random
import struct

_INT32_MIN = -(2**31)
_INT32_SPAN = 2**32


def to_int32(value: int) -> int:
    """Wrap an arbitrary integer into the signed 32-bit range."""
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def seed_from_text(text: str) -> int:
    """Hash text into a signed 32-bit integer seed."""
    seed = 0
    encoded = text.encode("utf-16-le", errors="surrogatepass")
    for (code_unit,) in struct.iter_unpack("<H", encoded):
        seed = to_int32(seed * 31 + code_unit)
    return seed


def seeded_rng(seed: int) -> random.Random:
    """Create a generator whose sequence depends only on ``seed``."""
    return random.Random(seed)


def seeded_uniform(seed: int) -> float:
    """First draw in [0, 1) from the generator for ``seed``."""
    return seeded_rng(seed).random()
