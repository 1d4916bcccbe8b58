"""Random numbers, range mapping and word packing helpers."""

from __future__ import annotations

import random as _random
from typing import Optional

__all__ = ["random_seed", "random_below", "random_between", "map_range", "make_word"]

_U32 = 0xFFFFFFFF
_TWO_32 = 1 << 32

_rng = _random.Random()


def random_seed(seed: int) -> None:
    """Seed the generator; a seed of zero leaves it as it is."""
    if seed != 0:
        _rng.seed(seed)


def random_below(howbig: int) -> int:
    """A uniformly distributed integer in ``[0, howbig)``.

    Zero is returned when ``howbig`` is zero or negative. The bound must
    fit in 32 bits.
    """
    if howbig <= 0:
        return 0
    if howbig > _U32:
        raise ValueError(f"bound must fit in 32 bits, not {howbig}")
    m = _rng.getrandbits(32) * howbig
    low = m & _U32
    if low < howbig:
        threshold = (_TWO_32 - howbig) % howbig
        while low < threshold:
            m = _rng.getrandbits(32) * howbig
            low = m & _U32
    return m >> 32


def random_between(howsmall: int, howbig: int) -> int:
    """A random integer in ``[howsmall, howbig)``; ``howsmall`` if the range is empty."""
    if howsmall >= howbig:
        return howsmall
    return random_below(howbig - howsmall) + howsmall


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map ``x`` from one integer range to another with truncating division.

    An empty input range (``in_min == in_max``) gives -1.
    """
    divisor = in_max - in_min
    if divisor == 0:
        return -1
    return _trunc_div((x - in_min) * (out_max - out_min), divisor) + out_min


def make_word(high: int, low: Optional[int] = None) -> int:
    """Pack two bytes into a 16-bit word; with one argument return it unchanged."""
    if low is None:
        return high
    return ((high & 0xFF) << 8) | (low & 0xFF)