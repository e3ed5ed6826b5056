"""
Deterministic index derivation from a string key.

FNV-1a hashes the key to 32 bits, the hash seeds a mulberry32 generator,
and a single ``[0, 1)`` draw is scaled to the population. Both algorithms
work on 32-bit unsigned integers only, so the result is identical on every
platform and matches a JavaScript implementation that hashes UTF-16 code
units with ``Math.imul``.
"""

import math

_MASK_32 = 0xFFFFFFFF

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

_MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _utf16_code_units(text: str):
    data = text.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a over the UTF-16 code units of ``text``."""
    h = FNV_OFFSET_BASIS
    for unit in _utf16_code_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & _MASK_32
    return h


class Mulberry32:
    """
    Small-state (32-bit) pseudo-random generator.

    Not suitable for anything security related; it only needs to spread
    nearby seeds apart.
    """

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK_32

    def next_uint32(self) -> int:
        self._state = (self._state + _MULBERRY_INCREMENT) & _MASK_32
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & _MASK_32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & _MASK_32)) & _MASK_32
        return (t ^ (t >> 14)) & _MASK_32

    def next_float(self) -> float:
        """Next sample in ``[0, 1)``."""
        return self.next_uint32() / _TWO_POW_32


def derive_index(seed_key: str, population_size: int) -> int:
    """
    Map ``seed_key`` to an index in ``[0, population_size)``.

    Same key and size always give the same index.

    Raises:
        ValueError: If ``population_size`` is not positive.
    """
    if population_size <= 0:
        raise ValueError(f"population_size must be positive, got {population_size}")
    rng = Mulberry32(fnv1a_32(seed_key))
    return math.floor(rng.next_float() * population_size)
