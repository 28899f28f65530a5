"""Seeded pseudo-random source shared by the lyric and arrangement builders.

The stream is FNV-1a (32-bit) over the UTF-8 bytes of the seed, followed by
xorshift32 steps. Both halves are frozen under ``HASH_VERSION``; changing
either one changes every generated song.
"""

from typing import Callable, Optional, Sequence, TypeVar, Union

HASH_VERSION = "fnv1a32-xorshift32/1"
DEFAULT_SEED = "songsmith"

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
ZERO_STATE_FALLBACK = 0x9E3779B9
_MASK32 = 0xFFFFFFFF

T = TypeVar("T")
Rng = Callable[[], float]
Seed = Optional[Union[str, int, float]]


def fnv1a_32(text: str) -> int:
    h = FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & _MASK32
    return h


def xorshift32(state: int) -> int:
    x = state & _MASK32
    x ^= (x << 13) & _MASK32
    x ^= x >> 17
    x ^= (x << 5) & _MASK32
    return x


def seed_to_text(seed: Seed) -> str:
    if seed is None:
        return DEFAULT_SEED
    text = str(seed)
    return text if text else DEFAULT_SEED


def make_rng(seed: Seed) -> Rng:
    """Return a generator of floats in [0, 1) that is fully determined by ``seed``."""
    state = fnv1a_32(seed_to_text(seed))
    if state == 0:
        # xorshift never leaves the all-zero state
        state = ZERO_STATE_FALLBACK

    def _next() -> float:
        nonlocal state
        state = xorshift32(state)
        return state / 4294967296.0

    return _next


def pick(rng: Rng, items: Sequence[T]) -> T:
    if not items:
        raise ValueError("cannot pick from an empty pool")
    idx = int(rng() * len(items))
    return items[max(0, min(len(items) - 1, idx))]


def rand_int(rng: Rng, low: int, high: int) -> int:
    """Inclusive integer draw consuming a single rng value."""
    span = high - low + 1
    return low + max(0, min(span - 1, int(rng() * span)))
