import math
import threading
from typing import Dict, Tuple

from rc5.errors import (UnsupportedWidthError)
from rc5.models import (SUPPORTED_WIDTHS)

# -----------------------------
# Magic Constants
# -----------------------------
# P_w = Odd((e - 2) * 2^w), Q_w = Odd((phi - 1) * 2^w)
MAGIC_CONSTANTS: Dict[int, Tuple[int, int]] = {
    16: (0xB7E1, 0x9E37),
    32: (0xB7E15163, 0x9E3779B9),
    64: (0xB7E151628AED2A6B, 0x9E3779B97F4A7C15),
}

_GUARD_BITS = 64

_derived: Dict[int, Tuple[int, int]] = {}
_derived_lock = threading.Lock()

def e_fraction_bits(w: int) -> int:
    """
    floor((e - 2) * 2^w), computed exactly with integer arithmetic.

    Sums 1/k! for k >= 2 at w + _GUARD_BITS bits of precision. Each term
    is truncated, so the accumulated error stays far below the guard bits.
    """
    scale = 1 << (w + _GUARD_BITS)
    term = scale
    total = 0
    k = 1
    while term:
        k += 1
        term //= k
        total += term
    return total >> _GUARD_BITS

def phi_fraction_bits(w: int) -> int:
    """floor((phi - 1) * 2^w) where phi - 1 = (sqrt(5) - 1) / 2."""
    return (math.isqrt(5 << (2 * w)) - (1 << w)) >> 1

def odd(x: int) -> int:
    return x | 1

def derive_magic_constants(w: int) -> Tuple[int, int]:
    """
    Derive (P_w, Q_w) analytically for word width w.

    The binary expansions of e - 2 and phi - 1 are truncated to w bits
    and the low bit is forced on. For w = 16, 32 and 64 this reproduces
    the published literals in MAGIC_CONSTANTS.
    """
    if w not in SUPPORTED_WIDTHS:
        raise UnsupportedWidthError(w)
    return odd(e_fraction_bits(w)), odd(phi_fraction_bits(w))

def magic_constants(w: int) -> Tuple[int, int]:
    """
    (P_w, Q_w) for word width w.

    Standard widths come from the literal table; the remaining supported
    widths (8, 128) are derived once and cached.

    Raises:
        UnsupportedWidthError: for widths with no defined constants
    """
    if w in MAGIC_CONSTANTS:
        return MAGIC_CONSTANTS[w]
    pq = _derived.get(w)
    if pq is None:
        with _derived_lock:
            pq = _derived.get(w)
            if pq is None:
                pq = derive_magic_constants(w)
                _derived[w] = pq
    return pq
