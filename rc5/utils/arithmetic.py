import threading
from typing import Dict, List, Sequence

from rc5.models import (WordSize)

# -----------------------------
# Word Size Registry
# -----------------------------
_word_sizes: Dict[int, WordSize] = {}
_word_sizes_lock = threading.Lock()

def word_size(w: int) -> WordSize:
    """
    Return the shared WordSize instance for width w.

    Instances are immutable, so the registry only guards first-time
    population. Raises UnsupportedWidthError for widths other than
    8, 16, 32, 64 and 128.
    """
    ws = _word_sizes.get(w)
    if ws is None:
        with _word_sizes_lock:
            ws = _word_sizes.get(w)
            if ws is None:
                ws = WordSize(w)
                _word_sizes[w] = ws
    return ws

# -----------------------------
# Modular Arithmetic
# -----------------------------
def add(x: int, y: int, w: int) -> int:
    """(x + y) mod 2^w"""
    return word_size(w).add(x, y)

def sub(x: int, y: int, w: int) -> int:
    """(x - y) mod 2^w"""
    return word_size(w).sub(x, y)

# -----------------------------
# Rotations
# -----------------------------
def rotl(x: int, amount: int, w: int) -> int:
    """
    Rotate the low w bits of x left by (amount mod w).

    amount may be any non-negative integer, typically a full word; only
    its residue modulo w is used, so rotl(x, w, w) == rotl(x, 0, w) == x.
    """
    return word_size(w).rotl(x, amount)

def rotr(x: int, amount: int, w: int) -> int:
    """Rotate the low w bits of x right by (amount mod w)."""
    return word_size(w).rotr(x, amount)

# -----------------------------
# Byte <-> Word Conversion
# -----------------------------
def bytes_to_words(data: bytes, w: int) -> List[int]:
    """
    Interpret data as consecutive little-endian words of w/8 bytes.

    Raises:
        LengthError: if len(data) is not a multiple of w/8
    """
    return word_size(w).unpack(data)

def words_to_bytes(words: Sequence[int], w: int) -> bytes:
    """Inverse of bytes_to_words."""
    return word_size(w).pack(words)
