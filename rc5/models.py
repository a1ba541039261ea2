from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from rc5.errors import (UnsupportedWidthError, InvalidParametersError, LengthError)

SUPPORTED_WIDTHS = (8, 16, 32, 64, 128)
MAX_ROUNDS = 255
MAX_KEY_LEN = 255

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    OKGREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

# -----------------------------
# Core Parameters
# -----------------------------
@dataclass(frozen=True)
class RC5Params:
    """
    Parameters of one member of the RC5 family, written RC5-w/r/b.

    - w: word width in bits; a block is two words (2w bits)
    - rounds: number of rounds r; the expanded key holds 2(r+1) words
    - key_len: secret key length b in bytes

    Defaults give the reference configuration RC5-32/12/16.
    """
    w: int = 32          # Word width in bits
    rounds: int = 12     # Round count
    key_len: int = 16    # Secret key length in bytes

    def validate(self) -> "RC5Params":
        if self.w not in SUPPORTED_WIDTHS:
            raise UnsupportedWidthError(self.w)
        if not 0 <= self.rounds <= MAX_ROUNDS:
            raise InvalidParametersError(f"rc5: round count must be in 0..{MAX_ROUNDS}, got {self.rounds}")
        if not 0 <= self.key_len <= MAX_KEY_LEN:
            raise InvalidParametersError(f"rc5: key length must be in 0..{MAX_KEY_LEN} bytes, got {self.key_len}")
        return self

    @property
    def block_size(self) -> int:
        """Block size in bytes."""
        return self.w // 4

    @property
    def schedule_len(self) -> int:
        return 2 * (self.rounds + 1)

    def __str__(self):
        return f"RC5-{self.w}/{self.rounds}/{self.key_len}"

# -----------------------------
# Word Size
# -----------------------------
@dataclass(frozen=True)
class WordSize:
    """
    A concrete word width for the cipher's arithmetic.

    Every operation the key schedule and the round function need is
    defined here once, parameterised by `bits`:
    - add/sub: arithmetic modulo 2^w, wrapping silently
    - rotl/rotr: rotation of the low w bits by (amount mod w)
    - pack/unpack: little-endian words <-> bytes

    Widths up to 64 bits pack through the matching numpy unsigned dtype;
    128-bit words have no numpy dtype and go through int.from_bytes.
    """
    bits: int
    nbytes: int = field(init=False)
    mask: int = field(init=False)
    modulus: int = field(init=False)
    dtype: Optional[str] = field(init=False)

    def __post_init__(self):
        if self.bits not in SUPPORTED_WIDTHS:
            raise UnsupportedWidthError(self.bits)
        object.__setattr__(self, "nbytes", self.bits // 8)
        object.__setattr__(self, "modulus", 1 << self.bits)
        object.__setattr__(self, "mask", (1 << self.bits) - 1)
        object.__setattr__(self, "dtype", f"<u{self.bits // 8}" if self.bits <= 64 else None)

    def fits(self, x: int) -> bool:
        return 0 <= x <= self.mask

    def add(self, x: int, y: int) -> int:
        return (x + y) & self.mask

    def sub(self, x: int, y: int) -> int:
        return (x - y) & self.mask

    def rotl(self, x: int, amount: int) -> int:
        n = amount % self.bits
        x &= self.mask
        return ((x << n) | (x >> (self.bits - n))) & self.mask

    def rotr(self, x: int, amount: int) -> int:
        n = amount % self.bits
        x &= self.mask
        return ((x >> n) | (x << (self.bits - n))) & self.mask

    def unpack(self, data: bytes) -> List[int]:
        """Little-endian bytes -> words. Length must be a multiple of w/8."""
        if len(data) % self.nbytes:
            raise LengthError(f"rc5: {len(data)} bytes is not a multiple of the {self.nbytes}-byte word size")
        if self.dtype is None:
            return [int.from_bytes(data[i:i + self.nbytes], 'little') for i in range(0, len(data), self.nbytes)]
        return [int(x) for x in np.frombuffer(bytes(data), dtype=self.dtype)]

    def pack(self, words) -> bytes:
        """Words -> little-endian bytes. Inverse of unpack()."""
        words = [int(x) & self.mask for x in words]
        if self.dtype is None:
            return b"".join(x.to_bytes(self.nbytes, 'little') for x in words)
        return np.array(words, dtype=np.uint64).astype(self.dtype).tobytes()
