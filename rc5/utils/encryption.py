from typing import Sequence, Tuple

from rc5.errors import (LengthError, MismatchedWidthError, InvalidExpandedKeyError, PaddingError)
from rc5.models import (WordSize)
from rc5.utils.arithmetic import (word_size)
from rc5.utils.schedule import (derive_schedule)

Block = Tuple[int, int]

# -----------------------------
# Input Validation
# -----------------------------
def check_expanded_key(key: Sequence[int], ws: WordSize, r: int):
    """
    Reject an expanded key whose shape or contents do not match (w, r).

    Raises:
        InvalidExpandedKeyError: if r is not a non-negative int or len(key) != 2(r+1)
        MismatchedWidthError: if a key word does not fit in w bits
    """
    if not isinstance(r, int) or isinstance(r, bool):
        raise InvalidExpandedKeyError(f"rc5: round count must be an int, got {r!r}")
    if r < 0 or len(key) != 2 * (r + 1):
        raise InvalidExpandedKeyError(
            f"rc5: expanded key has {len(key)} words, expected {2 * (r + 1)} for {r} rounds"
        )
    for word in key:
        if not ws.fits(word):
            raise MismatchedWidthError(f"rc5: expanded key word {word:#x} does not fit in {ws.bits} bits")

def check_block(block: Sequence[int], ws: WordSize):
    if len(block) != 2:
        raise MismatchedWidthError(f"rc5: a block is two words, got {len(block)}")
    for word in block:
        if not ws.fits(word):
            raise MismatchedWidthError(f"rc5: block word {word:#x} does not fit in {ws.bits} bits")

# -----------------------------
# Block Cipher
# -----------------------------
def encrypt_block(block: Block, key: Sequence[int], w: int, r: int) -> Block:
    """
    Encrypt one block (A, B) under the expanded key S.

    A = A + S[0]; B = B + S[1]
    for i in 1..r:
        A = ((A ^ B) <<< B) + S[2i]
        B = ((B ^ A) <<< A) + S[2i+1]

    With r = 0 this is just the two whitening additions.

    Raises:
        UnsupportedWidthError: if w is not supported
        InvalidExpandedKeyError: if len(key) != 2(r+1)
        MismatchedWidthError: if a block or key word exceeds w bits
    """
    ws = word_size(w)
    check_expanded_key(key, ws, r)
    check_block(block, ws)

    A = ws.add(block[0], key[0])
    B = ws.add(block[1], key[1])
    for i in range(1, r + 1):
        A = ws.add(ws.rotl(A ^ B, B), key[2 * i])
        B = ws.add(ws.rotl(B ^ A, A), key[2 * i + 1])
    return A, B

def decrypt_block(block: Block, key: Sequence[int], w: int, r: int) -> Block:
    """
    Decrypt one block; the exact inverse of encrypt_block.

    Rounds run from r down to 1, undoing B before A, then the
    whitening words S[1] and S[0] are subtracted.
    """
    ws = word_size(w)
    check_expanded_key(key, ws, r)
    check_block(block, ws)

    A, B = block
    for i in range(r, 0, -1):
        B = ws.rotr(ws.sub(B, key[2 * i + 1]), A) ^ A
        A = ws.rotr(ws.sub(A, key[2 * i]), B) ^ B
    return ws.sub(A, key[0]), ws.sub(B, key[1])

# -----------------------------
# Block <-> Bytes
# -----------------------------
def bytes_to_block(b: bytes, w: int) -> Block:
    """
    Read a 2w-bit block from bytes: A is the first little-endian word,
    B the second.
    """
    ws = word_size(w)
    if len(b) != 2 * ws.nbytes:
        raise LengthError(f"rc5: a block is {2 * ws.nbytes} bytes for w={w}, got {len(b)}")
    A, B = ws.unpack(b)
    return A, B

def block_to_bytes(block: Block, w: int) -> bytes:
    return word_size(w).pack(block)

def encrypt_bytes(data: bytes, key: Sequence[int], w: int, r: int) -> bytes:
    """
    Encrypt every 2w-bit block of data independently and concatenate.

    No padding and no chaining is applied; len(data) must be a whole
    number of blocks.
    """
    return b"".join(block_to_bytes(encrypt_block(blk, key, w, r), w) for blk in _split_blocks(data, w))

def decrypt_bytes(data: bytes, key: Sequence[int], w: int, r: int) -> bytes:
    return b"".join(block_to_bytes(decrypt_block(blk, key, w, r), w) for blk in _split_blocks(data, w))

def _split_blocks(data: bytes, w: int) -> list:
    size = 2 * word_size(w).nbytes
    if len(data) % size:
        raise LengthError(f"rc5: {len(data)} bytes is not a multiple of the {size}-byte block size")
    return [bytes_to_block(data[i:i + size], w) for i in range(0, len(data), size)]

def encrypt(secret_key: bytes, plaintext: bytes, w: int = 32, r: int = 12) -> bytes:
    """One-shot: derive the schedule for secret_key and encrypt plaintext."""
    return encrypt_bytes(plaintext, derive_schedule(secret_key, w, r), w, r)

def decrypt(secret_key: bytes, ciphertext: bytes, w: int = 32, r: int = 12) -> bytes:
    """One-shot: derive the schedule for secret_key and decrypt ciphertext."""
    return decrypt_bytes(ciphertext, derive_schedule(secret_key, w, r), w, r)

# -----------------------------
# Padding
# -----------------------------
def pad_iso7816(data: bytes, blocksize: int) -> bytes:
    """
    ISO 7816-4 padding: 0x80 followed by zero bytes up to the block
    boundary. A full block of padding is added when data is aligned.
    """
    padlen = (-len(data)) % blocksize
    if padlen == 0:
        padlen = blocksize
    return data + b"\x80" + b"\x00"*(padlen-1)

def unpad_iso7816(padded: bytes) -> bytes:
    """
    Remove ISO 7816-4 padding.

    Raises:
        PaddingError: if no 0x80 marker is found or non-zero bytes follow it
    """
    i = padded.rfind(b"\x80")
    if i == -1 or any(b != 0 for b in padded[i+1:]):
        raise PaddingError("rc5: invalid padding")
    return padded[:i]
