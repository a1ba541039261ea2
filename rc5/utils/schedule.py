from typing import Tuple

from rc5.errors import (InvalidParametersError)
from rc5.models import (MAX_ROUNDS, MAX_KEY_LEN)
from rc5.utils.arithmetic import (word_size)
from rc5.utils.constants import (magic_constants)

# -----------------------------
# Key Schedule
# -----------------------------
def key_to_words(secret_key: bytes, w: int) -> list:
    """
    Load the secret key into the word array L.

    The key is zero-padded to a whole number of words and read
    little-endian. An empty key yields a single zero word.
    """
    ws = word_size(w)
    if not secret_key:
        return [0]
    padded = bytes(secret_key) + b"\x00" * (-len(secret_key) % ws.nbytes)
    return ws.unpack(padded)

def init_schedule(w: int, r: int) -> list:
    """S[0] = P_w; S[i] = S[i-1] + Q_w for i in 1..2r+1."""
    ws = word_size(w)
    P, Q = magic_constants(w)
    S = [P]
    for _ in range(1, 2 * r + 2):
        S.append(ws.add(S[-1], Q))
    return S

def derive_schedule(secret_key: bytes, w: int, r: int) -> Tuple[int, ...]:
    """
    Expand a secret key into the 2(r+1)-word working key S.

    The result is a pure function of (secret_key, w, r). The key is
    only read; the caller keeps ownership of it.

    Args:
        secret_key: b bytes, 0 <= b <= 255
        w: word width in bits
        r: round count, 0 <= r <= 255

    Returns:
        Expanded key as a tuple of 2(r+1) words

    Raises:
        UnsupportedWidthError: if w is not a supported width
        InvalidParametersError: if r or len(secret_key) is out of range
    """
    ws = word_size(w)
    if not isinstance(r, int) or not 0 <= r <= MAX_ROUNDS:
        raise InvalidParametersError(f"rc5: round count must be in 0..{MAX_ROUNDS}, got {r!r}")
    if len(secret_key) > MAX_KEY_LEN:
        raise InvalidParametersError(f"rc5: key length must be at most {MAX_KEY_LEN} bytes, got {len(secret_key)}")

    L = key_to_words(secret_key, w)
    S = init_schedule(w, r)

    # Mix the secret key into S; three passes over the longer array
    t = 3 * max(len(L), len(S))
    i = j = A = B = 0
    for _ in range(t):
        A = S[i] = ws.rotl(ws.add(ws.add(S[i], A), B), 3)
        B = L[j] = ws.rotl(ws.add(ws.add(L[j], A), B), ws.add(A, B))
        i = (i + 1) % len(S)
        j = (j + 1) % len(L)

    return tuple(S)
