"""
RC5 - a parameterised block cipher, RC5-w/r/b

RC5 works on two-word blocks of w bits each and is built from three
operations only: addition modulo 2^w, XOR, and data-dependent rotation.

Key Schedule:

The secret key (b bytes) is loaded into words L. The working key S of
2(r+1) words is seeded from the magic constants P_w = Odd((e-2)*2^w) and
Q_w = Odd((phi-1)*2^w), then mixed with L over 3*max(len(L), len(S))
steps.

Encryption:

A = A + S[0], B = B + S[1], then for each round i:
A = ((A ^ B) <<< B) + S[2i]
B = ((B ^ A) <<< A) + S[2i+1]

Decryption runs the same steps backwards with subtraction and right
rotation.

Supported word widths are 8, 16, 32, 64 and 128 bits. Only the raw block
primitive lives here; chaining modes are left to the caller.

This implementation is for educational purposes and makes no
constant-time guarantees.
"""
from rc5.errors import (
    RC5Error, UnsupportedWidthError, InvalidParametersError, LengthError, MismatchedWidthError,
    InvalidExpandedKeyError, PaddingError, KeystoreError
)
from rc5.models import (RC5Params, WordSize, SUPPORTED_WIDTHS)
from rc5.utils.arithmetic import (word_size, add, sub, rotl, rotr, bytes_to_words, words_to_bytes)
from rc5.utils.constants import (magic_constants, derive_magic_constants)
from rc5.utils.schedule import (derive_schedule)
from rc5.utils.encryption import (
    encrypt_block, decrypt_block, bytes_to_block, block_to_bytes, encrypt_bytes, decrypt_bytes,
    encrypt, decrypt
)
