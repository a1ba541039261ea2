import secrets
from typing import List, Optional, Sequence, Tuple

from rc5.errors import (InvalidParametersError)
from rc5.models import (RC5Params)
from rc5.utils.encryption import (
    encrypt_bytes, decrypt_bytes, pad_iso7816, unpad_iso7816
)
from rc5.utils.keystore import (retrieve_key_from_keystore)
from rc5.utils.schedule import (derive_schedule)

# -----------------------------
# Keys
# -----------------------------
def generate_key(params: RC5Params = RC5Params()) -> bytes:
    """Fresh random secret key of params.key_len bytes."""
    params.validate()
    return secrets.token_bytes(params.key_len)

def schedule_from_key(key: bytes, params: RC5Params = RC5Params()) -> Tuple[int, ...]:
    """
    Derive the expanded key for key under params.

    Raises:
        InvalidParametersError: if len(key) differs from params.key_len
    """
    params.validate()
    if len(key) != params.key_len:
        raise InvalidParametersError(f"{params} expects a {params.key_len}-byte key, got {len(key)} bytes")
    return derive_schedule(key, params.w, params.rounds)

def load_key(key_hex: Optional[str] = None, keystore: Optional[str] = None, passphrase: Optional[str] = None,
             key_name: Optional[str] = None, params: RC5Params = RC5Params()) -> Tuple[bytes, RC5Params]:
    """
    Resolve a secret key from hex or from a keystore entry.

    A keystore entry carries its own w and rounds, which replace those in
    params; key_len always follows the key itself.
    """
    if keystore and passphrase and key_name:
        entry = retrieve_key_from_keystore(passphrase, key_name, keystore)
        key = bytes.fromhex(entry["key"])
        params = RC5Params(w=entry["w"], rounds=entry["rounds"], key_len=len(key))
    elif key_hex is not None:
        key = bytes.fromhex(key_hex)
        params = RC5Params(w=params.w, rounds=params.rounds, key_len=len(key))
    else:
        raise InvalidParametersError("Key required: pass a hex key or a keystore, passphrase and key name")
    return key, params.validate()

# -----------------------------
# Messages
# -----------------------------
def encrypt_message(message: bytes, key: bytes, params: RC5Params = RC5Params()) -> bytes:
    """
    Pad message (ISO 7816-4) to the block size and encrypt each block
    independently. Identical plaintext blocks give identical ciphertext
    blocks; callers needing more should chain blocks themselves.
    """
    S = schedule_from_key(key, params)
    return encrypt_bytes(pad_iso7816(message, params.block_size), S, params.w, params.rounds)

def decrypt_message(ciphertext: bytes, key: bytes, params: RC5Params = RC5Params()) -> bytes:
    """Inverse of encrypt_message."""
    S = schedule_from_key(key, params)
    return unpad_iso7816(decrypt_bytes(ciphertext, S, params.w, params.rounds))

# -----------------------------
# Display
# -----------------------------
def format_schedule(schedule: Sequence[int], w: int) -> List[str]:
    """Expanded key words as zero-padded hex, one string per word."""
    digits = w // 4
    return [f"S[{i}] = {word:0{digits}x}" for i, word in enumerate(schedule)]
