import json
import secrets
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives import hashes
from base64 import b64encode, b64decode

from rc5.errors import (KeystoreError)

PBKDF2_ITERATIONS = 100000

# -----------------------------
# Key Management
# -----------------------------
def _fernet_from_passphrase(passphrase: str, salt: bytes) -> Fernet:
    # PBKDF2-HMAC-SHA256 -> 256-bit Fernet key
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=PBKDF2_ITERATIONS,
    )
    return Fernet(b64encode(kdf.derive(passphrase.encode())))

def create_keystore(passphrase: str, keystore_file: str):
    """
    Create an empty passphrase-protected keystore for RC5 secret keys.

    Stored entries are Fernet tokens (AES-128-CBC + HMAC-SHA256) under a
    key derived from the passphrase with PBKDF2-HMAC-SHA256 and a random
    16-byte salt. The file itself is JSON: {"salt": ..., "keys": {...}}.

    Args:
        passphrase: User passphrase for keystore encryption
        keystore_file: File path for keystore storage
    """
    salt = secrets.token_bytes(16)
    _fernet_from_passphrase(passphrase, salt)

    keystore = {"salt": b64encode(salt).decode(), "keys": {}}
    with open(keystore_file, "w") as kf:
        json.dump(keystore, kf)

def load_keystore(passphrase: str, keystore_file: str):
    """
    Read a keystore file and rebuild its Fernet cipher.

    Returns:
        Tuple of (keystore_data, fernet_cipher)
    """
    with open(keystore_file, "r") as kf:
        keystore = json.load(kf)
    salt = b64decode(keystore["salt"])
    return keystore, _fernet_from_passphrase(passphrase, salt)

def store_key_in_keystore(passphrase: str, key_name: str, key_data: dict, keystore_file: str):
    """
    Encrypt key_data under the keystore passphrase and save it as key_name.

    key_data is any JSON-serialisable dict; the CLI stores
    {"key": <hex>, "w": <int>, "rounds": <int>}.
    """
    keystore, fernet = load_keystore(passphrase, keystore_file)
    keystore["keys"][key_name] = fernet.encrypt(json.dumps(key_data).encode()).decode()
    with open(keystore_file, "w") as kf:
        json.dump(keystore, kf)

def retrieve_key_from_keystore(passphrase: str, key_name: str, keystore_file: str) -> dict:
    """
    Decrypt and return the entry stored as key_name.

    Raises:
        KeystoreError: If the key is missing or the passphrase is wrong
    """
    keystore, fernet = load_keystore(passphrase, keystore_file)
    if key_name not in keystore["keys"]:
        raise KeystoreError(f"Key {key_name} not found in keystore")

    try:
        decrypted_key = fernet.decrypt(keystore["keys"][key_name].encode())
    except InvalidToken as e:
        raise KeystoreError("Failed to decrypt key. Wrong passphrase?") from e
    return json.loads(decrypted_key.decode())
