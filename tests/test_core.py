import pytest

from rc5.core import (
    generate_key, schedule_from_key, load_key, encrypt_message, decrypt_message, format_schedule
)
from rc5.errors import (InvalidParametersError, UnsupportedWidthError, KeystoreError)
from rc5.models import (RC5Params)
from rc5.utils.keystore import (create_keystore, store_key_in_keystore, retrieve_key_from_keystore)


def test_params_defaults_and_name():
    vp = RC5Params()
    assert (vp.w, vp.rounds, vp.key_len) == (32, 12, 16)
    assert str(vp) == "RC5-32/12/16"
    assert vp.block_size == 8
    assert vp.schedule_len == 26


@pytest.mark.parametrize("kwargs,error", [
    ({"w": 24}, UnsupportedWidthError),
    ({"rounds": 256}, InvalidParametersError),
    ({"rounds": -1}, InvalidParametersError),
    ({"key_len": 256}, InvalidParametersError),
])
def test_params_validation(kwargs, error):
    with pytest.raises(error):
        RC5Params(**kwargs).validate()


def test_generate_key_length():
    assert len(generate_key(RC5Params(key_len=24))) == 24
    assert generate_key() != generate_key()


def test_schedule_from_key_checks_key_length():
    assert len(schedule_from_key(bytes(16))) == 26
    with pytest.raises(InvalidParametersError):
        schedule_from_key(bytes(15))


@pytest.mark.parametrize("w", [8, 16, 32, 64, 128])
@pytest.mark.parametrize("message", [b"", b"x", b"exactly8", b"RC5 is a fast symmetric block cipher" * 5])
def test_message_round_trip(w, message):
    vp = RC5Params(w=w, rounds=12, key_len=16)
    key = generate_key(vp)
    ct = encrypt_message(message, key, vp)
    assert len(ct) % vp.block_size == 0
    assert len(ct) > len(message)
    assert decrypt_message(ct, key, vp) == message


def test_format_schedule():
    lines = format_schedule((0xB7E15163, 0x1), 32)
    assert lines == ["S[0] = b7e15163", "S[1] = 00000001"]


def test_load_key_from_hex():
    key, vp = load_key("00" * 10, params=RC5Params(w=16, rounds=8))
    assert key == bytes(10)
    assert vp == RC5Params(w=16, rounds=8, key_len=10)


def test_load_key_requires_a_source():
    with pytest.raises(InvalidParametersError):
        load_key()


@pytest.fixture
def keystore_file(tmp_path):
    path = str(tmp_path / "keystore.json")
    create_keystore("correct horse", path)
    return path


def test_keystore_round_trip(keystore_file):
    entry = {"key": "00112233445566778899aabbccddeeff", "w": 64, "rounds": 16}
    store_key_in_keystore("correct horse", "alice", entry, keystore_file)
    assert retrieve_key_from_keystore("correct horse", "alice", keystore_file) == entry

    key, vp = load_key(keystore=keystore_file, passphrase="correct horse", key_name="alice")
    assert key == bytes.fromhex(entry["key"])
    assert vp == RC5Params(w=64, rounds=16, key_len=16)


def test_keystore_missing_key(keystore_file):
    with pytest.raises(KeystoreError):
        retrieve_key_from_keystore("correct horse", "bob", keystore_file)


def test_keystore_wrong_passphrase(keystore_file):
    store_key_in_keystore("correct horse", "alice", {"key": "00", "w": 32, "rounds": 12}, keystore_file)
    with pytest.raises(KeystoreError):
        retrieve_key_from_keystore("battery staple", "alice", keystore_file)
