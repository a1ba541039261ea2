import pytest

from rc5.errors import (UnsupportedWidthError)
from rc5.utils.constants import (MAGIC_CONSTANTS, magic_constants, derive_magic_constants)


@pytest.mark.parametrize("w", [16, 32, 64])
def test_derivation_reproduces_published_constants(w):
    assert derive_magic_constants(w) == MAGIC_CONSTANTS[w]


def test_standard_constants():
    assert magic_constants(32) == (0xB7E15163, 0x9E3779B9)
    assert magic_constants(16) == (0xB7E1, 0x9E37)
    assert magic_constants(64) == (0xB7E151628AED2A6B, 0x9E3779B97F4A7C15)


def test_derived_constants_8():
    assert magic_constants(8) == (0xB7, 0x9F)


def test_derived_constants_128():
    assert magic_constants(128) == (
        0xB7E151628AED2A6ABF7158809CF4F3C7,
        0x9E3779B97F4A7C15F39CC0605CEDC835,
    )


@pytest.mark.parametrize("w", [8, 16, 32, 64, 128])
def test_constants_are_odd_and_fit(w):
    P, Q = magic_constants(w)
    assert P & 1 and Q & 1
    assert P < (1 << w) and Q < (1 << w)


def test_constants_are_cached():
    assert magic_constants(128) is magic_constants(128)


@pytest.mark.parametrize("w", [0, 12, 24, 80])
def test_unsupported_width(w):
    with pytest.raises(UnsupportedWidthError):
        magic_constants(w)
