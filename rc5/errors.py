# -----------------------------
# Error Types
# -----------------------------
class RC5Error(Exception):
    """Base class for rc5 errors"""

    pass


class InvalidParametersError(RC5Error, ValueError):
    """Round count, key length or word width outside the supported range."""

    pass


class UnsupportedWidthError(InvalidParametersError):
    """Word width has no magic constants or rotation semantics."""

    def __init__(self, w):
        self.w = w
        super().__init__(f"rc5: unsupported word width {w} (expected one of 8, 16, 32, 64, 128)")


class LengthError(RC5Error, ValueError):
    """Byte sequence not aligned to a word or block boundary."""

    pass


class MismatchedWidthError(RC5Error, ValueError):
    """A word value does not fit in w bits."""

    pass


class InvalidExpandedKeyError(RC5Error, ValueError):
    """Expanded key length inconsistent with the round count."""

    pass


class PaddingError(RC5Error, ValueError):
    pass


class KeystoreError(RC5Error):
    pass
