__all__ = [
    "LZWException",
    "LZWDecodeError",
    "LZWInvalidCodeError",
    "LZWTableOverflowError",
    "LZWTruncatedStreamError",
]


class LZWException(Exception):
    """Base class for LZW-related exceptions."""


class LZWDecodeError(LZWException, ValueError):
    """Raised when a strip cannot be decoded."""


class LZWInvalidCodeError(LZWDecodeError):
    """Raised when a code refers past the next assignable table slot."""


class LZWTableOverflowError(LZWDecodeError):
    """Raised when the string table is full and no clear code was sent."""


class LZWTruncatedStreamError(LZWDecodeError, EOFError):
    """Raised in strict mode when the input ends before the EOI code."""
