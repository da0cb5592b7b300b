"""Miscellaneous Routines."""

import charset_normalizer  # For str encoding detection

# CMap numbers are 32 bit signed ints
MAX_INT = (1 << 31) - 1
MIN_INT = -(1 << 31)


def decode_guessed(data: bytes) -> str | None:
    """Decode bytes with a guessed encoding, None if no guess fits."""
    enc = charset_normalizer.detect(data)
    if enc["encoding"] is None:
        return None
    try:
        return data.decode(enc["encoding"])
    except (UnicodeDecodeError, LookupError):
        return None


def shorten_str(s: str, size: int) -> str:
    if size < 7:
        return s[:size]
    if len(s) > size:
        length = (size - 5) // 2
        return f"{s[:length]} ... {s[-length:]}"
    else:
        return s
