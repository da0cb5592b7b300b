"""Decoding of raw token bytes into CMap values.

All the functions here are pure: they take the bytes handed over by the
tokenizer and return text in which every character stands for one byte
(or, for hex strings, one code unit) of the original content.
"""

import logging

from cmapcontent import settings
from cmapcontent.cmapexceptions import CMapTypeError, CMapValueError
from cmapcontent.cmapobject import CMapObject, ObjectType

log = logging.getLogger(__name__)


HEX = b"0123456789abcdefABCDEF"
OCTAL = b"01234567"
ESC_STRING = {
    ord("b"): 8,
    ord("t"): 9,
    ord("n"): 10,
    ord("f"): 12,
    ord("r"): 13,
    ord("("): 40,
    ord(")"): 41,
    ord("\\"): 92,
}
CR = 13
LF = 10


def get_hex(b: int) -> int:
    """Value of the hex digit ``b``.

    Bytes that are not hex digits yield ``settings.HEX_FALLBACK_NIBBLE``,
    or raise :class:`CMapValueError` in strict mode.
    """
    c = bytes((b,))
    if c in HEX:
        return int(c, 16)
    if settings.STRICT:
        raise CMapValueError(f"Invalid hex digit {c!r}")
    log.warning("Invalid hex digit %r", c)
    return settings.HEX_FALLBACK_NIBBLE


def decode_name(content: bytes) -> str:
    """Resolve the ``#XX`` escapes of a name.

    A ``#`` too close to the end to be followed by two digits ends the
    name there.
    """
    buf = []
    k = 0
    while k < len(content):
        c = content[k]
        if c == ord("#"):
            if k + 2 >= len(content):
                log.warning("Truncated escape in name %r", content)
                break
            c = ((get_hex(content[k + 1]) << 4) + get_hex(content[k + 2])) & 0xFFFF
            k += 2
        buf.append(chr(c))
        k += 1
    return "".join(buf)


def decode_hex_string(content: bytes) -> str:
    """Pack the nibbles of a hex string, two per character.

    An odd final digit is read as if followed by ``0``.
    """
    buf = []
    i = 0
    while i < len(content):
        v1 = get_hex(content[i])
        i += 1
        if i == len(content):
            buf.append(chr((v1 << 4) & 0xFFFF))
            break
        v2 = get_hex(content[i])
        i += 1
        buf.append(chr(((v1 << 4) + v2) & 0xFFFF))
    return "".join(buf)


def decode_string(content: bytes) -> str:
    """Process the escapes of a literal string.

    Besides the usual escapes, an escaped end of line is dropped, a bare
    CR or CRLF becomes LF, and an octal escape takes at most three digits
    with high-order overflow ignored.
    """
    buf = []
    i = 0
    n = len(content)
    while i < n:
        ch = content[i]
        i += 1
        if ch == ord("\\"):
            if i == n:
                log.warning("EOF inside escape %r", content)
                break
            ch = content[i]
            i += 1
            if ch in ESC_STRING:
                ch = ESC_STRING[ch]
            elif ch == CR:
                if i < n and content[i] == LF:
                    i += 1
                continue
            elif ch == LF:
                continue
            elif ch in OCTAL:
                octal = ch - ord("0")
                ndigits = 1
                while ndigits < 3 and i < n and content[i] in OCTAL:
                    octal = (octal << 3) + content[i] - ord("0")
                    i += 1
                    ndigits += 1
                ch = octal & 0xFF
        elif ch == CR:
            ch = LF
            if i < n and content[i] == LF:
                i += 1
        buf.append(chr(ch))
    return "".join(buf)


def _to_hex4(n: int) -> str:
    return "%04x" % (n & 0xFFFF)


def to_hex(n: int) -> str:
    """Format a code point as ``<hhhh>``.

    Code points beyond the BMP are written as their UTF-16 surrogate pair
    wrapped in an array, ``[<hhhhhhhh>]``.
    """
    if n < 0x10000:
        return "<" + _to_hex4(n) + ">"
    n -= 0x10000
    high = n // 0x400 + 0xD800
    low = n % 0x400 + 0xDC00
    return "[<" + _to_hex4(high) + _to_hex4(low) + ">]"


def decode_cmap_object(obj: CMapObject) -> str:
    """Text of a string-like object.

    Hex strings are read as UTF-16BE, with U+FFFD standing in for a
    dangling byte or an unpaired surrogate.  The other string-like
    variants are returned as they are.
    """
    if obj.is_hex_string():
        return obj.to_bytes().decode("UTF-16BE", "replace")
    if obj.type in (ObjectType.STRING, ObjectType.NAME, ObjectType.LITERAL):
        assert isinstance(obj.value, str)
        return obj.value
    raise CMapTypeError(f"Cannot decode {obj!r} as text")
