"""Byte level tokenizer for CMap content streams.

The tokenizer classifies the input into delimiters, strings, names,
numbers, bare words and comments.  It does not interpret escapes: the
raw bytes of every token are handed to the parser, which decodes them
(see :mod:`cmapcontent.decoders`).
"""

import enum
import logging
import re
from typing import BinaryIO, NoReturn

from cmapcontent.cmapexceptions import CMapException, CMapSyntaxError

log = logging.getLogger(__name__)


class TokenType(enum.Enum):
    START_DIC = "<<"
    END_DIC = ">>"
    START_ARRAY = "["
    END_ARRAY = "]"
    STRING = "string"
    NAME = "name"
    NUMBER = "number"
    OTHER = "other"
    COMMENT = "comment"
    END_OF_FILE = "eof"


WHITESPACE = b"\x00\t\n\f\r "
DELIMITER = b"/%[]()<>{}"

_WS = re.escape(WHITESPACE)
_REGULAR = rb"[^" + _WS + re.escape(DELIMITER) + rb"]"

LEXER = re.compile(
    rb"(?P<whitespace>[" + _WS + rb"]+)"
    rb"|(?P<comment>%[^\r\n]*)"
    rb"|(?P<name>/" + _REGULAR + rb"*)"
    rb"|(?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?!" + _REGULAR + rb"))"
    rb"|(?P<startdict><<)"
    rb"|(?P<enddict>>>)"
    rb"|(?P<hexstr><)"
    rb"|(?P<startstr>\()"
    rb"|(?P<startarray>\[)"
    rb"|(?P<endarray>\])"
    rb"|(?P<keyword>" + _REGULAR + rb"+)"
    rb"|(?P<other>.)",
    re.DOTALL,
)
STRLEXER = re.compile(rb"\\.|[()]", re.DOTALL)
HEXEND = re.compile(rb">")
SPC = re.compile(rb"[" + _WS + rb"]")

_GROUP_TYPES = {
    "comment": TokenType.COMMENT,
    "name": TokenType.NAME,
    "number": TokenType.NUMBER,
    "startdict": TokenType.START_DIC,
    "enddict": TokenType.END_DIC,
    "startarray": TokenType.START_ARRAY,
    "endarray": TokenType.END_ARRAY,
    "keyword": TokenType.OTHER,
    "other": TokenType.OTHER,
}


class CMapTokenizer:
    """Tokenizer for in-memory CMap content.

    A file object is read whole on construction.  The current token is
    described by :attr:`token_type`, :meth:`byte_content` and
    :meth:`is_hex_string`; :meth:`next_token` moves to the next one.
    """

    def __init__(self, reader: BinaryIO | bytes) -> None:
        self.reinit(reader)

    def reinit(self, reader: BinaryIO | bytes) -> None:
        """Reinitialize tokenizer with a new file or buffer."""
        if isinstance(reader, (bytes, bytearray, memoryview)):
            self.data = bytes(reader)
        else:
            self.data = reader.read()
        self.end = len(self.data)
        self.seek(0)

    def seek(self, pos: int) -> None:
        """Seek to a position and reset the current token."""
        self.pos = pos
        self.token_type = TokenType.END_OF_FILE
        self._tokenpos = pos
        self._content = b""
        self._hex = False

    def tell(self) -> int:
        """Get the current position in the buffer."""
        return self.pos

    def next_token(self) -> bool:
        """Advance to the next token.

        :return: False once the end of the content has been reached.
        """
        while True:
            m = LEXER.match(self.data, self.pos)
            if m is None:  # can only happen at EOS
                self.seek(self.end)
                return False
            self.pos = m.end()
            if m.lastgroup != "whitespace":
                break
        self._tokenpos = m.start()
        self._hex = False
        kind = m.lastgroup
        if kind == "startstr":
            self.token_type = TokenType.STRING
            self._content = self._parse_string(m.end())
        elif kind == "hexstr":
            self.token_type = TokenType.STRING
            self._hex = True
            self._content = self._parse_hexstring(m.end())
        else:
            assert kind is not None
            self.token_type = _GROUP_TYPES[kind]
            if kind in ("comment", "name"):
                self._content = m[0][1:]
            else:
                self._content = m[0]
        log.debug(
            "next_token: pos=%r, type=%r, content=%r",
            self._tokenpos,
            self.token_type,
            self._content,
        )
        return True

    def _parse_string(self, start: int) -> bytes:
        """Find the end of a literal string, honouring nested parens and
        backslash escapes, and return its raw content."""
        paren = 1
        for m in STRLEXER.finditer(self.data, start):
            if m[0] == b"(":
                paren += 1
            elif m[0] == b")":
                paren -= 1
                if paren == 0:
                    self.pos = m.end()
                    return self.data[start : m.start()]
        self.pos = self.end
        self.throw_error(CMapSyntaxError, "unterminated string")

    def _parse_hexstring(self, start: int) -> bytes:
        m = HEXEND.search(self.data, start)
        if m is None:
            self.pos = self.end
            self.throw_error(CMapSyntaxError, "unterminated hex string")
        self.pos = m.end()
        return SPC.sub(b"", self.data[start : m.start()])

    def byte_content(self) -> bytes:
        """Raw bytes of the current token, without its delimiters."""
        return self._content

    def string_value(self) -> str:
        return self._content.decode("latin-1")

    def is_hex_string(self) -> bool:
        return self._hex

    def throw_error(
        self,
        error_class: type[CMapException],
        message: str | None = None,
        **kwargs: str,
    ) -> NoReturn:
        """Raise ``error_class`` tagged with the current token position.

        Keyword arguments are passed on to the exception.
        """
        if message is None:
            message = (error_class.__doc__ or error_class.__name__).strip()
        raise error_class(f"{message} at file pointer {self._tokenpos}", **kwargs)
