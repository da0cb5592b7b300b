"""Object level parser for CMap content streams.

The parser pulls tokens from a :class:`~cmapcontent.tokenizer.CMapTokenizer`
and builds :class:`~cmapcontent.cmapobject.CMapObject` trees out of them.
A *command* is a run of operand objects closed by a bare word, e.g.::

    1 begincodespacerange
    <0000> <FFFF>
    endcodespacerange

reads as ``[1, begincodespacerange]`` followed by
``[<0000>, <FFFF>, endcodespacerange]``.
"""

import logging
from typing import BinaryIO, Iterator, NoReturn

from cmapcontent.casting import safe_int32
from cmapcontent.cmapexceptions import (
    InvalidDictionaryKey,
    UnexpectedCloseBracket,
    UnexpectedEndOfInput,
    UnexpectedGreaterGreater,
)
from cmapcontent.cmapobject import CMapObject, ObjectType
from cmapcontent.decoders import decode_hex_string, decode_name, decode_string
from cmapcontent.tokenizer import CMapTokenizer, TokenType
from cmapcontent.utils import MIN_INT, shorten_str

log = logging.getLogger(__name__)


class CMapContentParser:
    def __init__(self, tokenizer: CMapTokenizer) -> None:
        self.tokenizer = tokenizer

    @classmethod
    def from_bytes(cls, reader: BinaryIO | bytes) -> "CMapContentParser":
        return cls(CMapTokenizer(reader))

    def parse(self, ls: list[CMapObject] | None = None) -> list[CMapObject]:
        """Parse a single command from the content.

        Each command is output as a list of arguments having the command
        itself as the last element.  The returned list is empty if the end
        of content was reached.

        :param ls: a list to fill, cleared before use.  A new list is
            created when omitted.
        """
        if ls is None:
            ls = []
        else:
            ls.clear()
        while True:
            obj = self.read_object()
            if obj is None:
                break
            if obj.is_token():
                self._unexpected_token(obj)
            ls.append(obj)
            if obj.is_literal():
                break
        log.debug("parse: %r", ls)
        return ls

    def __iter__(self) -> Iterator[list[CMapObject]]:
        """Iterate over the commands left in the content."""
        while True:
            command = self.parse()
            if not command:
                return
            yield command

    def read_dictionary(self) -> CMapObject:
        """Read a dictionary.  The tokenizer must be positioned past the
        ``<<`` token."""
        tokenizer = self.tokenizer
        dic: dict[str, CMapObject] = {}
        while True:
            if not self.next_valid_token():
                tokenizer.throw_error(UnexpectedEndOfInput, "unexpected end of file")
            token_type = tokenizer.token_type
            if token_type is TokenType.END_DIC:
                break
            if token_type is TokenType.OTHER and tokenizer.string_value() == "def":
                continue
            if token_type is not TokenType.NAME:
                key = tokenizer.string_value()
                tokenizer.throw_error(
                    InvalidDictionaryKey,
                    f"dictionary key {key!r} is not a name",
                    token=key,
                )
            name = tokenizer.string_value()
            obj = self.read_object()
            if obj is None:
                tokenizer.throw_error(UnexpectedEndOfInput, "unexpected end of file")
            if obj.is_token():
                self._unexpected_token(obj)
            dic[name] = obj
        log.debug("read_dictionary: %r", dic)
        return CMapObject(ObjectType.DICTIONARY, dic)

    def read_array(self) -> CMapObject:
        """Read an array.  The tokenizer must be positioned past the ``[``
        token."""
        array: list[CMapObject] = []
        while True:
            obj = self.read_object()
            if obj is None:
                self.tokenizer.throw_error(
                    UnexpectedEndOfInput, "unexpected end of file"
                )
            if obj.is_token():
                if obj.value == "]":
                    break
                self._unexpected_token(obj)
            array.append(obj)
        log.debug("read_array: %r", array)
        return CMapObject(ObjectType.ARRAY, array)

    def read_object(self) -> CMapObject | None:
        """Read the next object.

        :return: the object, or None if the end of content was reached.
        """
        if not self.next_valid_token():
            return None
        tokenizer = self.tokenizer
        token_type = tokenizer.token_type
        if token_type is TokenType.START_DIC:
            return self.read_dictionary()
        elif token_type is TokenType.START_ARRAY:
            return self.read_array()
        elif token_type is TokenType.STRING:
            if tokenizer.is_hex_string():
                return CMapObject(
                    ObjectType.HEX_STRING,
                    decode_hex_string(tokenizer.byte_content()),
                )
            return CMapObject(
                ObjectType.STRING, decode_string(tokenizer.byte_content())
            )
        elif token_type is TokenType.NAME:
            return CMapObject(ObjectType.NAME, decode_name(tokenizer.byte_content()))
        elif token_type is TokenType.NUMBER:
            text = tokenizer.string_value()
            value = safe_int32(text)
            if value is None:
                log.warning("Invalid number %r", shorten_str(text, 40))
                value = MIN_INT
            return CMapObject(ObjectType.NUMBER, value)
        elif token_type is TokenType.OTHER:
            return CMapObject(ObjectType.LITERAL, tokenizer.string_value())
        elif token_type is TokenType.END_ARRAY:
            return CMapObject(ObjectType.TOKEN, "]")
        elif token_type is TokenType.END_DIC:
            return CMapObject(ObjectType.TOKEN, ">>")
        else:
            log.warning("unknown token: type=%r", token_type)
            return CMapObject(ObjectType.UNKNOWN, "")

    def _unexpected_token(self, obj: CMapObject) -> NoReturn:
        """Fail on a closing delimiter found where a value was expected."""
        if obj.value == "]":
            self.tokenizer.throw_error(UnexpectedCloseBracket, "unexpected ']'")
        self.tokenizer.throw_error(UnexpectedGreaterGreater, "unexpected '>>'")

    def next_valid_token(self) -> bool:
        """Read the next token skipping over the comments.

        :return: True if a token was read, False if the end of content was
            reached.
        """
        while self.tokenizer.next_token():
            if self.tokenizer.token_type is TokenType.COMMENT:
                continue
            return True
        return False
