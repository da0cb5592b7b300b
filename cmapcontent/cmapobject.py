import enum

from cmapcontent.cmapexceptions import CMapTypeError


class ObjectType(enum.IntEnum):
    UNKNOWN = 0
    STRING = 1
    HEX_STRING = 2
    NAME = 3
    NUMBER = 4
    LITERAL = 5
    ARRAY = 6
    DICTIONARY = 7
    TOKEN = 8


CMapValue = str | int | list["CMapObject"] | dict[str, "CMapObject"]


class CMapObject:
    """A value read from a CMap content stream.

    Every object carries exactly one payload and a ``type`` telling which
    one it is:

    ============  ===========================================
    STRING        ``str``, escapes already processed
    HEX_STRING    ``str`` holding one code unit per byte
    NAME          ``str``, ``#XX`` escapes already processed
    NUMBER        ``int`` (32 bit)
    LITERAL       ``str``, a bare word such as ``begincmap``
    ARRAY         ``list`` of :class:`CMapObject`
    DICTIONARY    ``dict`` mapping names to :class:`CMapObject`
    TOKEN         ``"]"`` or ``">>"`` seen out of place
    ============  ===========================================
    """

    __slots__ = ("type", "value")

    def __init__(self, type: ObjectType, value: CMapValue) -> None:
        self.type = type
        self.value = value

    def is_string(self) -> bool:
        return self.type in (ObjectType.STRING, ObjectType.HEX_STRING)

    def is_hex_string(self) -> bool:
        return self.type == ObjectType.HEX_STRING

    def is_name(self) -> bool:
        return self.type == ObjectType.NAME

    def is_number(self) -> bool:
        return self.type == ObjectType.NUMBER

    def is_literal(self) -> bool:
        return self.type == ObjectType.LITERAL

    def is_array(self) -> bool:
        return self.type == ObjectType.ARRAY

    def is_dictionary(self) -> bool:
        return self.type == ObjectType.DICTIONARY

    def is_token(self) -> bool:
        return self.type == ObjectType.TOKEN

    def to_bytes(self) -> bytes:
        """Packed bytes of a string payload, one byte per code unit."""
        if not self.is_string():
            raise CMapTypeError(f"{self.type.name} has no byte content")
        assert isinstance(self.value, str)
        return bytes(ord(c) & 0xFF for c in self.value)

    def __str__(self) -> str:
        if self.is_string():
            return self.to_bytes().decode("latin-1")
        return str(self.value)

    def __repr__(self) -> str:
        return f"<CMapObject {self.type.name}: {self.value!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CMapObject):
            return NotImplemented
        return self.type == other.type and self.value == other.value
