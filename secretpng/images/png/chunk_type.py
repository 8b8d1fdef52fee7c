'''
# Chunk type

Four bytes restricted to the ASCII letters: the case of each letter (i.e. the
bit 5 of the byte) carries a property of the chunk

| position | uppercase       | lowercase    |
|----------|-----------------|--------------|
| 0        | critical        | ancillary    |
| 1        | public          | private      |
| 2        | reserved, valid | invalid      |
| 3        | unsafe to copy  | safe to copy |

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structures.html#Chunk-naming-conventions>.
'''
import string

from bitstring import Bits

from ...enum import ChunkProperty
from ...exceptions import InvalidTypeCode


_LETTERS = frozenset(string.ascii_letters.encode('ascii'))

# the order follows the position of the byte in the type
_PROPERTIES = (
    ChunkProperty.ANCILLARY,
    ChunkProperty.PRIVATE,
    ChunkProperty.RESERVED,
    ChunkProperty.SAFE_TO_COPY,
)

# index of the case bit (0x20) counting from the most significant bit of a byte
_CASE_BIT = 2


class ChunkType(object):
    __slots__ = ('_raw', '_properties')

    def __init__(self, raw):
        try:
            raw = bytes(raw)
        except ValueError as e:
            raise InvalidTypeCode(f'Chunk type code must be made of bytes: {e}') from e

        if len(raw) != 4:
            raise InvalidTypeCode(f'Chunk type code must be exactly 4 bytes, not {len(raw)}')

        if not all(_ in _LETTERS for _ in raw):
            raise InvalidTypeCode(
                f'Chunk type code must only have ascii alphabetic values! Ranges [65-90] or [97-122], got {list(raw)}')

        self._raw = raw

        bits = Bits(raw)
        properties = ChunkProperty.NONE
        for idx, prop in enumerate(_PROPERTIES):
            if bits[idx * 8 + _CASE_BIT]:
                properties |= prop

        self._properties = properties

    @classmethod
    def from_bytes(cls, raw) -> 'ChunkType':
        '''Build the type from its four bytes (anything bytes() accepts).'''
        return cls(raw)

    @classmethod
    def from_str(cls, text: str) -> 'ChunkType':
        if len(text) != 4 or not all(_ in string.ascii_letters for _ in text):
            raise InvalidTypeCode(f'Chunk type code must be an ascii string of length 4 exclusively, got {text!r}')

        return cls(text.encode('ascii'))

    @property
    def raw(self) -> bytes:
        return self._raw

    @property
    def properties(self) -> ChunkProperty:
        return self._properties

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self)

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __setattr__(self, name, value):
        if hasattr(self, '_properties'):
            raise AttributeError(f'{self.__class__.__name__} is immutable')

        super().__setattr__(name, value)

    def is_critical(self) -> bool:
        return not self._properties & ChunkProperty.ANCILLARY

    def is_public(self) -> bool:
        return not self._properties & ChunkProperty.PRIVATE

    def is_reserved_bit_valid(self) -> bool:
        return not self._properties & ChunkProperty.RESERVED

    # a type is valid when it respects the reserved bit
    is_valid = is_reserved_bit_valid

    def is_safe_to_copy(self) -> bool:
        return bool(self._properties & ChunkProperty.SAFE_TO_COPY)
