"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable from a buffer of bytes.
"""
import struct
from enum import Enum, auto

from .exceptions import TruncatedRecord


class Endianess(Enum):
    BIG_ENDIAN = auto()


_PREFIXES = {
    Endianess.BIG_ENDIAN: '>',
}


class StructField(object):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.

    It doesn't store any value: it's only the description of how a value is laid out
    so that the same instance can be shared between all the chunks.
    """

    def __init__(self, format, endianess=Endianess.BIG_ENDIAN):
        self.format = format
        self.endianess = endianess
        self._struct = struct.Struct(self.get_format())

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.get_format())

    def get_format(self):
        return '%s%s' % (_PREFIXES[self.endianess], self.format)

    @property
    def size(self):
        return self._struct.size

    def pack(self, value) -> bytes:
        return self._struct.pack(value)

    def unpack(self, raw, offset=0):
        '''Read the value at the given offset of the buffer.'''
        try:
            return self._struct.unpack_from(raw, offset)[0]
        except struct.error as e:
            raise TruncatedRecord(
                f'need {self.size} bytes at offset {offset} but the buffer has {max(len(raw) - offset, 0)}') from e
