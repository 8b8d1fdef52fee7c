from typing import Tuple

from ...common.crc import crc32_ieee
from ...exceptions import ChecksumMismatch, InvalidEncoding, TruncatedRecord
from ...fields import Endianess, StructField
from .chunk_type import ChunkType


class PNGChunk(object):
    '''
    This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each integer field is intended big-endian.

        +--------+------+------------------+-----+
        | length | type |      data        | crc |
        +--------+------+------------------+-----+
            4       4         length          4

    The length counts only the bytes of the data and it's derived from them,
    it's not possible to set it independently.

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data,
    but not the length. It's always recalculated when unpacking so that a chunk
    with a corrupted content can't slip through.
    '''
    __slots__ = ('_type', '_data', '_crc')

    length_field = StructField('I', endianess=Endianess.BIG_ENDIAN)
    crc_field    = StructField('I', endianess=Endianess.BIG_ENDIAN)  # network byte order

    # length + type
    HEADER_SIZE = 8

    def __init__(self, chunk_type, data=b''):
        if not isinstance(chunk_type, ChunkType):
            chunk_type = ChunkType.from_str(chunk_type)

        self._type = chunk_type
        self._data = bytes(data)
        self._crc = crc32_ieee(self._type.raw, self._data)

    @classmethod
    def unpack(cls, raw, offset=0) -> Tuple['PNGChunk', int]:
        '''Decode the chunk starting at the given offset of the buffer.

        It returns the chunk and the number of bytes consumed, so that
        the caller can continue with the next one.'''
        available = len(raw) - offset
        if available < cls.HEADER_SIZE:
            raise TruncatedRecord(f'chunk must be at least of length {cls.HEADER_SIZE}, only {available} bytes left')

        length = cls.length_field.unpack(raw, offset)
        chunk_type = ChunkType.from_bytes(raw[offset + 4:offset + cls.HEADER_SIZE])

        size = cls.HEADER_SIZE + length + cls.crc_field.size
        if available < size:
            raise TruncatedRecord(
                f'chunk {chunk_type} declares {length} bytes of data but only {available - cls.HEADER_SIZE} bytes are left')

        start = offset + cls.HEADER_SIZE
        data = bytes(raw[start:start + length])
        crc = cls.crc_field.unpack(raw, start + length)

        chunk = cls(chunk_type, data)
        if chunk.crc != crc:
            raise ChecksumMismatch(crc, chunk.crc)

        return chunk, size

    @property
    def type(self) -> ChunkType:
        return self._type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        return self.HEADER_SIZE + self.length + self.crc_field.size

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncoding(f'Could not convert data of chunk {self._type} into string: {e.reason}') from e

    def pack(self) -> bytes:
        return b''.join([
            self.length_field.pack(self.length),
            self._type.raw,
            self._data,
            self.crc_field.pack(self._crc),
        ])

    def __eq__(self, other):
        if not isinstance(other, PNGChunk):
            return NotImplemented

        return self._type == other._type and self._data == other._data

    def __hash__(self):
        return hash((self._type, self._data))

    def __setattr__(self, name, value):
        if hasattr(self, '_crc'):
            raise AttributeError(f'{self.__class__.__name__} is immutable')

        super().__setattr__(name, value)

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._type,
            self.length,
            self._crc,
        )

    def __str__(self):
        return 'Chunk %s with len %d\n%r' % (self._type, self.length, self._data)
