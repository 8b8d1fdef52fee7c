'''
# Portable Network Graphics

A PNG file is a fixed signature followed by a sequence of chunks; here the
content of the chunks is never interpreted, it's treated as opaque data so
that it's possible to add, find and remove auxiliary chunks preserving the
rest of the file untouched.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html> and
is available a full test-suite with a lot of PNG images covering all
the possible cases at <http://www.schaik.com/pngsuite/>.

'''
from typing import List, Optional, Tuple

from ...exceptions import BadSignature, ChunkNotFound
from .chunk import PNGChunk
from .chunk_type import ChunkType
from .utils import describe


class PNGHeader(object):
    '''The signature that any PNG file starts with.'''
    magic = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'
    size = len(magic)

    @classmethod
    def validate(cls, raw) -> None:
        header = bytes(raw[:cls.size])
        if header != cls.magic:
            raise BadSignature(f'the file doesn\'t start with the PNG signature (found {header!r})')


class PNGFile(object):
    '''
    Ordered list of chunks; by convention the first is IHDR and the last one is IEND.

     1. IHDR: contains image's width, height, bit depth, color type, compression method, filter method and interlace method
     2. PLTE: contains the palette data
     3. IDAT: contains the actual image data (compressed)
     4. IEND: is the terminator chunk

    Appending a chunk keeps the IEND as last; no chunk is protected from removal.
    '''
    header = PNGHeader.magic

    TERMINATOR = 'IEND'

    def __init__(self, chunks=()):
        self._chunks: List[PNGChunk] = list(chunks)

    @classmethod
    def unpack(cls, raw) -> 'PNGFile':
        '''Decode a whole file: any error in the chunks aborts the operation.

        The chunks are read until the end of the data, also after IEND: trailing
        bytes that don't form a complete chunk make the load fail with TruncatedRecord.'''
        PNGHeader.validate(raw)

        chunks = []
        offset = PNGHeader.size
        while offset < len(raw):
            chunk, size = PNGChunk.unpack(raw, offset=offset)
            chunks.append(chunk)
            offset += size

        return cls(chunks)

    @property
    def chunks(self) -> Tuple[PNGChunk, ...]:
        return tuple(self._chunks)

    @property
    def size(self) -> int:
        return PNGHeader.size + sum(_.size for _ in self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self.chunks)

    def _index(self, name) -> Optional[int]:
        name = str(name)
        for idx, chunk in enumerate(self._chunks):
            if str(chunk.type) == name:
                return idx

        return None

    def chunk_by_type(self, name) -> Optional[PNGChunk]:
        idx = self._index(name)

        return self._chunks[idx] if idx is not None else None

    def append_chunk(self, chunk: PNGChunk) -> None:
        idx = self._index(self.TERMINATOR)

        if idx is None:
            self._chunks.append(chunk)
        else:
            self._chunks.insert(idx, chunk)

    def remove_chunk(self, name) -> PNGChunk:
        idx = self._index(name)

        if idx is None:
            raise ChunkNotFound(name)

        return self._chunks.pop(idx)

    def pack(self) -> bytes:
        return self.header + b''.join(_.pack() for _ in self._chunks)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self._chunks))

    def __str__(self):
        lines = [f'[{idx:02d}] {describe(chunk)}' for idx, chunk in enumerate(self._chunks)]

        return '\n'.join([f'PNG with {len(self._chunks)} chunks ({self.size} bytes)'] + lines)


__all__ = [
    'ChunkType',
    'PNGChunk',
    'PNGFile',
    'PNGHeader',
]
