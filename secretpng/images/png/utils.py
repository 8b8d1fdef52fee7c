from typing import Iterable

from ...exceptions import ChunkNotFound
from .chunk import PNGChunk


def get_chunk_by_name(chunks: Iterable[PNGChunk], name) -> PNGChunk:
    name = str(name)
    for chunk in chunks:
        if str(chunk.type) == name:
            return chunk

    raise ChunkNotFound(name)


def describe(chunk: PNGChunk) -> str:
    '''One line summary of the chunk, the flags column reads as

     - C/A: critical or ancillary
     - P/p: public or private
     - V/r: reserved bit valid or not
     - U/S: unsafe or safe to copy
    '''
    chunk_type = chunk.type
    flags = ''.join([
        'C' if chunk_type.is_critical() else 'A',
        'P' if chunk_type.is_public() else 'p',
        'V' if chunk_type.is_reserved_bit_valid() else 'r',
        'S' if chunk_type.is_safe_to_copy() else 'U',
    ])

    return f'{chunk_type} {chunk.length:>10d} 0x{chunk.crc:08x} {flags}'
