'''
Operations to hide, find and remove messages inside a PNG file.

Each of them loads the whole file, works on the chunks in memory and,
when something changed, writes the file back. Errors at the file boundary
are reported as IOFailure, everything else propagates as it is.
'''
import logging

from .exceptions import IOFailure
from .images.png import ChunkType, PNGChunk, PNGFile
from .images.png.utils import get_chunk_by_name
from .streams import Stream


logger = logging.getLogger(__name__)


def load_png(path) -> PNGFile:
    try:
        with Stream(path) as stream:
            raw = stream.read_all()
    except OSError as e:
        raise IOFailure(f'could not read png input file \'{path}\': {e.strerror or e}') from e

    return PNGFile.unpack(raw)


def save_png(png: PNGFile, path) -> None:
    raw = png.pack()
    try:
        with Stream(path, flags='w') as stream:
            stream.write(raw)
    except OSError as e:
        raise IOFailure(f'could not write png file \'{path}\': {e.strerror or e}') from e

    logger.debug('saved %d chunks into \'%s\'' % (len(png), path))


def encode(path, chunk_type: str, message: str, out=None) -> PNGChunk:
    '''Add a chunk with the message as data; the result is written to "out"
    or, if not indicated, over the original file.'''
    chunk_type = ChunkType.from_str(chunk_type)
    png = load_png(path)

    # arguments not decodable from the command line arrive as surrogates, they are replaced
    chunk = PNGChunk(chunk_type, message.encode('utf-8', errors='replace'))
    png.append_chunk(chunk)

    out = out if out is not None else path
    save_png(png, out)

    logger.info(f'encoded chunk {chunk_type} ({chunk.length} bytes) into \'{out}\'')

    return chunk


def decode(path, chunk_type: str) -> PNGChunk:
    png = load_png(path)

    chunk = get_chunk_by_name(png, chunk_type)

    logger.debug(f'found chunk {chunk!r}')

    return chunk


def remove(path, chunk_type: str) -> PNGChunk:
    '''Remove the first chunk with the given type, the file is saved in place.'''
    png = load_png(path)

    chunk = png.remove_chunk(chunk_type)
    save_png(png, path)

    logger.info(f'removed chunk {chunk_type} from \'{path}\'')

    return chunk


def print_png(path) -> PNGFile:
    return load_png(path)
