import io

import pytest
from PIL import Image

from secretpng.images.png import PNGChunk, PNGHeader


@pytest.fixture
def png_raw():
    """A real PNG image, 5x5 red pixels as produced by Pillow."""
    buffer = io.BytesIO()
    Image.new('RGB', (5, 5), color='red').save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def png_path(tmp_path, png_raw):
    path = tmp_path / 'red.png'
    path.write_bytes(png_raw)

    return path


@pytest.fixture
def minimal_raw():
    """Signature plus IHDR, a tEXt chunk and IEND built by hand."""
    chunks = [
        PNGChunk('IHDR', b'\x00\x00\x00\x01\x00\x00\x00\x01\x08\x02\x00\x00\x00'),
        PNGChunk('tEXt', b'Comment\x00kebab'),
        PNGChunk('IEND'),
    ]

    return PNGHeader.magic + b''.join(_.pack() for _ in chunks)
