import pytest

from secretpng.cli import main
from secretpng.images.png import PNGFile


def run(*args):
    return main(['secretpng', *[str(_) for _ in args]])


def test_usage(capsys):
    assert run() == 1
    assert run('hide', 'image.png') == 1
    assert 'usage: secretpng' in capsys.readouterr().err


@pytest.mark.parametrize('args', [
    ('encode', 'PATH', 'ruSt'),
    ('encode', 'PATH', 'ruSt', 'message', 'out.png', 'extra'),
    ('decode', 'PATH'),
    ('remove', 'PATH', 'ruSt', 'extra'),
    ('print', 'PATH', 'ruSt'),
])
def test_wrong_arguments(args, png_path, capsys):
    args = [png_path if _ == 'PATH' else _ for _ in args]

    assert run(*args) == 1
    assert 'usage:' in capsys.readouterr().err


def test_missing_image(tmp_path, capsys):
    assert run('print', tmp_path / 'missing.png') == 1
    assert 'input image does not exist' in capsys.readouterr().err


def test_encode_decode(png_path, capsys):
    assert run('encode', png_path, 'ruSt', 'this is a secret') == 0
    assert 'Chunk encoded successfully!' in capsys.readouterr().out

    assert run('decode', png_path, 'ruSt') == 0
    out = capsys.readouterr().out
    assert out.startswith('Chunk found!\nChunk: Chunk ruSt with len 16\n')
    assert 'Message: this is a secret' in out


def test_encode_output(png_path, png_raw, tmp_path):
    out = tmp_path / 'out.png'

    assert run('encode', png_path, 'ruSt', 'secret', out) == 0

    assert png_path.read_bytes() == png_raw
    assert PNGFile.unpack(out.read_bytes()).chunk_by_type('ruSt').data == b'secret'


def test_encode_invalid_type(png_path, capsys):
    assert run('encode', png_path, 'ru5t', 'secret') == 1
    assert capsys.readouterr().err.startswith('Encode error: ')


def test_decode_not_found(png_path, capsys):
    assert run('decode', png_path, 'ruSt') == 1
    assert 'Decode error: no chunk with type ruSt' in capsys.readouterr().err


def test_decode_binary_chunk(png_path, capsys):
    assert run('decode', png_path, 'IDAT') == 1

    captured = capsys.readouterr()
    assert captured.out.startswith('Chunk found!')
    assert captured.err.startswith('Decode error: ')


def test_remove(png_path, png_raw, capsys):
    run('encode', png_path, 'ruSt', 'secret')

    assert run('remove', png_path, 'ruSt') == 0
    assert 'Chunk removed successfully!' in capsys.readouterr().out
    assert png_path.read_bytes() == png_raw


def test_remove_not_found(png_path, png_raw, capsys):
    assert run('remove', png_path, 'ruSt') == 1
    assert capsys.readouterr().err.startswith('Remove error: ')
    assert png_path.read_bytes() == png_raw


def test_print(png_path, capsys):
    assert run('print', png_path) == 0

    out = capsys.readouterr().out
    assert out.startswith(f'Image {png_path}\nPNG with ')
    assert '[00] IHDR' in out


def test_print_not_a_png(tmp_path, capsys):
    path = tmp_path / 'text.png'
    path.write_bytes(b'this is not an image')

    assert run('print', path) == 1
    assert capsys.readouterr().err.startswith('Print error: ')


def test_encode_undecodable_argument(png_path, capsys):
    """Non UTF-8 bytes on the command line arrive as surrogates and are replaced."""
    assert run('encode', png_path, 'ruSt', 'caf\udce9') == 0
    capsys.readouterr()

    assert run('decode', png_path, 'ruSt') == 0
    assert 'Message: caf?' in capsys.readouterr().out
