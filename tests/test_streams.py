import pytest

from secretpng.streams import Stream


def test_bytes_stream_read_all():
    data = b'\x01\x02\x03\x04\x05'

    with Stream(data) as stream:
        assert stream.read(1) == b'\x01'
        assert stream.read(1) == b'\x02'
        assert stream.read_all() == b'\x03\x04\x05'
        assert stream.tell() == 5


def test_file_stream_read_all(tmp_path):
    data = b'\x01\x02\x03\x04\x05'
    path_data = tmp_path / 'auaua'
    path_data.write_bytes(data)

    with Stream(str(path_data)) as stream:
        assert stream.read(1) == b'\x01'
        assert stream.read_all() == b'\x02\x03\x04\x05'

    assert stream.closed


def test_file_stream_write(tmp_path):
    path_data = tmp_path / 'auaua'

    with Stream(path_data, flags='w') as stream:
        assert stream.write(b'kebab') == 5

    assert path_data.read_bytes() == b'kebab'


def test_stream_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Stream(tmp_path / 'missing')


def test_stream_wrong_object():
    with pytest.raises(ValueError):
        Stream(42)

    with pytest.raises(ValueError):
        Stream(b'', flags='a')
