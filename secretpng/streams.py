import io
import logging
import os


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: a path is opened as a file, raw bytes
    are wrapped into a BytesIO.

    It's intended to be used as a context manager so that the underlying
    file is closed as soon as the data is read or written.'''
    def __init__(self, obj, flags='r'):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        if flags not in ('r', 'w'):
            raise ValueError(f'flags must be \'r\' or \'w\', not \'{flags}\'')

        self.flags = flags
        self.obj = obj

        if isinstance(obj, (bytes, bytearray, memoryview)):
            self.init_bytes()
        elif isinstance(obj, (str, os.PathLike)):
            self.init_path()
        else:
            raise ValueError('\'%s\' is the wrong kind of object to use as a stream' % obj.__class__.__name__)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def init_path(self):
        '''We think this is a path'''
        path = os.fspath(self.obj)
        logger.debug('opening path \'%s\' with flags \'%s\'' % (path, self.flags))
        self.obj = open(path, self.flags + 'b')

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(bytes(self.obj))

    def read_all(self) -> bytes:
        '''Returns all the data from the actual position up to the end.'''
        data = self.obj.read()
        logger.debug('read %d bytes' % len(data))

        return data

    def write(self, data):
        written = self.obj.write(data)
        logger.debug('written %d bytes' % written)

        return written

    def close(self):
        self.obj.close()
