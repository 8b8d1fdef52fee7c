class SecretPNGException(Exception):
    '''Base class to extend in order to throw exception in secretpng.

    The message passed is what the command line shows to the user.
    '''
    pass


class UnpackException(SecretPNGException):
    '''Raised when some binary data cannot be decoded into its representation.'''
    pass


class InvalidTypeCode(UnpackException, ValueError):
    pass


class TruncatedRecord(UnpackException):
    pass


class ChecksumMismatch(UnpackException):
    '''The CRC stored in a chunk doesn't match the one calculated from its content.'''

    def __init__(self, stored, computed):
        self.stored = stored
        self.computed = computed
        super().__init__(f'Invalid chunk crc! {stored} vs {computed}')


class BadSignature(UnpackException):
    pass


class InvalidEncoding(SecretPNGException):
    pass


class ChunkNotFound(SecretPNGException, LookupError):

    def __init__(self, chunk_type):
        self.chunk_type = str(chunk_type)
        super().__init__(f'no chunk with type {self.chunk_type}')


class IOFailure(SecretPNGException):
    '''This is used to wrap errors happening at the file boundary.'''
    pass
