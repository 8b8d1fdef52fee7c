from enum import Flag


class ChunkProperty(Flag):
    '''It indicates which property bits are set in a chunk type: each one
    corresponds to the lowercase letter in the same position of the type.'''
    NONE         = 0
    ANCILLARY    = 1 << 0
    PRIVATE      = 1 << 1
    RESERVED     = 1 << 2
    SAFE_TO_COPY = 1 << 3
