'''
Command line front-end:

    secretpng encode <png file path> <chunk type> <message> [output path]
    secretpng decode <png file path> <chunk type>
    secretpng remove <png file path> <chunk type>
    secretpng print  <png file path>

It returns 0 on success and 1 for any failure, the reason is printed on stderr.
'''
import logging
import os
import sys

from . import secret
from .exceptions import SecretPNGException


logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <operation> <png file path> [chunk type] [message] [output path]

secretpng can hide, find or remove a message inside a png.

 encode <png> <type> <message> [out]   add a chunk containing the message
 decode <png> <type>                   show the first chunk with the given type
 remove <png> <type>                   remove the first chunk with the given type
 print  <png>                          list all the chunks''', file=sys.stderr)
    return 1


def do_encode(path, chunk_type, message, out=None):
    chunk = secret.encode(path, chunk_type, message, out=out)
    print(f'Chunk encoded successfully!\nChunk: {chunk}')


def do_decode(path, chunk_type):
    chunk = secret.decode(path, chunk_type)
    print(f'Chunk found!\nChunk: {chunk}')
    print(f'Message: {chunk.data_as_string()}')


def do_remove(path, chunk_type):
    chunk = secret.remove(path, chunk_type)
    print(f'Chunk removed successfully!\nChunk: {chunk}')


def do_print(path):
    png = secret.print_png(path)
    print(f'Image {path}\n{png}')


# operation -> (handler, min, max) where min and max count the arguments after the operation itself
OPERATIONS = {
    'encode': (do_encode, 3, 4),
    'decode': (do_decode, 2, 2),
    'remove': (do_remove, 2, 2),
    'print':  (do_print, 1, 1),
}


def main(argv=None):
    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    argv = sys.argv if argv is None else argv
    progname = os.path.basename(argv[0]) if argv else 'secretpng'

    if len(argv) < 3 or argv[1] not in OPERATIONS:
        return usage(progname)

    operation, args = argv[1], argv[2:]
    handler, n_min, n_max = OPERATIONS[operation]

    if not n_min <= len(args) <= n_max:
        return usage(progname)

    path = args[0]
    if not os.path.isfile(path):
        print(f'{progname} error: input image does not exist (invalid file path \'{path}\')', file=sys.stderr)
        return 1

    logger.debug(f'executing {operation} with arguments {args}')

    try:
        handler(*args)
    except SecretPNGException as e:
        print(f'{operation.capitalize()} error: {e}', file=sys.stderr)
        return 1

    return 0
