"""
# secretpng

Hide messages inside PNG files.

A PNG file is a signature followed by a list of chunks, each one with a type,
some data and a CRC; the decoders skip the ancillary chunks they don't know
about, so it's possible to store arbitrary data in a private chunk without
changing how the image looks.

The operations defined on the chunk list are

 1. unpack(): read the binary data and build the list of chunks, verifying
    the signature and the CRC of each of them.

 2. pack(): encode the chunks back into binary data.

 3. append_chunk()/remove_chunk()/chunk_by_type(): edit and search the list.

The core (secretpng.images.png) works only with bytes in memory, the module
secretpng.secret takes care of files and secretpng.cli of the command line.
"""
