"""
# PNG chunks for humans.

A PNG file is a fixed signature followed by a sequence of chunks, each of them
length-prefixed and protected by a CRC. Here each component of the format is
described declaratively as a Chunk made of fields.

Two basic main operations are defined for the file format and its sub components:

 1. unpack(): reading the binary data and build a high-level representation
    of that. Each field uses the actual offset of the stream and knows how
    many bytes needs to read to finalize the representation; a short read,
    an invalid type code, a wrong CRC or a wrong signature stop everything
    with a specific exception.

 2. pack(): encode the high-level representation into binary data.

Nothing here touches the filesystem: the input is a buffer of bytes and
the output is a buffer of bytes.
"""
