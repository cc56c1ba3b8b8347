from enum import Flag


class TypeCodeProperty(Flag):
    '''The property bits of a chunk type code: each one is bit 5 of
    one of the four bytes, i.e. the case of the letter.'''
    NONE         = 0
    CRITICAL     = 1 << 0
    PUBLIC       = 1 << 1
    RESERVED     = 1 << 2  # set when the reserved bit has the only valid value
    SAFE_TO_COPY = 1 << 3
