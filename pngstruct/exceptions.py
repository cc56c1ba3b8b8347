class PNGStructException(Exception):
    '''Base class to extend in order to throw exception in pngstruct.

    It takes an optional argument that represents the chain of the layers
    (field names and array indexes) that caused the exception, outermost first.
    '''

    def __init__(self, *args, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(*args)

    def __str__(self):
        msg = super().__str__()
        if not self.chain:
            return msg

        return '%s: %s' % ('.'.join(str(_) for _ in self.chain), msg)


class UnpackException(PNGStructException):
    pass


class TruncatedInputException(UnpackException):

    def __init__(self, wanted, available, chain=None):
        self.wanted = wanted
        self.available = available
        super().__init__(f'wanted {wanted} bytes but only {available} remain', chain=chain)


class TrailingDataException(UnpackException):
    '''The data goes on after the end of the decoded chunk.'''

    def __init__(self, extra, chain=None):
        self.extra = extra
        super().__init__(f'{extra} bytes left after the end of the data', chain=chain)


class InvalidTypeCodeException(UnpackException, ValueError):
    '''A type code must be exactly four ASCII letters.'''

    def __init__(self, value, chain=None):
        self.value = value
        super().__init__(f'invalid type code {value!r}: must be 4 ASCII letters', chain=chain)


class ChecksumMismatchException(UnpackException):

    def __init__(self, expected, got, chain=None):
        self.expected = expected
        self.got = got
        super().__init__(f'checksum mismatch: expected 0x{expected:08x}, got 0x{got:08x}', chain=chain)


class BadSignatureException(UnpackException):

    def __init__(self, value, chain=None):
        self.value = value
        super().__init__(f'bad signature {value!r}', chain=chain)


class InvalidUtf8Exception(PNGStructException):
    pass


class NotFoundException(PNGStructException, LookupError):

    def __init__(self, type_code, chain=None):
        self.type_code = type_code
        super().__init__(f'no chunk with type {type_code}', chain=chain)
