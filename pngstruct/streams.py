import io
import logging

from .exceptions import TruncatedInputException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around an in-memory buffer to
    uniform its properties: mainly we need to know how many bytes are
    left and to fail loudly when a read comes up short.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj
        self.history = []

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to use as stream' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return '<%s(%s, offset=%d, size=%d)>' % (
            self.__class__.__name__, self._type.__name__, self.tell(), self.size)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.size = len(self.obj)
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = bytes(self.obj)
        self.init_bytes()

    def init_memoryview(self):
        self.obj = self.obj.tobytes()
        self.init_bytes()

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

    def remaining(self) -> int:
        return self.size - self.tell()

    def read_all(self) -> bytes:
        '''Returns all the data from the actual offset to the end.'''
        return self.obj.read()

    def read_exactly(self, n) -> bytes:
        '''Read exactly n bytes or raise TruncatedInputException without
        consuming anything.'''
        available = self.remaining()
        if n > available:
            logger.debug('short read at offset %d: wanted %d, available %d' % (self.tell(), n, available))
            raise TruncatedInputException(n, available)

        return self.obj.read(n)

    def peek(self, n) -> bytes:
        '''Like read_exactly() but the offset is left untouched.'''
        self.save()
        try:
            return self.read_exactly(n)
        finally:
            self.restore()

    # TODO: create contextmanager
    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.obj.seek(old_seek)
