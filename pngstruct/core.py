"""
Core module for the abstraction of a file format

"""
from typing import Tuple, List

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import PNGStructException, TrailingDataException
from .properties import ChunkPhase


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: its fields
    are declared as class attributes and are packed/unpacked in the order
    of declaration.

    A Chunk can contain sub-chunks.

    Passing some raw data to the constructor unpacks it, so that

        PNGFile(raw)

    either returns a fully decoded instance or raises: all the data must
    be consumed, bytes left after the last field are an error too.
    """

    def __init__(self, data=None, **kwargs):
        super().__init__(**kwargs)

        # now we have setup all the fields necessary and we can unpack if
        # some data is passed with the constructor
        if data is not None:
            stream = data if isinstance(data, Stream) else Stream(data)
            self.logger.debug('unpacking \'%s\' from %r' % (self.__class__.__name__, stream))
            self.unpack(stream)

            if not isinstance(data, Stream) and stream.remaining() != 0:
                raise TrailingDataException(stream.remaining())

        self._phase = ChunkPhase.DONE

    @classmethod
    def from_bytes(cls, data):
        return cls(data)

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    def init(self):
        for _, field in self.get_fields():
            field.init()

    def _get_value(self):
        return self

    def _set_value(self, value):
        raise AttributeError(f'cannot set the value of the chunk {self.__class__.__name__}')

    def _get_size(self):
        '''the size MUST be derived from the subchunks'''
        return sum(field.size for _, field in self.get_fields())

    def _get_raw(self) -> bytes:
        value = b''
        for field_name, field_instance in self.get_fields():
            field_raw = field_instance.raw
            self.logger.debug("field '{}' raw={!r}".format(field_name, field_raw))
            value += field_raw

        return value

    def unpack(self, stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        Each field reads from the actual offset of the stream and knows how many
        bytes it needs; the first failure is annotated with the name of the field
        and propagated as it is, nothing is recovered.
        '''
        self._phase = ChunkPhase.UNPACKING

        for field_name, field in self.get_fields():
            self.logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))

            try:
                field.unpack(stream)
            except PNGStructException as e:
                e.chain.insert(0, field_name)
                raise

        self._phase = ChunkPhase.DONE
