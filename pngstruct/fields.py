"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable.
"""
import logging
import struct

from .meta import FieldBase, Endianess
from .properties import Dependency, ChunkPhase
from .exceptions import TruncatedInputException, BadSignatureException, PNGStructException


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, *args, name=None, father=None, default=None,
                 endianess=Endianess.LITTLE_ENDIAN, is_magic=False):
        super().__init__()
        self._phase = ChunkPhase.INIT
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = father
        self.default = default
        self.endianess = endianess
        self.is_magic = is_magic

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def __eq__(self, other):
        if not isinstance(other, Field):
            return NotImplemented

        return type(self) is type(other) and self.raw == other.raw

    def _get_value(self):
        return self._value

    def _set_value(self, value) -> None:
        self._value = value

    def _update_value(self, value) -> None:
        self._set_value(value)

        if self.father is not None:
            self.father.on_field_update(self)

    value = property(
        fget=lambda self: self._get_value(),
        fset=lambda self, value: self._update_value(value))

    def on_field_update(self, field):
        '''Called each time the value of a sub-field is set.'''
        pass

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _get_raw(self) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}._get_raw() not implemented")

    raw = property(
        fget=lambda self: self._get_raw(),
    )

    def pack(self) -> bytes:
        return self.raw

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def __str__(self):
        width = self.size * 2  # we want to be as large as possible
        formatter = '0x%%0%dx' % width
        return formatter % self.value

    def get_format(self):
        prefix = {
            Endianess.LITTLE_ENDIAN: '<',
            Endianess.BIG_ENDIAN: '>',
            Endianess.NETWORK: '!',
            Endianess.NATIVE: '=',
        }[self.endianess]

        return '%s%s' % (prefix, self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _get_raw(self) -> bytes:
        return struct.pack(self.get_format(), self.value)

    def unpack(self, stream):
        raw = stream.read_exactly(self.size)
        self.value = struct.unpack(self.get_format(), raw)[0]

        self.logger.debug('unpacked %s=%s' % (self.name, self))


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The length can be fixed or a Dependency resolved at unpacking time;
    in the latter case any value is accepted and who builds the chunk
    is responsible for keeping the two fields in sync.

    A magic field only accepts its default as value."""

    def __init__(self, n=None, **kw):
        if n is None and kw.get('default') is None:
            raise ValueError("StringField must have 'n' or 'default' indicated!")

        self._length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return self.length

    @property
    def length(self):
        if isinstance(self._length, Dependency):
            return self._length.resolve(self)

        return self._length

    def value_from_default(self):
        if self.default is not None:
            return self.default

        return b'' if isinstance(self._length, Dependency) else b'\x00' * self._length

    def _set_value(self, value) -> None:
        value = bytes(value)
        if not isinstance(self._length, Dependency) and len(value) != self._length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self._length} bytes)')

        if self.is_magic and value != self.default:
            raise ValueError(f'the magic must be {self.default!r}')

        self._value = value

    def _get_size(self):
        return len(self.value)

    def _get_raw(self) -> bytes:
        return self.value

    def unpack(self, stream):
        length = self.length
        try:
            value = stream.read_exactly(length)
        except TruncatedInputException:
            if not self.is_magic:
                raise
            value = stream.read_all()

        if self.is_magic and value != self.default:
            self.logger.debug('the magic doesn\'t correspond: %r' % value)
            raise BadSignatureException(value)

        self.value = value

        self.logger.debug('unpacked %s with %d bytes' % (self.name, length))


class ArrayField(Field):
    '''Un/Pack an array of Chunks.

    The elements are unpacked one after the other until the stream is
    exhausted, any failure aborts the whole unpacking.

    This class must behave like a list in python, obviously cannot implement all the methods
    since, for example, slicing what should mean?
    '''

    def __init__(self, field_cls, **kw):
        self.field_cls = field_cls
        kw.setdefault('default', [])

        super().__init__(**kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def __str__(self):
        return '\n'.join(f'[{idx:02d}] {element}' for idx, element in enumerate(self.value))

    def __getitem__(self, item):
        return self.value[item]

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    def value_from_default(self):
        return list(self.default)

    def clear(self):
        self.value.clear()

    def _get_raw(self) -> bytes:
        return b''.join(element.raw for element in self.value)

    def _get_size(self):
        return sum(element.size for element in self.value)

    def instance_element(self):
        return self.field_cls.create(father=self)  # pass the father so that we don't lose the hierarchy

    def unpack_element(self, element, stream):
        element.unpack(stream)

    def unpack(self, stream):
        elements = []
        while stream.remaining() > 0:
            element = self.instance_element()
            self.logger.debug('unpacking element #%d at offset %d' % (len(elements), stream.tell()))

            try:
                self.unpack_element(element, stream)
            except PNGStructException as e:
                e.chain.insert(0, len(elements))
                raise

            elements.append(element)

        self.value = elements

    def append(self, element):
        element.father = self
        self.value.append(element)

    def pop(self, index):
        element = self.value.pop(index)
        element.father = None

        return element
