'''
The chunk type code and its field.
'''
from bitstring import BitArray

from pngstruct import fields
from pngstruct.enum import TypeCodeProperty
from pngstruct.exceptions import InvalidTypeCodeException


class TypeCode(object):
    '''Four-byte chunk type code, restricted to the uppercase and lowercase
    ASCII letters.

    Four bits of the type code, namely bit 5 (value 32) of each byte, are
    used to convey chunk properties: an uppercase letter has the bit clear,
    a lowercase one has it set.

     1. ancillary bit (first byte): uppercase means critical
     2. private bit (second byte): uppercase means public
     3. reserved bit (third byte): must be uppercase in a conforming type code
     4. safe-to-copy bit (fourth byte): lowercase means safe to copy
    '''
    SIZE = 4

    def __init__(self, value):
        raw = self._to_bytes(value)

        if len(raw) != self.SIZE or not raw.isalpha():
            raise InvalidTypeCodeException(value)

        self._raw = raw

    @staticmethod
    def _to_bytes(value) -> bytes:
        try:
            if isinstance(value, str):
                return value.encode('ascii')

            return bytes(value)
        except (UnicodeEncodeError, ValueError, TypeError) as e:
            raise InvalidTypeCodeException(value) from e

    @classmethod
    def from_str(cls, value: str) -> "TypeCode":
        if not isinstance(value, str):
            raise InvalidTypeCodeException(value)

        return cls(value)

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return f'<{self.__class__.__name__}({self})>'

    def __eq__(self, other):
        if not isinstance(other, TypeCode):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    @property
    def raw(self) -> bytes:
        return self._raw

    def _property_bit(self, index) -> bool:
        # bit 5 counting from the LSB is the third one counting from the MSB
        return BitArray(self._raw)[8 * index + 2]

    @property
    def is_critical(self) -> bool:
        return not self._property_bit(0)

    @property
    def is_public(self) -> bool:
        return not self._property_bit(1)

    @property
    def is_reserved_bit_valid(self) -> bool:
        return not self._property_bit(2)

    @property
    def is_safe_to_copy(self) -> bool:
        return self._property_bit(3)

    def is_valid(self) -> bool:
        return self._raw.isalpha() and self.is_reserved_bit_valid

    @property
    def properties(self) -> TypeCodeProperty:
        flags = TypeCodeProperty.NONE
        for flag, is_set in (
            (TypeCodeProperty.CRITICAL, self.is_critical),
            (TypeCodeProperty.PUBLIC, self.is_public),
            (TypeCodeProperty.RESERVED, self.is_reserved_bit_valid),
            (TypeCodeProperty.SAFE_TO_COPY, self.is_safe_to_copy),
        ):
            if is_set:
                flags |= flag

        return flags


class TypeCodeField(fields.StringField):
    '''A four bytes field whose value is a TypeCode instance.'''

    def __init__(self, **kw):
        super().__init__(TypeCode.SIZE, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.value)

    def value_from_default(self):
        return self.default

    def _set_value(self, value) -> None:
        if value is not None and not isinstance(value, TypeCode):
            value = TypeCode(value)

        self._value = value

    def _get_size(self):
        return TypeCode.SIZE

    def _get_raw(self) -> bytes:
        if self.value is None:
            raise ValueError(f'the type code of field \'{self.name}\' is not set')

        return bytes(self.value)

    def unpack(self, stream):
        self.value = TypeCode(stream.read_exactly(TypeCode.SIZE))

        if not self.value.is_valid():
            self.logger.warning('type code %s has the reserved bit set' % self.value)
