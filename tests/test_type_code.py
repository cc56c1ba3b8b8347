import pytest

from pngstruct.enum import TypeCodeProperty
from pngstruct.exceptions import InvalidTypeCodeException
from pngstruct.images.png import TypeCode, TypeCodeField
from pngstruct.streams import Stream


def test_type_code_from_bytes():
    expected = bytes([82, 117, 83, 116])
    actual = TypeCode([82, 117, 83, 116])

    assert bytes(actual) == expected
    assert actual.raw == expected
    assert TypeCode(expected) == actual


def test_type_code_from_str():
    type_code = TypeCode.from_str('RuSt')

    assert bytes(type_code) == b'RuSt'
    assert str(type_code) == 'RuSt'
    assert repr(type_code) == '<TypeCode(RuSt)>'


def test_type_code_is_critical():
    assert TypeCode('RuSt').is_critical
    assert not TypeCode('ruSt').is_critical


def test_type_code_is_public():
    assert TypeCode('RUSt').is_public
    assert not TypeCode('RuSt').is_public


def test_type_code_reserved_bit():
    assert TypeCode('RuSt').is_reserved_bit_valid
    assert not TypeCode('Rust').is_reserved_bit_valid


def test_type_code_is_safe_to_copy():
    assert TypeCode('RuSt').is_safe_to_copy
    assert not TypeCode('RuST').is_safe_to_copy


def test_type_code_validity():
    assert TypeCode('RuSt').is_valid()

    # constructible but not valid since the reserved bit is set
    type_code = TypeCode('Rust')

    assert not type_code.is_valid()
    assert str(type_code) == 'Rust'


def test_type_code_properties():
    assert TypeCode('RuSt').properties == (
        TypeCodeProperty.CRITICAL | TypeCodeProperty.RESERVED | TypeCodeProperty.SAFE_TO_COPY)
    assert TypeCode('IHDR').properties == (
        TypeCodeProperty.CRITICAL | TypeCodeProperty.PUBLIC | TypeCodeProperty.RESERVED)
    assert TypeCode('tEXt').properties == (
        TypeCodeProperty.PUBLIC | TypeCodeProperty.RESERVED | TypeCodeProperty.SAFE_TO_COPY)
    assert TypeCode('ruxt').properties == TypeCodeProperty.SAFE_TO_COPY


@pytest.mark.parametrize('value', [
    'Ru1t',
    'Ru$t',
    'RuS',
    'RuStt',
    '',
    'RüSt',
    b'\x00uSt',
    b'Ru St',
    [82, 117, 83, 300],
    None,
])
def test_type_code_invalid(value):
    with pytest.raises(InvalidTypeCodeException):
        TypeCode(value)


def test_type_code_invalid_is_value_error():
    with pytest.raises(ValueError):
        TypeCode('Ru1t')

    with pytest.raises(InvalidTypeCodeException):
        TypeCode.from_str(b'RuSt')


def test_type_code_hashable():
    assert len({TypeCode('RuSt'), TypeCode(b'RuSt'), TypeCode('TeAr')}) == 2
    assert TypeCode('RuSt') != TypeCode('ruSt')
    assert TypeCode('RuSt') != 'RuSt'


def test_type_code_field():
    field = TypeCodeField()

    assert field.value is None
    assert field.size == 4

    field.unpack(Stream(b'IEND'))

    assert field.value == TypeCode('IEND')
    assert field.raw == b'IEND'

    field.value = 'RuSt'

    assert field.value == TypeCode('RuSt')

    with pytest.raises(InvalidTypeCodeException):
        field.unpack(Stream(b'IE1D'))
