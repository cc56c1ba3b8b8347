import pytest

from pngstruct.exceptions import TruncatedInputException
from pngstruct.streams import Stream


def test_bytes_stream_read_all():
    data = b'\x01\x02\x03\x04\x05'

    stream = Stream(data)

    assert stream.read(1) == b'\x01'
    assert stream.read(1) == b'\x02'
    assert stream.remaining() == 3
    assert stream.read_all() == b'\x03\x04\x05'
    assert stream.tell() == 5
    assert stream.remaining() == 0


def test_stream_from_other_buffers():
    assert Stream(bytearray(b'abc')).read_all() == b'abc'
    assert Stream(memoryview(b'abc')).read_all() == b'abc'

    with pytest.raises(ValueError):
        Stream(42)


def test_read_exactly():
    stream = Stream(b'kebab')

    assert stream.read_exactly(2) == b'ke'

    with pytest.raises(TruncatedInputException) as exc_info:
        stream.read_exactly(4)

    assert exc_info.value.wanted == 4
    assert exc_info.value.available == 3
    # a failed read doesn't consume anything
    assert stream.tell() == 2
    assert stream.read_exactly(3) == b'bab'


def test_peek():
    stream = Stream(b'\x00\x00\x00\x2aRuSt')

    assert stream.peek(4) == b'\x00\x00\x00\x2a'
    assert stream.tell() == 0

    stream.seek(4)
    with pytest.raises(TruncatedInputException):
        stream.peek(5)

    assert stream.tell() == 4
