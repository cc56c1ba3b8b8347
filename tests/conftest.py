import io
import logging
import os

import pytest

from pngstruct.images.png import PNGChunk


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


def get_chunk_from_strings(chunk_type, data):
    return PNGChunk.new(chunk_type, data.encode())


@pytest.fixture
def testing_chunks():
    return [
        get_chunk_from_strings('RuSt', "I don't know what I'm doing"),
        get_chunk_from_strings('TeAr', "Yes I'm crying"),
        get_chunk_from_strings('RaGe', "Nooooooo"),
    ]


@pytest.fixture
def red_png():
    """A real 5x5 red image as produced by pillow."""
    from PIL import Image

    image = Image.new('RGB', (5, 5), 'red')
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')

    return buffer.getvalue()
