'''
# Portable Network Graphics

A PNG file consists of a signature followed by a series of chunks; each
chunk is made of four parts: length, chunk type, chunk data and CRC.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html> and
is available a full test-suite with a lot of PNG images covering all
the possible cases at <http://www.schaik.com/pngsuite/>.

Here the chunks are treated as opaque containers: the data is never
interpreted nor decompressed.
'''
import logging
from typing import List, Optional, Tuple

from pngstruct.core import Chunk
from pngstruct import fields
from pngstruct.common import crc
from pngstruct.exceptions import InvalidUtf8Exception, NotFoundException
from pngstruct.meta import Endianess
from pngstruct.properties import ChunkPhase, Dependency
from pngstruct.streams import Stream

from .type_code import TypeCode, TypeCodeField


logger = logging.getLogger(__name__)

PNG_SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])
# length, type and crc
CHUNK_OVERHEAD = 12
# the format says the length must not exceed this but we don't enforce it
CHUNK_MAX_LENGTH = 2 ** 31 - 1


class PNGHeader(Chunk):
    magic = fields.StringField(8, default=PNG_SIGNATURE, is_magic=True)


class PNGChunk(Chunk):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

    The length counts only the data field, not itself, the chunk type code, or the CRC.
    Length and crc are derived: each time type or data are set they are computed again.

    A chunk is defined as critical or ancillary depending on the case of the
    starting letter of the type field.

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.
    '''
    length = fields.StructField('I', endianess=Endianess.BIG_ENDIAN)  # big endian
    type   = TypeCodeField()
    data   = fields.StringField(Dependency('.length'))
    crc    = crc.CRCField(['type', 'data'], endianess=Endianess.NETWORK)  # network byte order

    @classmethod
    def new(cls, type_code, data: bytes) -> "PNGChunk":
        '''Build a chunk from its type and its data, length and crc are
        derived from them.'''
        chunk = cls()
        chunk.type.value = type_code
        chunk.data.value = data

        return chunk

    def relayout(self):
        '''Derive length and crc from type and data.'''
        self._phase = ChunkPhase.RELAYOUTING

        try:
            self.length.value = len(self.data.value)
            self.crc.update()
        finally:
            self._phase = ChunkPhase.DONE

    def on_field_update(self, field):
        if field.name == 'length' and field.value > CHUNK_MAX_LENGTH:
            logger.warning('chunk has length %d over the maximum allowed' % field.value)

        # while unpacking the crc is checked, not computed
        if self._phase != ChunkPhase.DONE or self.type.value is None:
            return

        self.relayout()

    def data_as_text(self) -> str:
        try:
            return self.data.value.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidUtf8Exception(str(e), chain=['data']) from e

    def __str__(self):
        data = self.data.value
        preview = data[:16] + (b'...' if len(data) > 16 else b'')
        return '%s length=%d data=%r crc=%s' % (self.type.value, self.length.value, preview, self.crc)


class PNGChunkArray(fields.ArrayField):
    '''The chunks are one after the other till the end of the data, there
    is no count: before unpacking an element we make sure that the whole span
    declared by its length is available.'''

    def unpack_element(self, element, stream):
        length = type(element).length.create(father=None)
        length.unpack(Stream(stream.peek(length.size)))
        span = stream.read_exactly(CHUNK_OVERHEAD + length.value)

        element.unpack(Stream(span))


class PNGFile(Chunk):
    header = PNGHeader()
    chunks = PNGChunkArray(PNGChunk())

    @classmethod
    def from_chunks(cls, chunks) -> "PNGFile":
        png = cls()
        for chunk in chunks:
            png.append(chunk)

        return png

    @property
    def signature(self) -> bytes:
        return self.header.magic.value

    def __str__(self):
        return str(self.chunks)

    def __len__(self):
        return len(self.chunks)

    def __iter__(self):
        return iter(self.chunks)

    def __getitem__(self, item):
        return self.chunks[item]

    def find_all(self, type_code) -> List[Tuple[int, PNGChunk]]:
        '''Return all the couples (index, chunk) with the given type, in order.'''
        type_code = str(type_code)
        return [(idx, chunk) for idx, chunk in enumerate(self.chunks) if str(chunk.type.value) == type_code]

    def find(self, type_code) -> Optional[Tuple[int, PNGChunk]]:
        '''Return the first chunk with the given type together with its index.'''
        type_code = str(type_code)
        for idx, chunk in enumerate(self.chunks):
            if str(chunk.type.value) == type_code:
                return idx, chunk

        return None

    def append(self, chunk: PNGChunk):
        self.chunks.append(chunk)

    def remove(self, type_code) -> PNGChunk:
        '''Remove the first chunk with the given type and return it.'''
        match = self.find(type_code)
        if match is None:
            raise NotFoundException(type_code)

        idx, _ = match
        logger.debug('removing chunk #%d with type %s' % (idx, type_code))

        return self.chunks.pop(idx)
