'''
# Structured fields

An AFP (MO:DCA) print stream is nothing more than a sequence of structured
fields, each one prefixed by a carriage control byte, the introducer:

  .-----------.---------.-----------.-------.-------------------.
  | 0x5A (1)  | len (2) | type (3)  | flags | payload           |
  '-----------'---------'-----------'-------'-------------------'
              |<------------------ len ------------------------>|

The length is big endian and counts everything after the introducer, so the
payload is len - 6 bytes long and the next field starts len + 1 bytes after
the introducer.

The framer below walks the stream field by field; when something is wrong
it reports the anomaly and tries to find the next introducer instead of
giving up.
'''
import logging
from typing import NamedTuple, Iterator, Union

from bitstring import BitArray

from .core import Chunk
from . import fields
from .enum import ErrorKind
from .exceptions import (
    MagicException,
    UnpackException,
    ChunkUnpackException,
)
from .report import ValidationError


logger = logging.getLogger(__name__)


SF_INTRODUCER = 0x5A
HEADER_LENGTH = 6  # length + type + flags
MIN_LENGTH = 5
MAX_CONSECUTIVE_DESYNC = 10

# bit numbering is the IBM one: bit 0 is the most significant
FLAG_BITS = {
    0: 'extension',
    2: 'segmented',
    4: 'padding',
}


class StructuredFieldIntroducer(Chunk):
    marker = fields.StructField('B', default=SF_INTRODUCER, is_magic=True)
    length = fields.StructField('H')


class StructuredFieldHeader(Chunk):
    type  = fields.StringField(3)
    flags = fields.StructField('B')


class RawField(NamedTuple):
    offset: int  # position of the introducer
    length: int
    type_code: bytes
    flags: int
    payload: bytes

    @property
    def extent(self) -> int:
        '''Number of bytes taken in the stream, introducer included'''
        return extent_from_length(self.length)

    @property
    def flag_bits(self):
        bits = BitArray(uint=self.flags, length=8)
        return tuple(FLAG_BITS.get(idx, f'bit{idx}') for idx, bit in enumerate(bits) if bit)

    def __repr__(self):
        return '<%s(offset=%d, length=%d, type=%s, flags=0x%02x)>' % (
            self.__class__.__name__,
            self.offset,
            self.length,
            self.type_code.hex().upper(),
            self.flags,
        )


def extent_from_length(length):
    # a length of 5 still has room for the flag byte
    return 1 + max(length, HEADER_LENGTH)


class Framer(object):
    '''Turns a Stream into a sequence of RawField or ValidationError.

    The sequence can be consumed only once. When it stops before the end of the
    stream ``aborted`` is set and ``abort_reason`` says why.'''

    def __init__(self, stream, max_consecutive_desync=MAX_CONSECUTIVE_DESYNC):
        self.stream = stream
        self.max_consecutive_desync = max_consecutive_desync
        self.position = 0
        self.aborted = False
        self.abort_reason = None
        self._frames = self._iter_frames()

    def __iter__(self) -> Iterator[Union[RawField, ValidationError]]:
        return self._frames

    def _abort(self, reason, message):
        logger.error('%s, stopping analysis' % message)
        self.aborted = True
        self.abort_reason = reason

    def _truncated(self, what):
        message = f'failed to read {what} at position {self.stream.tell()}'
        self._abort(ErrorKind.TRUNCATED, message)
        return ValidationError(ErrorKind.TRUNCATED, self.position, message)

    def _iter_frames(self):
        stream = self.stream
        size = stream.size
        consecutive_desync = 0

        while self.position < size:
            stream.seek(self.position)

            introducer = StructuredFieldIntroducer()
            try:
                introducer.unpack(stream)
            except MagicException:
                value = introducer.marker.value
                logger.warning('invalid structured field introducer (0x%02X) at position %d' % (value, self.position))
                yield ValidationError(
                    ErrorKind.DESYNC,
                    self.position,
                    f'invalid structured field introducer (0x{value:02X})',
                )

                consecutive_desync += 1
                if consecutive_desync >= self.max_consecutive_desync:
                    self._abort(ErrorKind.DESYNC, f'{consecutive_desync} consecutive invalid introducers')
                    return

                self.position += 1
                continue
            except ChunkUnpackException:
                yield self._truncated('length')
                return

            consecutive_desync = 0
            length = introducer.length.value

            if length < MIN_LENGTH:
                message = f'invalid length ({length}) - too short'
                logger.warning('%s at position %d' % (message, self.position + 1))
                yield ValidationError(ErrorKind.FRAMING, self.position, message)
                self.position += 3
                continue

            if self.position + extent_from_length(length) > size:
                message = f'invalid length ({length}) - exceeds stream size ({size})'
                logger.warning('%s at position %d' % (message, self.position + 1))
                yield ValidationError(ErrorKind.FRAMING, self.position, message)
                self.position += 3
                continue

            header = StructuredFieldHeader()
            try:
                header.unpack(stream)
            except ChunkUnpackException as e:
                yield self._truncated('.'.join(e.chain))
                return

            payload = fields.StringField(max(length - HEADER_LENGTH, 0), name='payload')
            try:
                payload.unpack(stream)
            except UnpackException:
                yield self._truncated('payload')
                return

            field = RawField(
                self.position,
                length,
                header.type.value,
                header.flags.value,
                payload.value,
            )
            logger.debug('framed %r' % (field,))

            yield field

            self.position += field.extent


def iter_structured_fields(stream, **kwargs):
    '''Shortcut when the caller is not interested in why the framing stopped'''
    return iter(Framer(stream, **kwargs))
