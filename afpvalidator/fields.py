"""
A Field is "fundamental" datatype from the format point of view, something directly
unpackable from the stream without need of knowing the surrounding chunk.

AFP is an IBM mainframe format so everything here is big endian by default.
"""
import logging
import struct

from .meta import FieldBase, Endianess
from .exceptions import UnpackException, MagicException


logger = logging.getLogger(__name__)


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, father=None, default=None, offset=None,
                 endianess=Endianess.BIG_ENDIAN, is_magic=False):
        super().__init__()
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.endianess = endianess
        self.is_magic = is_magic

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _read(self, stream, n):
        '''Read exactly n bytes or complain about the stream being too short'''
        self.offset = stream.tell()
        raw = stream.read(n)
        if len(raw) != n:
            logger.debug('short read for field \'%s\': wanted %d bytes, got %d' % (self.name, n, len(raw)))
            raise UnpackException(chain=[], offset=self.offset)

        return raw

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    integers from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def unpack(self, stream):
        raw = self._read(stream, self.size)
        value = struct.unpack(self.get_format(), raw)[0]

        # the value is kept even when wrong so that the caller can report it
        self.value = value

        if self.is_magic and value != self.default:
            logger.debug('the magic doesn\'t correspond: 0x%x instead of 0x%x' % (value, self.default))
            raise MagicException(chain=[], offset=self.offset)


class StringField(Field):
    """Represent a contiguous chunk of bytes."""

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __len__(self):
        return self.length

    def value_from_default(self):
        return b'\x00' * self.length if not self.default else self.default

    def _get_size(self):
        return self.length

    def unpack(self, stream):
        self.value = self._read(stream, self.length)
