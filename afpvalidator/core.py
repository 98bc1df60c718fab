"""
Core module for the declarative description of a binary layout.

A Chunk lists its fields in the class body, in the order they appear in the
stream; unpacking a chunk unpacks each field in turn from the current
position of the stream.
"""
import logging
from typing import Tuple, List, Dict

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import (
    ChunkUnpackException,
    UnpackException,
)


logger = logging.getLogger(__name__)


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: a Chunk is
    a sequence of named fields read one after the other.

    If a stream (or anything Stream() accepts) is passed to the constructor
    the chunk is unpacked right away from its current position.
    """

    def __init__(self, stream=None, **kwargs):
        super().__init__(**kwargs)

        if stream is not None:
            stream = stream if isinstance(stream, Stream) else Stream(stream)
            logger.debug('unpacking \'%s\' from %r' % (self.__class__.__name__, stream))
            self.unpack(stream)

    def init(self):
        pass

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def _get_size(self):
        '''the size is derived from the fields'''
        size = 0
        for _, field in self.get_fields():
            size += field.size

        return size

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        for name, field in self.get_fields():
            result[name] = (field.offset, field.size)

        return result

    def unpack(self, stream):
        '''Read every field in order from the current position of the stream.

        A short read is reported as ChunkUnpackException with the chain of
        names leading to the field that could not be read; a MagicException
        is left to the caller untouched since it says something about the
        data, not about its length.
        '''
        self.offset = stream.tell()

        for field_name, field in self.get_fields():
            logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))

            try:
                field.unpack(stream)
            except (UnpackException, ChunkUnpackException) as e:
                chain = e.chain if isinstance(e, ChunkUnpackException) else []
                chain.append(field_name)
                raise ChunkUnpackException(chain=chain, offset=e.offset)
