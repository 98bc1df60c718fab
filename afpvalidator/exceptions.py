class AFPException(Exception):
    '''Base class to extend in order to throw exception in afpvalidator.

    It takes the chain of the layer that caused the exception and,
    when known, the offset into the stream where it happened.
    '''

    def __init__(self, chain, offset=None):
        self.chain = chain
        self.offset = offset
        super().__init__()

    def __str__(self):
        where = '' if self.offset is None else f' at offset 0x{self.offset:x}'
        return f'{self.__class__.__name__}({".".join(self.chain)}){where}'


class UnpackException(AFPException):
    '''The stream ended before the field could be read.'''
    pass


class MagicException(AFPException):
    pass


class ChunkUnpackException(AFPException):
    pass


class CapacityExceededException(AFPException):
    '''Nesting went deeper than the component stack can hold.'''
    pass
