import io
import logging


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: the validation only needs read(), seek(),
    tell() and the total size of the data.

    A path is opened (and closed) by the stream itself, a file object
    passed in by the caller is left open.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self._owned = False
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

        self.size = self._get_size()

    def __getattr__(self, name):
        if name == 'obj':
            raise AttributeError(name)
        return getattr(self.obj, name)

    def __del__(self):
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self):
        return '<%s(%s, size=%s)>' % (self.__class__.__name__, self._type.__name__, getattr(self, 'size', None))

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')
        self._owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_PosixPath(self):
        self.obj = str(self.obj)
        self.init_str()

    init_WindowsPath = init_PosixPath

    def init_file(self):
        '''Anything else must already behave like a binary file'''
        if not all(hasattr(self.obj, _) for _ in ('read', 'seek', 'tell')):
            raise ValueError('\'%s\' is the wrong kind of object to use as stream' % self._type.__name__)

    def _get_size(self):
        current = self.obj.tell()
        self.obj.seek(0, io.SEEK_END)
        size = self.obj.tell()
        self.obj.seek(current)

        return size

    def close(self):
        obj = self.__dict__.get('obj')
        if self.__dict__.get('_owned') and obj is not None and not obj.closed:
            logger.debug('closing %r' % obj)
            obj.close()

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

    def read(self, n):
        return self.obj.read(n)
