import io

import pytest

from afpvalidator.core import Chunk
from afpvalidator.exceptions import ChunkUnpackException, MagicException
from afpvalidator.fields import StructField, StringField
from afpvalidator.streams import Stream


class Dummy(Chunk):
    a = StructField('B', default=0x5A, is_magic=True)
    b = StructField('H')
    c = StringField(3)


def test_chunk():
    """Check that building a Chunk from fields behaves correctly."""
    dummy = Dummy()

    assert dummy.get_ordered_fields_name() == ['a', 'b', 'c']
    assert dummy.a.father == dummy
    assert dummy.size == 6
    assert dummy.c.value == b'\x00' * 3


def test_chunk_fields_are_not_shared():
    first = Dummy(b'\x5a\x00\x01AAA')
    second = Dummy(b'\x5a\x00\x02BBB')

    assert first.a is not second.a
    assert first.b.value == 1
    assert second.b.value == 2
    assert Dummy.b.value == 0


def test_chunk_unpack():
    stream = Stream(b'\xff\x5a\x00\x09\xd3\xa8\xa8')
    stream.seek(1)

    dummy = Dummy(stream)

    assert dummy.offset == 1
    assert dummy.b.value == 9
    assert dummy.c.value == b'\xd3\xa8\xa8'
    assert dummy.layout == {
        'a': (1, 1),
        'b': (2, 2),
        'c': (4, 3),
    }


def test_chunk_short_read():
    """The chain tells which field could not be read"""
    with pytest.raises(ChunkUnpackException) as e:
        Dummy(b'\x5a\x00\x09\xd3')

    assert e.value.chain == ['c']
    assert e.value.offset == 3


def test_nested_chunk_short_read():
    class Outer(Chunk):
        head = StructField('B')
        inner = Dummy()

    with pytest.raises(ChunkUnpackException) as e:
        Outer(b'\x00\x5a\x00')

    assert e.value.chain == ['b', 'inner']


def test_chunk_magic():
    with pytest.raises(MagicException):
        Dummy(b'\x00\x00\x09\xd3\xa8\xa8')


def test_stream_from_path(tmp_path):
    path = tmp_path / 'data.afp'
    path.write_bytes(b'\x01\x02\x03\x04\x05')

    with Stream(str(path)) as stream:
        assert stream.size == 5
        assert stream.read(2) == b'\x01\x02'
        obj = stream.obj

    assert obj.closed

    with Stream(path) as stream:
        assert stream.size == 5


def test_stream_from_file_object():
    """A file object is not closed by the stream"""
    obj = io.BytesIO(b'\x01\x02\x03')
    obj.seek(1)

    with Stream(obj) as stream:
        assert stream.size == 3
        assert stream.tell() == 1

    assert not obj.closed


def test_stream_wrong_type():
    with pytest.raises(ValueError):
        Stream(42)

    with pytest.raises(ValueError):
        Stream(b'').seek('0')
