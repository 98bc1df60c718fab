import pytest

from afpvalidator.classifier import (
    BRACKETS,
    DATA_OBJECTS,
    RESOURCE_DESCRIPTORS,
    UNCLASSIFIED,
    Classification,
    classify,
    decode_name,
    is_carriage_control,
)
from afpvalidator.common import codepage
from afpvalidator.enum import Component, ObjectKind, Bracket


@pytest.mark.parametrize('code,component', BRACKETS.items())
def test_brackets(code, component):
    begin = classify(bytes([0xD3, 0xA8, code]))
    end = classify(bytes([0xD3, 0xA9, code]))

    assert begin == Classification(component, ObjectKind.NONE, Bracket.BEGIN)
    assert end == Classification(component, ObjectKind.NONE, Bracket.END)
    assert begin.is_begin and not begin.is_end
    assert end.is_end and not end.is_begin


def test_begin_document():
    classification = classify(b'\xd3\xa8\xa8')

    assert classification.component == Component.DOCUMENT
    assert classification.bracket == Bracket.BEGIN
    assert classification.name is None


@pytest.mark.parametrize('code,kind', DATA_OBJECTS.items())
def test_data_objects(code, kind):
    classification = classify(bytes([0xD3, 0xEE, code]), b'\x00' * 20)

    assert classification.object_kind == kind
    assert classification.component == Component.NONE
    assert classification.bracket is None


@pytest.mark.parametrize('type_code,kind', RESOURCE_DESCRIPTORS.items())
def test_resource_descriptors(type_code, kind):
    classification = classify(type_code)

    assert classification.object_kind == kind
    assert classification.component == Component.RESOURCE
    assert classification.bracket is None


def test_brackets_and_data_objects_are_disjoint():
    """the same third byte means different things under different prefixes"""
    assert classify(b'\xd3\xa8\xfb') == UNCLASSIFIED  # BIM is not a bracket we track
    assert classify(b'\xd3\xee\xa8') == UNCLASSIFIED


def test_map_coded_font_name():
    payload = bytes([0x00, 0x00, 0xC1, 0xC2, 0xC3, 0x00, 0x00, 0x00, 0x00, 0x00])

    classification = classify(b'\xd3\xab\x8a', payload)

    assert classification.component == Component.RESOURCE
    assert classification.object_kind == ObjectKind.NONE
    assert classification.name == 'ABC.....'


def test_map_coded_font_short_payload():
    classification = classify(b'\xd3\xab\x8a', b'\x00\x00\xc1\xc2')

    assert classification.component == Component.RESOURCE
    assert classification.name is None


def test_map_coded_font_one_byte_short():
    payload = b'\x00\x00' + bytes([0xC1] * 7)

    assert len(payload) == 9
    assert classify(b'\xd3\xab\x8a', payload).name is None
    assert decode_name(payload) is None


def test_name_only_for_naming_field():
    payload = b'\x00\x00' + bytes([0xC1] * 8)

    assert classify(b'\xd3\xa6\x89', payload).name is None
    assert decode_name(payload) == 'AAAAAAAA'


def test_unknown_codes():
    assert classify(b'\xd3\xa0\x90') == UNCLASSIFIED
    assert classify(b'\x00\x00\x00') == UNCLASSIFIED
    assert classify(b'\xd3') == UNCLASSIFIED
    assert classify(b'') == UNCLASSIFIED


def test_carriage_control():
    assert is_carriage_control(b'\x5a\xd3\xa8')
    assert classify(b'\x5a\xa8\xa8') == UNCLASSIFIED
    assert not is_carriage_control(b'\xd3\xa8\xa8')
    assert not is_carriage_control(b'')


def test_classify_is_pure():
    payload = b'\x00\x00' + b'\xe2\xf0\xf1\xd1\xc9\xe9\xd9\xff'

    first = classify(b'\xd3\xab\x8a', payload)
    second = classify(b'\xd3\xab\x8a', payload)

    assert first == second
    assert first.name == 'S01JIZR.'


def test_accepts_bytearray():
    assert classify(bytearray(b'\xd3\xa9\xaf')).component == Component.PAGE


def test_codepage():
    assert codepage.decode(bytes(range(0xC1, 0xCA))) == 'ABCDEFGHI'
    assert codepage.decode(bytes(range(0xD1, 0xDA))) == 'JKLMNOPQR'
    assert codepage.decode(bytes(range(0xE2, 0xEA))) == 'STUVWXYZ'
    assert codepage.decode(bytes(range(0xF0, 0xFA))) == '0123456789'
    # lower case letters and the gaps between ranges are not mapped
    assert codepage.decode(b'\x81\xca\xe1\x40') == '....'
    assert codepage.ebcdic_to_ascii(0xC1) == 'A'
    assert len(codepage.TABLE) == 256
