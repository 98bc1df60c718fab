'''
Classification of a structured field from its type code.

The type code is three bytes: 0xD3 marks a MO:DCA structured field, the
second byte is the class (Begin, End, Descriptor, Data, ...) and the third
one the kind of thing the field is about. Everything is table driven so that
classify() stays a pure function of the type code and the payload.
'''
from typing import NamedTuple, Optional

from .enum import Component, ObjectKind, Bracket
from .common import codepage


MODCA = 0xD3
CARRIAGE_CONTROL = 0x5A

BEGIN_PREFIX = bytes([MODCA, 0xA8])
END_PREFIX   = bytes([MODCA, 0xA9])
DATA_PREFIX  = bytes([MODCA, 0xEE])

BRACKETS = {
    0xA8: Component.DOCUMENT,        # BDT / EDT
    0xAD: Component.PAGE_GROUP,      # BNG / ENG
    0xAF: Component.PAGE,            # BPG / EPG
    0xC9: Component.OBJECT,          # BAG / EAG
    0xC6: Component.RESOURCE_GROUP,  # BRG / ERG
    0xDF: Component.OVERLAY,         # BMO / EMO
}

DATA_OBJECTS = {
    0x9B: ObjectKind.PRESENTATION_TEXT,  # PTX
    0xFB: ObjectKind.IMAGE,              # IPD
    0xBB: ObjectKind.GRAPHICS,           # GAD
    0xEB: ObjectKind.BARCODE,            # BDA
}

RESOURCE_DESCRIPTORS = {
    b'\xd3\xa6\x89': ObjectKind.FONT,          # FND
    b'\xd3\xa7\x89': ObjectKind.FONT,          # FNC
    b'\xd3\x8c\x8a': ObjectKind.FONT,          # CFI
    b'\xd3\xa6\xc5': ObjectKind.FORM_DEF,      # FGD
    b'\xd3\xa8\xcd': ObjectKind.FORM_DEF,      # BFM
    b'\xd3\xa8\x5f': ObjectKind.PAGE_SEGMENT,  # BPS
}

MAP_CODED_FONT = b'\xd3\xab\x8a'
NAME_OFFSET = 2
NAME_LENGTH = 8


class Classification(NamedTuple):
    component: Component = Component.NONE
    object_kind: ObjectKind = ObjectKind.NONE
    bracket: Optional[Bracket] = None
    name: Optional[str] = None

    @property
    def is_begin(self) -> bool:
        return self.bracket is Bracket.BEGIN

    @property
    def is_end(self) -> bool:
        return self.bracket is Bracket.END


UNCLASSIFIED = Classification()


def is_carriage_control(type_code: bytes) -> bool:
    '''Legacy line data: recognized, never part of the hierarchy'''
    return len(type_code) > 0 and type_code[0] == CARRIAGE_CONTROL


def decode_name(payload: bytes) -> Optional[str]:
    if len(payload) < NAME_OFFSET + NAME_LENGTH:
        return None

    return codepage.decode(payload[NAME_OFFSET:NAME_OFFSET + NAME_LENGTH])


def classify(type_code: bytes, payload: bytes = b'') -> Classification:
    type_code = bytes(type_code)
    if len(type_code) != 3 or type_code[0] != MODCA:
        return UNCLASSIFIED

    prefix, code = type_code[:2], type_code[2]

    component = Component.NONE
    object_kind = ObjectKind.NONE
    bracket = None
    name = None

    if prefix in (BEGIN_PREFIX, END_PREFIX) and code in BRACKETS:
        component = BRACKETS[code]
        bracket = Bracket.BEGIN if prefix == BEGIN_PREFIX else Bracket.END

    if prefix == DATA_PREFIX:
        object_kind = DATA_OBJECTS.get(code, ObjectKind.NONE)

    if type_code in RESOURCE_DESCRIPTORS:
        object_kind = RESOURCE_DESCRIPTORS[type_code]
        component = Component.RESOURCE

    if type_code == MAP_CODED_FONT:
        component = Component.RESOURCE
        name = decode_name(bytes(payload))

    return Classification(component, object_kind, bracket, name)
