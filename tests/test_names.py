from afpvalidator.names import describe, mnemonic, UNKNOWN


def test_begin_end():
    assert describe(b'\xd3\xa8\xa8') == 'BDT - Begin Document'
    assert describe(b'\xd3\xa9\xa8') == 'EDT - End Document'
    assert describe(b'\xd3\xa8\xad') == 'BNG - Begin Named Page Group'
    assert describe(b'\xd3\xa9\xdf') == 'EMO - End Overlay'


def test_other_fields():
    assert describe(b'\xd3\xab\x8a') == 'MCF - Map Coded Font'
    assert describe(b'\xd3\xee\x9b') == 'PTX - Presentation Text Data'
    assert describe(b'\xd9\xee\xd3') == 'NOP - No Operation'
    assert mnemonic(b'\xd3\xa6\x89') == ('FND', 'Font Descriptor')


def test_carriage_control_and_unknown():
    assert describe(b'\x5a\x00\x00') == 'Carriage Control'
    assert describe(b'\xd3\xa8\x00') == UNKNOWN
    assert describe(b'\x00\x00\x00') == UNKNOWN
    assert mnemonic(b'\xd3') is None
