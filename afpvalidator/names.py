'''
Mnemonics of the structured fields, only used to print them.

Begin and End fields share the third byte (D3A8xx opens what D3A9xx closes)
so they are described by a single table.
'''
from .classifier import MODCA, BEGIN_PREFIX, END_PREFIX, is_carriage_control


BEGIN_END = {
    0x5F: ('PS', 'Page Segment'),
    0x77: ('CA', 'Color Attribute Table'),
    0x7B: ('II', 'IM Image'),
    0x87: ('CP', 'Code Page'),
    0x89: ('FN', 'Font'),
    0x8A: ('CF', 'Coded Font'),
    0x92: ('OC', 'Object Container'),
    0x9B: ('PT', 'Presentation Text Object'),
    0xA7: ('DI', 'Document Index'),
    0xA8: ('DT', 'Document'),
    0xAD: ('NG', 'Named Page Group'),
    0xAF: ('PG', 'Page'),
    0xBB: ('GR', 'Graphics Object'),
    0xC4: ('DG', 'Document Environment Group'),
    0xC5: ('FG', 'Form Environment Group'),
    0xC6: ('RG', 'Resource Group'),
    0xC7: ('OG', 'Object Environment Group'),
    0xC9: ('AG', 'Active Environment Group'),
    0xCC: ('MM', 'Medium Map'),
    0xCD: ('FM', 'Form Map'),
    0xCE: ('RS', 'Resource'),
    0xD9: ('SG', 'Resource Environment Group'),
    0xDF: ('MO', 'Overlay'),
    0xEB: ('BC', 'Bar Code Object'),
    0xFB: ('IM', 'Image Object'),
}

# keyed by the last two bytes, the first one being always 0xD3
MNEMONICS = {
    (0x8C, 0x8A): ('CFI', 'Coded Font Index'),
    (0x8C, 0x87): ('CPI', 'Code Page Index'),
    (0x8C, 0x89): ('FNI', 'Font Index'),
    (0xA0, 0x88): ('MFC', 'Medium Finishing Control'),
    (0xA0, 0x90): ('TLE', 'Tag Logical Element'),
    (0xA2, 0x89): ('FNM', 'Font Patterns Map'),
    (0xA2, 0x88): ('MCC', 'Medium Copy Count'),
    (0xA6, 0x92): ('CDD', 'Container Data Descriptor'),
    (0xA6, 0x87): ('CPD', 'Code Page Descriptor'),
    (0xA6, 0xC5): ('FGD', 'Form Environment Group Descriptor'),
    (0xA6, 0x89): ('FND', 'Font Descriptor'),
    (0xA6, 0xBB): ('GDD', 'Graphics Data Descriptor'),
    (0xA6, 0xFB): ('IDD', 'Image Data Descriptor'),
    (0xA6, 0x7B): ('IID', 'Image Input Descriptor'),
    (0xA6, 0x88): ('MDD', 'Medium Descriptor'),
    (0xA6, 0x6B): ('OBD', 'Object Area Descriptor'),
    (0xA6, 0xAF): ('PGD', 'Page Descriptor'),
    (0xA6, 0x9B): ('PTD', 'Presentation Text Descriptor Format-1'),
    (0xA6, 0xEB): ('BDD', 'Bar Code Data Descriptor'),
    (0xA7, 0x8A): ('CFC', 'Coded Font Control'),
    (0xA7, 0x87): ('CPC', 'Code Page Control'),
    (0xA7, 0x9B): ('CTC', 'Composed Text Control'),
    (0xA7, 0x89): ('FNC', 'Font Control'),
    (0xA7, 0x7B): ('IOC', 'IM Image Output Control'),
    (0xA7, 0x88): ('MMC', 'Medium Modification Control'),
    (0xA7, 0xA8): ('PEC', 'Presentation Environment Control'),
    (0xA7, 0xAF): ('PMC', 'Page Modification Control'),
    (0xA7, 0xAB): ('IRD', 'Image Raster Data'),
    (0xAB, 0x89): ('FNN', 'Font Name Map'),
    (0xAB, 0xCC): ('IMM', 'Invoke Medium Map'),
    (0xAB, 0xEB): ('MBC', 'Map Bar Code Object'),
    (0xAB, 0x77): ('MCA', 'Map Color Attribute Table'),
    (0xAB, 0x92): ('MCD', 'Map Container Data'),
    (0xAB, 0x8A): ('MCF', 'Map Coded Font'),
    (0xAB, 0xC3): ('MDR', 'Map Data Resource'),
    (0xAB, 0xBB): ('MGO', 'Map Graphics Object'),
    (0xAB, 0xFB): ('MIO', 'Map Image Object'),
    (0xAB, 0x88): ('MMT', 'Map Media Type'),
    (0xAB, 0xAF): ('MPG', 'Map Page'),
    (0xAB, 0xD8): ('MPO', 'Map Page Overlay'),
    (0xAB, 0xEA): ('MSU', 'Map Suppression'),
    (0xAC, 0x89): ('FNP', 'Font Position'),
    (0xAC, 0x7B): ('IPC', 'IM Image Cell Position'),
    (0xAC, 0x6B): ('OBP', 'Object Area Position'),
    (0xAC, 0xAF): ('PGP', 'Page Position Format-1'),
    (0xAD, 0xC3): ('PPO', 'Preprocess Presentation Object'),
    (0xAE, 0x89): ('FNO', 'Font Orientation'),
    (0xAF, 0xC3): ('IOB', 'Include Object'),
    (0xAF, 0xAF): ('IPG', 'Include Page'),
    (0xAF, 0xD8): ('IPO', 'Include Page Overlay'),
    (0xAF, 0x5F): ('IPS', 'Include Page Segment'),
    (0xB0, 0x77): ('CAT', 'Color Attribute Table'),
    (0xB1, 0x8A): ('MCF', 'Map Coded Font Format-1'),
    (0xB1, 0xDF): ('MMO', 'Map Medium Overlay'),
    (0xB1, 0x5F): ('MPS', 'Map Page Segment'),
    (0xB1, 0xAF): ('PGP', 'Page Position'),
    (0xB1, 0x9B): ('PTD', 'Presentation Text Data Descriptor'),
    (0xB2, 0xA7): ('IEL', 'Index Element'),
    (0xB2, 0x88): ('PFC', 'Presentation Fidelity Control'),
    (0xB4, 0x90): ('LLE', 'Link Logical Element'),
    (0xEE, 0x89): ('FNG', 'Font Patterns'),
    (0xEE, 0xBB): ('GAD', 'Graphics Data'),
    (0xEE, 0xFB): ('IPD', 'Image Picture Data'),
    (0xEE, 0xEE): ('NOP', 'No Operation'),
    (0xEE, 0x92): ('OCD', 'Object Container Data'),
    (0xEE, 0x9B): ('PTX', 'Presentation Text Data'),
    (0xEE, 0xEB): ('BDA', 'Bar Code Data'),
}

UNKNOWN = 'Unknown'


def mnemonic(type_code: bytes):
    '''Returns a couple (abbreviation, description) or None'''
    type_code = bytes(type_code)
    if len(type_code) != 3:
        return None

    prefix = type_code[:2]
    if prefix in (BEGIN_PREFIX, END_PREFIX) and type_code[2] in BEGIN_END:
        abbreviation, what = BEGIN_END[type_code[2]]
        verb = 'B' if prefix == BEGIN_PREFIX else 'E'
        return verb + abbreviation, ('Begin ' if verb == 'B' else 'End ') + what

    if type_code[0] == MODCA:
        return MNEMONICS.get((type_code[1], type_code[2]))

    if type_code == b'\xd9\xee\xd3':
        return 'NOP', 'No Operation'

    return None


def describe(type_code: bytes) -> str:
    type_code = bytes(type_code)
    if is_carriage_control(type_code):
        return 'Carriage Control'

    found = mnemonic(type_code)
    if found is None:
        return UNKNOWN

    return '%s - %s' % found
