'''
Translation of the EBCDIC names found in the resource fields.

This is not a complete code page: only the upper case letters and the digits
are mapped, everything else is rendered as a dot. That is enough for the
8-character resource names which are (almost always) made of those.
'''

PLACEHOLDER = '.'

# (first EBCDIC code, last EBCDIC code, first character)
RANGES = (
    (0xC1, 0xC9, 'A'),
    (0xD1, 0xD9, 'J'),
    (0xE2, 0xE9, 'S'),
    (0xF0, 0xF9, '0'),
)


def _build_table():
    table = [PLACEHOLDER] * 256
    for first, last, start in RANGES:
        for code in range(first, last + 1):
            table[code] = chr(ord(start) + code - first)

    return tuple(table)


TABLE = _build_table()


def ebcdic_to_ascii(code: int) -> str:
    return TABLE[code]


def decode(data: bytes) -> str:
    '''Never fails: unmapped bytes become PLACEHOLDER'''
    return ''.join(TABLE[_] for _ in data)
