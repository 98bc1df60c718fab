#!/usr/bin/env python3
'''
Validate an AFP/MO:DCA file: analyze the document structure, report the
errors found and print some statistics about the content.

 $ afpvalidate.py document.afp -v
'''
import logging
import os
import sys

from afpvalidator.validator import validate
from afpvalidator.enum import Component, ObjectKind, ErrorKind
from afpvalidator.classifier import BEGIN_PREFIX
from afpvalidator.common import codepage
from afpvalidator.names import describe


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)

BEGIN_DOCUMENT = BEGIN_PREFIX + b'\xa8'

STATISTICS = (
    ('Documents', Component.DOCUMENT),
    ('Page Groups', Component.PAGE_GROUP),
    ('Pages', Component.PAGE),
    ('Objects', Component.OBJECT),
    ('Overlays', Component.OVERLAY),
    ('Resource Groups', Component.RESOURCE_GROUP),
    ('Resources', Component.RESOURCE),
    ('Presentation Text', ObjectKind.PRESENTATION_TEXT),
    ('Images', ObjectKind.IMAGE),
    ('Graphics', ObjectKind.GRAPHICS),
    ('Barcodes', ObjectKind.BARCODE),
    ('Fonts', ObjectKind.FONT),
    ('Form Definitions', ObjectKind.FORM_DEF),
    ('Page Segments', ObjectKind.PAGE_SEGMENT),
)


def usage(progname):
    print(f'''usage: {progname} <afp file> [-v]

  -v: verbose mode (print details of each structured field)

Set the DEBUG environment variable to see the parser at work.''')
    sys.exit(2)


def hexdump(data, indent=9):
    lines = [' '.join(f'{_:02X}' for _ in data[idx:idx + 16]) for idx in range(0, len(data), 16)]
    return ('\n' + ' ' * indent).join(lines)


def dump_field(idx, field, classification):
    print(f'''Field #{idx} at position {field.offset}:
  Length: {field.length}
  Flag: 0x{field.flags:02X} {' '.join(field.flag_bits)}
  Type: {field.type_code.hex().upper()} ({describe(field.type_code)})''')

    if classification.component is not Component.NONE:
        print(f'  Component: {classification.component}')

    if classification.object_kind is not ObjectKind.NONE:
        print(f'  Object Type: {classification.object_kind}')

    if classification.name is not None:
        print(f'  Resource Name: {classification.name}')

    if not field.payload:
        print('  Data: (none)\n')
        return

    print(f'  Data: {hexdump(field.payload)}')
    if field.type_code == BEGIN_DOCUMENT and len(field.payload) >= 8:
        print(f'  Document Name: {codepage.decode(field.payload[:8])}')
    print()


def dump_report(report):
    print(f'''
AFP File Analysis Summary:
-------------------------
Total structured fields: {report.field_count}
Errors detected: {report.error_count}
Begin Document found: {'Yes' if report.has_begin_document else 'No'}
End Document found: {'Yes' if report.has_end_document else 'No'}''')

    for error in report.errors:
        print(f'Error: {error}')

    for warning in report.warnings:
        # unclosed components get their own listing below
        if warning.kind is ErrorKind.UNCLOSED_COMPONENT:
            continue
        print(f'Warning: {warning.message}')

    if report.aborted:
        print(f'Analysis stopped early ({report.abort_reason.name}) after {report.field_count} fields')

    print('''
AFP Structure Summary:
---------------------''')
    if report.unclosed:
        print('Warning: Document structure is incomplete. Unclosed components:')
        for component in report.unclosed:
            print(f'  - {component}')
    else:
        print('Document structure is properly nested and complete.')

    print('''
AFP Content Statistics:
----------------------''')
    for label, kind in STATISTICS:
        print(f'{label + ":":<19}{report.statistics[kind]}')

    print(f'\nValidation result: {"VALID" if report.is_valid else "INVALID"}')


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    path = sys.argv[1]
    verbose = len(sys.argv) > 2 and sys.argv[2] == '-v'

    try:
        report = validate(path, trace=verbose)
    except OSError as e:
        logger.error(f'cannot open file \'{path}\': {e}')
        sys.exit(1)

    print(f'Analyzing AFP file: {path} (Size: {report.stream_size} bytes)\n')

    for idx, (field, classification) in enumerate(report.trace, start=1):
        dump_field(idx, field, classification)

    dump_report(report)

    sys.exit(0 if report.is_valid else 1)
