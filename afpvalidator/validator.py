'''
One validation run over an AFP stream.

    >>> report = validate('/path/to/file.afp')
    >>> report.is_valid, report.field_count, report.unclosed

The run never raises because of malformed input: every anomaly ends up in
the report, also when the scan has to stop early (see ``aborted``).
'''
import logging

from .enum import ErrorKind
from .streams import Stream
from .exceptions import CapacityExceededException
from .structured_field import Framer, MAX_CONSECUTIVE_DESYNC
from .classifier import classify
from .nesting import NestingValidator, MAX_STACK_SIZE
from .statistics import Statistics
from .report import ValidationError, ValidationReport, FieldTrace


logger = logging.getLogger(__name__)


class Validator(object):

    def __init__(self, source, max_depth=MAX_STACK_SIZE, max_consecutive_desync=MAX_CONSECUTIVE_DESYNC, trace=False):
        self.source = source
        self.max_depth = max_depth
        self.max_consecutive_desync = max_consecutive_desync
        self.trace = trace

    def run(self) -> ValidationReport:
        # a Stream given by the caller is left open
        if isinstance(self.source, Stream):
            return self._run(self.source)

        with Stream(self.source) as stream:
            return self._run(stream)

    def _run(self, stream) -> ValidationReport:
        logger.info('analyzing %r' % stream)

        framer = Framer(stream, max_consecutive_desync=self.max_consecutive_desync)
        nesting = NestingValidator(max_depth=self.max_depth)
        statistics = Statistics()

        errors = []
        trace = []
        field_count = 0
        aborted = False
        abort_reason = None

        for item in framer:
            if isinstance(item, ValidationError):
                errors.append(item)
                continue

            classification = classify(item.type_code, item.payload)

            try:
                mismatch = nesting.feed(item, classification)
            except CapacityExceededException as e:
                message = f'components nested deeper than {self.max_depth}'
                logger.error('%s at position %d, stopping analysis' % (message, e.offset))
                errors.append(ValidationError(ErrorKind.CAPACITY_EXCEEDED, e.offset, message))
                aborted = True
                abort_reason = ErrorKind.CAPACITY_EXCEEDED
                break

            if mismatch:
                errors.append(mismatch)

            statistics.update(classification)

            if self.trace:
                trace.append(FieldTrace(item, classification))

            field_count += 1

        if framer.aborted:
            aborted = True
            abort_reason = framer.abort_reason

        warnings = []
        if not nesting.has_begin_document:
            warnings.append(ValidationError(
                ErrorKind.MISSING_DOCUMENT_BRACKET, None, 'no Begin Document structured field found'))
        if not nesting.has_end_document:
            warnings.append(ValidationError(
                ErrorKind.MISSING_DOCUMENT_BRACKET, None, 'no End Document structured field found'))

        unclosed = nesting.unclosed
        if unclosed:
            message = 'unclosed components: %s' % ', '.join(str(_) for _ in unclosed)
            logger.warning('document structure is incomplete, %s' % message)
            warnings.append(ValidationError(ErrorKind.UNCLOSED_COMPONENT, None, message))

        report = ValidationReport(
            is_valid=len(errors) == 0,
            field_count=field_count,
            error_count=len(errors),
            has_begin_document=nesting.has_begin_document,
            has_end_document=nesting.has_end_document,
            unclosed=unclosed,
            statistics=statistics.snapshot(),
            errors=tuple(errors),
            warnings=tuple(warnings),
            aborted=aborted,
            abort_reason=abort_reason,
            stream_size=stream.size,
            trace=tuple(trace),
        )

        logger.info('%d structured fields, %d errors, %s' % (
            report.field_count, report.error_count, 'VALID' if report.is_valid else 'INVALID'))

        return report


def validate(source, **kwargs) -> ValidationReport:
    return Validator(source, **kwargs).run()
