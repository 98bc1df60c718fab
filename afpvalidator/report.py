'''
Plain data handed to whoever presents the result of a validation run.
'''
from typing import NamedTuple, Optional, Tuple, Mapping, Union

from .enum import Component, ObjectKind, ErrorKind


class ValidationError(NamedTuple):
    '''One anomaly found in the stream.

    The framer yields these for DESYNC, FRAMING and TRUNCATED; the nesting
    validator produces STRUCTURE_MISMATCH and CAPACITY_EXCEEDED. Missing
    document brackets use the same record but end up among the warnings.'''
    kind: ErrorKind
    offset: Optional[int]
    message: str

    @property
    def is_fatal(self) -> bool:
        return self.kind.is_fatal

    def __str__(self):
        where = 'end of stream' if self.offset is None else f'position {self.offset}'
        return f'{self.kind.name} at {where}: {self.message}'


class FieldTrace(NamedTuple):
    field: "RawField"
    classification: "Classification"


class ValidationReport(NamedTuple):
    is_valid: bool
    field_count: int
    error_count: int
    has_begin_document: bool
    has_end_document: bool
    unclosed: Tuple[Component, ...]  # top of the stack first
    statistics: Mapping[Union[Component, ObjectKind], int]
    errors: Tuple[ValidationError, ...] = ()
    warnings: Tuple[ValidationError, ...] = ()
    aborted: bool = False
    abort_reason: Optional[ErrorKind] = None
    stream_size: int = 0
    trace: Tuple[FieldTrace, ...] = ()

    @property
    def completed(self) -> bool:
        '''False when the run stopped before the end of the stream'''
        return not self.aborted

    @property
    def is_complete(self) -> bool:
        '''The structure is properly nested and closed'''
        return len(self.unclosed) == 0
