'''
Begin/End discipline of the structured fields.

Every Begin field pushes the component it opens, every End field pops and
checks that what it closes is what was open. A mismatch is reported but
the popped value is not pushed back: the scan goes on from the state it
is in, so that a single pass reports as much as possible.
'''
import logging
from typing import Optional, Tuple

from .enum import Component, ErrorKind
from .exceptions import CapacityExceededException
from .report import ValidationError


logger = logging.getLogger(__name__)


MAX_STACK_SIZE = 100


class ComponentStack(object):
    '''Fixed capacity stack: AFP hierarchies are shallow, overflowing
    means the input is corrupt.'''

    def __init__(self, capacity=MAX_STACK_SIZE):
        self.capacity = capacity
        self._components = [Component.NONE] * capacity
        self._top = -1

    def __len__(self):
        return self._top + 1

    def __iter__(self):
        '''From the top to the bottom'''
        for idx in range(self._top, -1, -1):
            yield self._components[idx]

    def __repr__(self):
        return f'<{self.__class__.__name__}({[str(_) for _ in self]})>'

    def is_empty(self) -> bool:
        return self._top < 0

    def push(self, component: Component):
        if self._top >= self.capacity - 1:
            raise CapacityExceededException(chain=[component.name])

        self._top += 1
        self._components[self._top] = component

    def pop(self) -> Component:
        '''An empty stack gives Component.NONE'''
        if self._top < 0:
            return Component.NONE

        component = self._components[self._top]
        self._top -= 1

        return component

    def peek(self) -> Component:
        if self._top < 0:
            return Component.NONE

        return self._components[self._top]


class NestingValidator(object):

    def __init__(self, max_depth=MAX_STACK_SIZE):
        self.stack = ComponentStack(max_depth)
        self.has_begin_document = False
        self.has_end_document = False

    @property
    def unclosed(self) -> Tuple[Component, ...]:
        return tuple(self.stack)

    def feed(self, field, classification) -> Optional[ValidationError]:
        '''Consume one field, returns the mismatch if there is one.

        Raises CapacityExceededException when a Begin doesn't fit anymore.'''
        if classification.bracket is None:
            return None

        component = classification.component

        if classification.is_begin:
            try:
                self.stack.push(component)
            except CapacityExceededException as e:
                e.offset = field.offset
                raise

            if component is Component.DOCUMENT:
                self.has_begin_document = True

            logger.debug('open %s at position %d (depth %d)' % (component, field.offset, len(self.stack)))
            return None

        if component is Component.DOCUMENT:
            self.has_end_document = True

        popped = self.stack.pop()
        if popped is component:
            logger.debug('close %s at position %d' % (component, field.offset))
            return None

        message = f'expected to end {popped} but found End {component}'
        logger.warning('document structure mismatch at position %d: %s' % (field.offset, message))

        return ValidationError(ErrorKind.STRUCTURE_MISMATCH, field.offset, message)
