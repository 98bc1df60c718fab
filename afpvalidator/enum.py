from enum import Enum, auto


class Component(Enum):
    '''Hierarchy bracket a structured field opens, closes or belongs to.

    NONE doubles as the value popped from an empty stack: it never equals
    the component an End field closes.'''
    NONE           = 0
    DOCUMENT       = auto()
    PAGE_GROUP     = auto()
    PAGE           = auto()
    OBJECT         = auto()
    RESOURCE_GROUP = auto()
    OVERLAY        = auto()
    RESOURCE       = auto()

    def __str__(self):
        return self.name.replace('_', ' ').title()


class ObjectKind(Enum):
    '''Content category carried by a data or resource field'''
    NONE              = 0
    PRESENTATION_TEXT = auto()
    IMAGE             = auto()
    GRAPHICS          = auto()
    BARCODE           = auto()
    FONT              = auto()
    PAGE_SEGMENT      = auto()
    FORM_DEF          = auto()
    RESOURCE_LIBRARY  = auto()

    def __str__(self):
        return self.name.replace('_', ' ').title()


class Bracket(Enum):
    BEGIN = auto()
    END   = auto()


class ErrorKind(Enum):
    DESYNC                   = auto()
    FRAMING                  = auto()
    STRUCTURE_MISMATCH       = auto()
    TRUNCATED                = auto()
    CAPACITY_EXCEEDED        = auto()
    MISSING_DOCUMENT_BRACKET = auto()  # advisory, never counted as an error
    UNCLOSED_COMPONENT       = auto()  # advisory

    @property
    def is_fatal(self):
        return self in (ErrorKind.TRUNCATED, ErrorKind.CAPACITY_EXCEEDED)
