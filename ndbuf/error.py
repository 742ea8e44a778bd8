__all__ = [
    'NdbufException',
    'InvalidShape',
    'UnsupportedKind',
    'RankMismatch',
    'IndexOutOfBounds',
    'ArrayWriteError',
]


class NdbufException(Exception):
    """Exception that all ndbuf exceptions derive from"""

#------------------------------------------------------------------------
# Shape and type errors
#------------------------------------------------------------------------

class InvalidShape(NdbufException, ValueError):
    """
    Raised for malformed shapes: not a sequence, empty, or holding a
    negative, fractional or non-finite entry. Also raised when explicit
    strides do not line up with the shape.
    """

class UnsupportedKind(NdbufException, TypeError):
    """Raised for unknown or unimplemented element kinds"""

#------------------------------------------------------------------------
# Access errors
#------------------------------------------------------------------------

class RankMismatch(NdbufException, IndexError):
    """
    An error for when the number of indices does not match the
    number of dimensions of the array.
    """

class IndexOutOfBounds(NdbufException, IndexError):
    """
    An error for when an index falls outside its dimension, or the
    resulting position falls outside the buffer.
    """

class ArrayWriteError(NdbufException):
    """
    An error for when trying to write to an array whose buffer is
    read only.
    """
