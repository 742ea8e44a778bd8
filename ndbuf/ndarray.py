"""This file defines the Ndarray --- a strided view over a flat buffer

An Ndarray is made of:

    a flat numpy buffer (where are the bytes)
    an element kind (what are the bytes? how are values coerced into them)
    a shape, strides and an offset (how do I get to an element)

The buffer is either allocated by the array itself or borrowed from the
caller, in which case it is shared and never copied.
"""

import numbers

import numpy as np

from .dtypes import DTypes, resolve, allocate, borrow, coerce, to_python
from .dtypes import from_numpy_dtype
from .error import (InvalidShape, RankMismatch, IndexOutOfBounds,
                    ArrayWriteError)
from .utils import validate_shape, calculate_size, row_major_strides
from ._printing import format_array, to_nested, array_repr


__all__ = ['Ndarray']


def _check_strides(strides, ndim):
    if not isinstance(strides, (list, tuple)):
        raise InvalidShape('Strides must be an array of numbers')
    if len(strides) != ndim:
        raise InvalidShape('Expected %d strides, got %d' % (ndim, len(strides)))
    for i, stride in enumerate(strides):
        if isinstance(stride, bool) or not isinstance(stride, numbers.Integral):
            raise InvalidShape('Strides must be integers, got %s at index %d'
                               % (stride, i))
    return [int(stride) for stride in strides]


class Ndarray(object):
    """
    N-dimensional array of fixed-width numbers.

    Parameters
    ----------
    shape : list or tuple of int
        Size of each dimension. Must have at least one dimension.
    dtype : DTypes or str, optional
        Element kind. Defaults to the dtype of a numpy ``buffer``, or
        ``float64``.
    buffer : numpy.ndarray or buffer-like, optional
        Memory to view instead of allocating. Shared, not copied.
    offset : int, optional
        Position of element ``[0, ..., 0]`` in the buffer.
    strides : list or tuple of int, optional
        Elements to skip per step along each dimension. Row-major when
        omitted.

    Examples
    --------

    >>> a = Ndarray([2, 3], 'int32')
    >>> a.strides
    [3, 1]
    >>> a.set(7, 1, 2)
    >>> a.get(1, 2), a.get(0, 0)
    (7, 0)

    A column-major view over the same memory

    >>> b = Ndarray([3, 2], 'int32', buffer=a.buffer, strides=[1, 3])
    >>> b.get(2, 1)
    7
    """

    def __init__(self, shape, dtype=None, buffer=None, offset=0, strides=None):
        self._shape = list(validate_shape(shape))
        if dtype is None:
            if isinstance(buffer, np.ndarray):
                dtype = from_numpy_dtype(buffer.dtype)
            else:
                dtype = DTypes.float64
        self._dtype = resolve(dtype)

        if isinstance(offset, bool) or not isinstance(offset, numbers.Integral):
            raise TypeError('Offset must be an integer, got %r' % (offset,))
        self._offset = int(offset)

        if strides is None:
            self._strides = row_major_strides(self._shape)
        else:
            self._strides = _check_strides(strides, len(self._shape))

        if buffer is None:
            self._buffer = allocate(self._dtype, self.size)
            self._owns_buffer = True
        else:
            self._buffer = borrow(buffer, self._dtype)
            self._owns_buffer = False

    #------------------------------------------------------------------------
    # Introspection
    #------------------------------------------------------------------------

    @property
    def shape(self):
        return list(self._shape)

    @property
    def strides(self):
        return list(self._strides)

    @property
    def dtype(self):
        return self._dtype

    @property
    def offset(self):
        return self._offset

    @property
    def buffer(self):
        return self._buffer

    @property
    def owns_buffer(self):
        """False when the buffer was supplied by the caller."""
        return self._owns_buffer

    @property
    def size(self):
        return calculate_size(self._shape)

    @property
    def ndim(self):
        return len(self._shape)

    @property
    def itemsize(self):
        return self._dtype.itemsize

    @property
    def nbytes(self):
        return self.size * self.itemsize

    #------------------------------------------------------------------------
    # Element access
    #------------------------------------------------------------------------

    def _position(self, indices):
        """Buffer position of ``indices``, after checking every dimension."""
        if len(indices) == 1 and isinstance(indices[0], (list, tuple)):
            indices = indices[0]
        if len(indices) != self.ndim:
            raise RankMismatch('Expected %d indices, got %d'
                               % (self.ndim, len(indices)))
        for dim, (index, size) in enumerate(zip(indices, self._shape)):
            if isinstance(index, bool) or not isinstance(index, numbers.Integral):
                raise TypeError('Indices must be integers, got %r for '
                                'dimension %d' % (index, dim))
            if index < 0 or index >= size:
                raise IndexOutOfBounds('Index %d is out of bounds for '
                                       'dimension %d with size %d'
                                       % (index, dim, size))
        position = self._offset + sum(int(index) * stride for index, stride
                                      in zip(indices, self._strides))
        if not 0 <= position < len(self._buffer):
            raise IndexOutOfBounds('Offset %d is out of bounds for buffer '
                                   'of size %d'
                                   % (position, len(self._buffer)))
        return position

    def get(self, *indices):
        """
        Element at ``indices`` as a Python int or float.

        Indices may be passed positionally or as a single list or tuple.
        """
        return to_python(self._dtype, self._buffer[self._position(indices)])

    def set(self, value, *indices):
        """Write ``value`` at ``indices``, coerced to the array's kind."""
        position = self._position(indices)
        if not self._buffer.flags.writeable:
            raise ArrayWriteError('Cannot write to a read-only buffer')
        self._buffer[position] = coerce(self._dtype, value)

    at = get

    #------------------------------------------------------------------------
    # Conversion
    #------------------------------------------------------------------------

    def tolist(self):
        """The elements as nested Python lists."""
        return to_nested(self)

    def astype(self, dtype):
        """A copy of this array with elements converted to ``dtype``."""
        from .constructors import astype
        return astype(self, dtype)

    def __len__(self):
        return self._shape[0]

    def __str__(self):
        return format_array(self)

    def __repr__(self):
        return array_repr(self)
