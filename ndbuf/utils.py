"""
Shape helpers and the N-dimensional index iterator that every filling,
copying and printing operation is built on.
"""

import math
import numbers
import operator
from functools import reduce

from .error import InvalidShape

__all__ = ['is_integer', 'validate_shape', 'calculate_size',
           'row_major_strides', 'iter_indices', 'for_each_index']


def is_integer(x):
    """
    Whether ``x`` holds an integral value. Bools are not integers here.

    >>> is_integer(3), is_integer(3.0), is_integer(3.5), is_integer(True)
    (True, True, False, False)
    >>> is_integer(float('inf'))
    False
    """
    if isinstance(x, bool):
        return False
    if isinstance(x, numbers.Integral):
        return True
    if isinstance(x, numbers.Real):
        return math.isfinite(x) and float(x).is_integer()
    return False


def validate_shape(shape):
    """
    Check that ``shape`` is a non-empty sequence of non-negative integers
    and return it as a tuple of ints.

    >>> validate_shape([2, 3.0])
    (2, 3)
    >>> validate_shape([2, -1])
    Traceback (most recent call last):
        ...
    ndbuf.error.InvalidShape: Shape values must be non-negative integers, got -1 at index 1
    """
    if not isinstance(shape, (list, tuple)):
        raise InvalidShape('Shape must be an array of numbers')
    if len(shape) == 0:
        raise InvalidShape('Shape cannot be empty')
    for i, dim in enumerate(shape):
        if not is_integer(dim) or dim < 0:
            raise InvalidShape('Shape values must be non-negative integers, '
                               'got %s at index %d' % (dim, i))
    return tuple(int(dim) for dim in shape)


def calculate_size(shape):
    """
    Number of elements in an array of ``shape``.

    >>> calculate_size([2, 3, 4])
    24
    >>> calculate_size([2, 0, 3])
    0
    """
    return reduce(operator.mul, shape, 1)


def row_major_strides(shape):
    """
    C-order strides, in elements, for ``shape``.

    A zero-sized dimension zeroes the strides of every dimension before it.

    >>> row_major_strides([2, 3, 4])
    [12, 4, 1]
    >>> row_major_strides([2, 0, 3])
    [0, 3, 1]
    """
    strides = [0] * len(shape)
    stride = 1
    for i in reversed(range(len(shape))):
        strides[i] = stride
        stride *= shape[i]
    return strides


def iter_indices(shape):
    """
    Iterate over every multi-index of ``shape`` in row-major order.

    The shape is validated when this is called, not when iteration starts.
    Each index is yielded as a new list.

    >>> list(iter_indices([2, 2]))
    [[0, 0], [0, 1], [1, 0], [1, 1]]
    >>> list(iter_indices([2, 0, 3]))
    []
    """
    return _indices(validate_shape(shape))


def _indices(shape):
    if 0 in shape:
        return
    ndim = len(shape)
    index = [0] * ndim
    while True:
        yield list(index)
        dim = ndim - 1
        # odometer step: bump the last dimension, carry leftwards
        while dim >= 0:
            index[dim] += 1
            if index[dim] < shape[dim]:
                break
            index[dim] = 0
            dim -= 1
        if dim < 0:
            return


def for_each_index(shape, visit):
    """
    Call ``visit(index)`` once for every multi-index of ``shape``, last
    dimension varying fastest.

    ``visit`` receives its own copy of the index and may keep or mutate it.
    Nothing is visited when any dimension is zero.

    >>> seen = []
    >>> for_each_index([2, 3], seen.append)
    >>> seen[:4]
    [[0, 0], [0, 1], [0, 2], [1, 0]]
    """
    for index in iter_indices(shape):
        visit(index)
