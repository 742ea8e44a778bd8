"""Constructors for the ndbuf array object.

Having them as external functions allows more flexibility and helps keeping
the array object compact, just showing the interface of the array itself.

Every constructor allocates a fresh buffer through ``Ndarray`` and fills it
with ``for_each_index``.
"""

import logging

from .dtypes import DTypes
from .ndarray import Ndarray
from .utils import for_each_index, is_integer, validate_shape

logger = logging.getLogger(__name__)

__all__ = ['empty', 'zeros', 'ones', 'full', 'eye', 'identity', 'astype']


def _fill(arr, value):
    for_each_index(arr.shape, lambda index: arr.set(value, index))
    return arr


def empty(shape, dtype=DTypes.float64):
    """Create an array without filling it.

    Parameters
    ----------
    shape : list or tuple of int
        The shape of the resulting array.

    dtype : DTypes or str
        The element kind. Defaults to float64.

    Returns
    -------
    out : Ndarray

    Notes
    -----
    Buffers come zero-initialized from allocation, but callers should not
    rely on the contents.
    """
    return Ndarray(shape, dtype)


def zeros(shape, dtype=DTypes.float64):
    """Create an array and fill it with zeros.

    >>> zeros([2, 2], 'int32').tolist()
    [[0, 0], [0, 0]]
    """
    return _fill(Ndarray(validate_shape(shape), dtype), 0)


def ones(shape, dtype=DTypes.float64):
    """Create an array and fill it with ones.

    >>> ones([3], 'bigint64').tolist()
    [1, 1, 1]
    """
    return _fill(Ndarray(validate_shape(shape), dtype), 1)


def full(shape, fill_value, dtype=DTypes.float64):
    """Create an array and fill it with ``fill_value``.

    The value is coerced to ``dtype`` the same way ``Ndarray.set`` does.

    >>> full([2], 300, 'uint8_clamped').tolist()
    [255, 255]
    """
    return _fill(Ndarray(validate_shape(shape), dtype), fill_value)


def eye(N, M=None, k=0, dtype=DTypes.float64):
    """Create a 2-D array with ones on the ``k``-th diagonal.

    Parameters
    ----------
    N : int
        Number of rows.
    M : int, optional
        Number of columns. Defaults to ``N``.
    k : int, optional
        Index of the diagonal: 0 is the main diagonal, positive values
        are above it and negative values below.
    dtype : DTypes or str
        The element kind. Defaults to float64.

    >>> eye(2, 3, k=1, dtype='int8').tolist()
    [[0, 1, 0], [0, 0, 1]]
    """
    if not is_integer(N) or N <= 0:
        raise ValueError('N must be a positive integer, got %s' % (N,))
    cols = N if M is None else M
    if not is_integer(cols) or cols <= 0:
        raise ValueError('M must be a positive integer, got %s' % (cols,))
    if not is_integer(k):
        raise ValueError('k must be an integer, got %s' % (k,))

    shape = validate_shape([N, cols])
    arr = Ndarray(shape, dtype)

    def visit(index):
        i, j = index
        arr.set(1 if j - i == k else 0, i, j)

    for_each_index(shape, visit)
    return arr


def identity(n, dtype=DTypes.float64):
    """Create a square array with ones on the main diagonal.

    >>> identity(2).tolist()
    [[1.0, 0.0], [0.0, 1.0]]
    """
    if not is_integer(n) or n <= 0:
        raise ValueError('n must be a positive integer, got %s' % (n,))
    return eye(n, n, 0, dtype)


def astype(arr, dtype):
    """Copy ``arr`` into a new array of kind ``dtype``.

    Values go through the target kind's coercion: floats truncate toward
    zero when converted to integers, integer kinds wrap around, and the
    clamped kind saturates. The result owns its buffer.

    >>> astype(full([2, 2], 1.7), 'int32').tolist()
    [[1, 1], [1, 1]]
    """
    result = Ndarray(arr.shape, dtype)
    logger.debug('converting %s array of shape %s to %s',
                 arr.dtype, arr.shape, result.dtype)
    for_each_index(arr.shape,
                   lambda index: result.set(arr.get(index), index))
    return result
