# -*- coding: utf-8 -*-

"""
Element kinds for ndbuf arrays.

Every array stores its elements in a flat numpy buffer of a single fixed
width numeric kind. This module enumerates the kinds, knows how to
allocate a buffer for each, how to borrow a buffer supplied by the caller,
and how a Python value is coerced on its way into a buffer.
"""

import logging
import math
import numbers
from collections import namedtuple
from enum import Enum

import numpy as np

from .dispatch import dispatch
from .error import UnsupportedKind

logger = logging.getLogger(__name__)

__all__ = ['DTypes', 'resolve', 'allocate', 'borrow', 'coerce', 'to_python',
           'from_numpy_dtype']


class DTypes(Enum):
    """
    The closed set of element kinds.

    The value of each member is its name, so ``DTypes('int32')`` and
    ``DTypes.int32`` are the same kind.

    >>> DTypes.int16.itemsize
    2
    >>> DTypes.uint8_clamped.is_clamped
    True
    """
    int8 = 'int8'
    uint8 = 'uint8'
    uint8_clamped = 'uint8_clamped'
    int16 = 'int16'
    uint16 = 'uint16'
    int32 = 'int32'
    uint32 = 'uint32'
    float16 = 'float16'
    float32 = 'float32'
    float64 = 'float64'
    bigint64 = 'bigint64'
    biguint64 = 'biguint64'

    @property
    def itemsize(self):
        """The size of one element of this kind, in bytes."""
        return _kinds[self].itemsize

    @property
    def is_integer(self):
        return not _kinds[self].floating

    @property
    def is_floating(self):
        return _kinds[self].floating

    @property
    def is_signed(self):
        return _kinds[self].signed

    @property
    def is_clamped(self):
        return _kinds[self].clamped

    @property
    def is_big(self):
        """Whether elements are 64-bit integers kept out of float range."""
        return self in (DTypes.bigint64, DTypes.biguint64)

    def to_numpy_dtype(self):
        return np.dtype(_kinds[self].numpy_type)

    def __str__(self):
        return self.value


Kind = namedtuple('Kind', 'numpy_type itemsize signed floating clamped')

_kinds = {
    DTypes.int8:          Kind(np.int8,    1, True,  False, False),
    DTypes.uint8:         Kind(np.uint8,   1, False, False, False),
    DTypes.uint8_clamped: Kind(np.uint8,   1, False, False, True),
    DTypes.int16:         Kind(np.int16,   2, True,  False, False),
    DTypes.uint16:        Kind(np.uint16,  2, False, False, False),
    DTypes.int32:         Kind(np.int32,   4, True,  False, False),
    DTypes.uint32:        Kind(np.uint32,  4, False, False, False),
    DTypes.float16:       Kind(np.float16, 2, True,  True,  False),
    DTypes.float32:       Kind(np.float32, 4, True,  True,  False),
    DTypes.float64:       Kind(np.float64, 8, True,  True,  False),
    DTypes.bigint64:      Kind(np.int64,   8, True,  False, False),
    DTypes.biguint64:     Kind(np.uint64,  8, False, False, False),
}

# Kinds that are part of the enumeration but cannot back an array
_unsupported = {
    DTypes.float16: 'float16 not supported in this environment',
}

# uint8 maps to the wrapping kind, never the clamped one
_from_numpy = dict((np.dtype(kind.numpy_type), dt)
                   for dt, kind in _kinds.items() if not kind.clamped)


def resolve(kind):
    """
    Normalize a kind given as a ``DTypes`` member or by name.

    >>> resolve('float32')
    <DTypes.float32: 'float32'>
    >>> resolve('complex64')
    Traceback (most recent call last):
        ...
    ndbuf.error.UnsupportedKind: Unsupported dtype: complex64
    """
    if isinstance(kind, DTypes):
        return kind
    try:
        return DTypes(kind)
    except (ValueError, TypeError):
        raise UnsupportedKind('Unsupported dtype: %s' % (kind,))


def from_numpy_dtype(dt):
    """
    The kind backed by a numpy dtype.

    >>> from_numpy_dtype(np.dtype('int64'))
    <DTypes.bigint64: 'bigint64'>
    """
    dt = np.dtype(dt)
    try:
        return _from_numpy[dt]
    except KeyError:
        raise UnsupportedKind('Unsupported dtype: %s' % dt)


def _check_supported(kind):
    if kind in _unsupported:
        raise UnsupportedKind(_unsupported[kind])


def allocate(kind, size):
    """
    A zero-initialized, contiguous buffer of ``size`` elements, owned by
    whoever asked for it.
    """
    kind = resolve(kind)
    _check_supported(kind)
    logger.debug('allocating %s buffer of %d elements', kind, size)
    return np.zeros(size, dtype=kind.to_numpy_dtype())


def borrow(buf, kind):
    """
    Wrap a caller supplied buffer for use by an array of ``kind``.

    Nothing is copied: writes through the result are visible to every other
    holder of ``buf``.
    """
    kind = resolve(kind)
    _check_supported(kind)
    return _as_buffer(buf, kind)


@dispatch(np.ndarray, DTypes)
def _as_buffer(buf, kind):
    if buf.ndim != 1:
        raise TypeError('Expected a one-dimensional buffer, got %d dimensions'
                        % buf.ndim)
    if buf.dtype != kind.to_numpy_dtype():
        raise TypeError('Buffer of dtype %s cannot hold %s elements'
                        % (buf.dtype, kind))
    return buf


@dispatch(object, DTypes)
def _as_buffer(buf, kind):
    # bytearray, memoryview, array.array, mmap ...
    result = np.frombuffer(buf, dtype=kind.to_numpy_dtype())
    logger.debug('borrowing %d element %s view over %s',
                 len(result), kind, type(buf).__name__)
    return result


#------------------------------------------------------------------------
# Value coercion
#------------------------------------------------------------------------

def _wrap(value, bits, signed):
    value %= 1 << bits
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _truncate(value):
    if isinstance(value, numbers.Integral):
        return int(value)
    value = float(value)
    if not math.isfinite(value):
        return 0
    return int(value)


def _clamp(value):
    if isinstance(value, numbers.Integral):
        return min(max(int(value), 0), 255)
    value = float(value)
    if math.isnan(value):
        return 0
    # round() is round-half-to-even on floats
    return int(round(min(max(value, 0.0), 255.0)))


def coerce(kind, value):
    """
    The value stored when ``value`` is written into a buffer of ``kind``.

    Integer kinds truncate toward zero and wrap around, the clamped kind
    saturates, float kinds round to their own precision.

    >>> coerce(DTypes.int8, 200)
    -56
    >>> coerce(DTypes.uint8, -1.7)
    255
    >>> coerce(DTypes.uint8_clamped, 300)
    255
    >>> coerce(DTypes.int32, float('nan'))
    0
    """
    kind = resolve(kind)
    info = _kinds[kind]
    if kind.is_big:
        if not isinstance(value, numbers.Integral):
            raise TypeError('Cannot convert %r to a %s element' % (value, kind))
        return _wrap(int(value), 64, info.signed)
    if info.floating:
        with np.errstate(over='ignore'):
            return info.numpy_type(value)
    if info.clamped:
        return _clamp(value)
    return _wrap(_truncate(value), 8 * info.itemsize, info.signed)


def to_python(kind, raw):
    """A raw buffer element as a plain Python int or float."""
    if resolve(kind).is_floating:
        return float(raw)
    return int(raw)
