import array

import numpy as np
import pytest

from ndbuf.dtypes import (DTypes, resolve, allocate, borrow, coerce,
                          to_python, from_numpy_dtype)
from ndbuf.error import UnsupportedKind


def test_resolve_by_member_and_name():
    assert resolve(DTypes.int32) is DTypes.int32
    assert resolve('uint8_clamped') is DTypes.uint8_clamped


@pytest.mark.parametrize('kind', ['complex64', 'Int32Array', 7, None])
def test_resolve_unknown(kind):
    with pytest.raises(UnsupportedKind) as excinfo:
        resolve(kind)
    assert str(excinfo.value) == 'Unsupported dtype: %s' % (kind,)


def test_itemsize():
    sizes = dict((dt, dt.itemsize) for dt in DTypes)
    assert sizes == {
        DTypes.int8: 1, DTypes.uint8: 1, DTypes.uint8_clamped: 1,
        DTypes.int16: 2, DTypes.uint16: 2,
        DTypes.int32: 4, DTypes.uint32: 4,
        DTypes.float16: 2, DTypes.float32: 4, DTypes.float64: 8,
        DTypes.bigint64: 8, DTypes.biguint64: 8,
    }


def test_kind_traits():
    assert DTypes.int16.is_signed and DTypes.int16.is_integer
    assert not DTypes.uint16.is_signed
    assert DTypes.float32.is_floating and not DTypes.float32.is_integer
    assert DTypes.uint8_clamped.is_clamped and not DTypes.uint8.is_clamped
    assert DTypes.bigint64.is_big and not DTypes.int32.is_big
    assert str(DTypes.float64) == 'float64'


@pytest.mark.parametrize('kind', [dt for dt in DTypes
                                  if dt is not DTypes.float16])
def test_allocate_zero_initialized(kind):
    buf = allocate(kind, 5)
    assert isinstance(buf, np.ndarray)
    assert buf.shape == (5,)
    assert buf.dtype.itemsize == kind.itemsize
    assert (buf == 0).all()


def test_allocate_empty():
    assert len(allocate('int32', 0)) == 0


def test_allocate_float16_unsupported():
    with pytest.raises(UnsupportedKind) as excinfo:
        allocate(DTypes.float16, 3)
    assert str(excinfo.value) == 'float16 not supported in this environment'


def test_allocate_unknown():
    with pytest.raises(UnsupportedKind) as excinfo:
        allocate('float128', 3)
    assert str(excinfo.value) == 'Unsupported dtype: float128'


@pytest.mark.parametrize('kind, value, expected', [
    ('int8', 200, -56),
    ('int8', -129, 127),
    ('uint8', -1, 255),
    ('uint8', 256, 0),
    ('int16', 32768, -32768),
    ('uint16', 70000, 4464),
    ('int32', 2 ** 31, -2 ** 31),
    ('uint32', -1, 2 ** 32 - 1),
    ('int32', 1.7, 1),
    ('int32', -1.7, -1),
    ('int32', float('nan'), 0),
    ('int32', float('inf'), 0),
    ('uint8', 257.9, 1),
    ('int32', True, 1),
    ('int16', np.int64(40000), -25536),
])
def test_coerce_wrapping_integers(kind, value, expected):
    assert coerce(kind, value) == expected


@pytest.mark.parametrize('value, expected', [
    (300, 255),
    (-5, 0),
    (1.5, 2),
    (2.5, 2),
    (0.4, 0),
    (254.7, 255),
    (-0.5, 0),
    (float('nan'), 0),
    (float('inf'), 255),
])
def test_coerce_clamped(value, expected):
    assert coerce('uint8_clamped', value) == expected


def test_coerce_big_integers():
    assert coerce('bigint64', 2 ** 63) == -2 ** 63
    assert coerce('biguint64', -1) == 2 ** 64 - 1
    assert coerce('bigint64', np.int32(-7)) == -7
    big = 2 ** 53 + 1
    assert coerce('bigint64', big) == big


@pytest.mark.parametrize('kind', ['bigint64', 'biguint64'])
def test_coerce_big_rejects_floats(kind):
    with pytest.raises(TypeError) as excinfo:
        coerce(kind, 1.5)
    assert str(excinfo.value) == 'Cannot convert 1.5 to a %s element' % kind


def test_coerce_floats():
    assert coerce('float64', 3) == 3.0
    assert coerce('float32', 0.1) == np.float32(0.1)
    assert float(coerce('float32', 0.1)) != 0.1
    assert np.isinf(coerce('float32', 1e40))


def test_to_python():
    value = to_python('float32', np.float32(1.5))
    assert type(value) is float and value == 1.5
    value = to_python('biguint64', np.uint64(2 ** 64 - 1))
    assert type(value) is int and value == 2 ** 64 - 1
    assert type(to_python('uint8', np.uint8(3))) is int


def test_from_numpy_dtype():
    assert from_numpy_dtype(np.dtype('int64')) is DTypes.bigint64
    assert from_numpy_dtype('uint64') is DTypes.biguint64
    assert from_numpy_dtype(np.uint8) is DTypes.uint8
    assert from_numpy_dtype('float32') is DTypes.float32
    with pytest.raises(UnsupportedKind):
        from_numpy_dtype('complex128')


def test_borrow_numpy_buffer_is_not_copied():
    buf = np.arange(6, dtype=np.int32)
    assert borrow(buf, 'int32') is buf


def test_borrow_numpy_buffer_checks_dtype_and_rank():
    with pytest.raises(TypeError):
        borrow(np.zeros(4, dtype=np.float32), 'float64')
    with pytest.raises(TypeError):
        borrow(np.zeros((2, 2), dtype=np.float64), 'float64')


def test_borrow_buffer_protocol_shares_memory():
    raw = bytearray(8)
    buf = borrow(raw, 'int16')
    assert len(buf) == 4
    buf[1] = -1
    assert raw[2:4] == b'\xff\xff'

    ints = array.array('i', [1, 2, 3])
    buf = borrow(ints, 'int32')
    buf[0] = 42
    assert ints[0] == 42


def test_borrow_float16_unsupported():
    with pytest.raises(UnsupportedKind):
        borrow(np.zeros(2, dtype=np.float16), 'float16')
