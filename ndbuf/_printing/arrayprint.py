"""
String formatting of ndbuf arrays.

The layout follows numpy's: every dimension is bracketed, the innermost
dimension is space separated and outer dimensions are broken over lines.
"""

import logging
import math
import numbers
import sys
from decimal import Context, Decimal, ROUND_HALF_UP

from ..dispatch import dispatch
from ..params import resolve_options

logger = logging.getLogger(__name__)

__all__ = ['walk', 'format_number', 'format_array', 'print_array']


def walk(arr, leaf, node):
    """
    Fold ``arr`` one dimension at a time.

    ``leaf(value)`` is called on every element and ``node(children, depth)``
    on the list of results for each sub-array, outermost last. Elements are
    visited in row-major order.
    """
    shape = arr.shape
    ndim = len(shape)

    def sub_array(prefix):
        depth = len(prefix)
        if depth == ndim:
            return leaf(arr.get(prefix))
        return node([sub_array(prefix + [i]) for i in range(shape[depth])],
                    depth)

    return sub_array([])


def separator(depth, ndim):
    """
    What joins the sub-arrays of dimension ``depth``.

    >>> separator(1, 2), separator(0, 2)
    (' ', '\\n ')
    >>> separator(0, 3), separator(1, 3), separator(1, 4)
    ('\\n\\n\\n ', '\\n  ', '\\n\\n  ')
    """
    if depth == ndim - 1:
        return ' '
    if depth == ndim - 2:
        return '\n ' if ndim == 2 else '\n  '
    if depth == 0:
        return '\n\n\n '
    return '\n\n' + ' ' * (depth + 1)


#------------------------------------------------------------------------
# Numbers
#------------------------------------------------------------------------

def _is_small(value, precision):
    return abs(value) < 10 ** -precision


def _fixed(value, precision):
    """
    ``value`` rounded to ``precision`` decimals, ties away from zero, with
    trailing zeros and a bare trailing point removed.

    >>> _fixed(0.125, 2), _fixed(2.5, 0), _fixed(-1e-08, 6)
    ('0.13', '3', '-0')
    """
    # exact binary value, so 1.005 (really 1.00499...) rounds down
    exact = Decimal(value)
    ctx = Context(prec=max(exact.adjusted(), 0) + precision + 2)
    text = '{:f}'.format(exact.quantize(Decimal(1).scaleb(-precision),
                                        rounding=ROUND_HALF_UP, context=ctx))
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


@dispatch(numbers.Integral, int, bool)
def format_number(value, precision, suppress_small):
    """
    >>> format_number(3.14159, 2, False)
    '3.14'
    >>> format_number(1e-8, 6, True)
    '0'
    >>> format_number(2.50, 3, False)
    '2.5'
    """
    if suppress_small and _is_small(value, precision):
        return '0'
    return str(int(value))


@dispatch(numbers.Real, int, bool)
def format_number(value, precision, suppress_small):
    value = float(value)
    if suppress_small and _is_small(value, precision):
        return '0'
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer():
        if abs(value) >= 1e21:
            return repr(value)
        return str(int(value))
    return _fixed(value, precision)


#------------------------------------------------------------------------
# Arrays
#------------------------------------------------------------------------

def _format_empty(shape):
    if shape == [0, 0]:
        return '[][]'
    return '[]'


def _format_full(arr, precision, suppress_small):
    ndim = arr.ndim
    return walk(arr,
                lambda value: format_number(value, precision, suppress_small),
                lambda parts, depth: '[%s]' % separator(depth, ndim).join(parts))


def _format_summary(arr, precision, suppress_small, edgeitems):
    if arr.ndim > 1:
        return (_format_full(arr, precision, suppress_small) +
                '\n(Large array - showing all elements)')

    n = arr.shape[0]
    if n <= 2 * edgeitems:
        return _format_full(arr, precision, suppress_small)

    def fmt(positions):
        return [format_number(arr.get(i), precision, suppress_small)
                for i in positions]

    logger.debug('summarizing %d elements to %d on each side', n, edgeitems)
    return '[%s ... %s]' % (' '.join(fmt(range(edgeitems))),
                            ' '.join(fmt(range(n - edgeitems, n))))


def format_array(arr, precision=None, suppress_small=None, threshold=None,
                 edgeitems=None):
    """
    Render ``arr`` as a string.

    Options left as None take their value from the current print options
    (see ``ndbuf.params``).

    >>> from ndbuf import full
    >>> print(format_array(full([2, 2], 3.14159), precision=2))
    [[3.14 3.14]
     [3.14 3.14]]
    """
    opts = resolve_options(precision=precision, suppress_small=suppress_small,
                           threshold=threshold, edgeitems=edgeitems)
    precision = int(opts['precision'])
    suppress_small = bool(opts['suppress_small'])

    if arr.size == 0:
        return _format_empty(arr.shape)
    if arr.size > opts['threshold']:
        return _format_summary(arr, precision, suppress_small,
                               int(opts['edgeitems']))
    return _format_full(arr, precision, suppress_small)


def print_array(arr, file=None, **options):
    """Write ``format_array(arr, **options)`` and a newline to ``file``."""
    if file is None:
        file = sys.stdout
    file.write(format_array(arr, **options) + '\n')
