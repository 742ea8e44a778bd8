from .arrayprint import walk

__all__ = ['to_nested']


def to_nested(arr):
    """
    Converts the data in an array into nested Python lists.

    The nesting depth equals ``arr.ndim``. Elements are plain ints and
    floats, so the result shares nothing with the array.

    >>> from ndbuf import full
    >>> to_nested(full([2, 1, 2], 1.5, 'float32'))
    [[[1.5, 1.5]], [[1.5, 1.5]]]
    >>> to_nested(full([2, 0], 1))
    [[], []]
    """
    return walk(arr, lambda value: value, lambda children, depth: children)
