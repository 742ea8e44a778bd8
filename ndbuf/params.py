"""
Print options used by ``format_array`` when a call does not pass its own.
"""

from contextlib import contextmanager

from toolz import merge

from .utils import is_integer

__all__ = ['defaults', 'params', 'get_printoptions', 'set_printoptions',
           'reset_printoptions', 'printoptions']

defaults = {
    'precision'      : 6,
    'suppress_small' : False,
    'threshold'      : 1000,
    'edgeitems'      : 3,
}


class params(object):
    """
    Container for print options

    Usage:

    >>> params(precision=4)
    params(edgeitems=3, precision=4, suppress_small=False, threshold=1000)
    """
    __slots__ = ['_internal']

    def __init__(self, **kw):
        self._internal = merge(defaults, validate(kw))

    def get(self, key, default=None):
        return self._internal.get(key, default)

    def update(self, **kw):
        self._internal = merge(self._internal, validate(kw))

    def __getattr__(self, key):
        if key == '_internal':
            raise AttributeError(key)
        try:
            return self._internal[key]
        except KeyError:
            raise AttributeError(key)

    def __getitem__(self, key):
        return self._internal[key]

    def __contains__(self, key):
        return key in self._internal

    def __len__(self):
        return len(self._internal)

    def __iter__(self):
        return iter(self._internal)

    def items(self):
        return self._internal.items()

    def asdict(self):
        return dict(self._internal)

    def __repr__(self):
        return 'params({keys})'.format(
            keys=', '.join('%s=%s' % (k, v)
                           for k, v in sorted(self._internal.items())))


def validate(options):
    """
    Check option names and values, returning ``options`` unchanged.

    >>> validate({'precision': -1})
    Traceback (most recent call last):
        ...
    ValueError: precision must be a non-negative integer, got -1
    """
    for key, value in options.items():
        if key not in defaults:
            raise KeyError('Unknown print option: %s' % key)
        if key == 'suppress_small':
            if not isinstance(value, bool):
                raise ValueError('suppress_small must be a bool, got %r'
                                 % (value,))
        elif not is_integer(value) or value < 0:
            raise ValueError('%s must be a non-negative integer, got %r'
                             % (key, value))
    return options


_current = params()


def get_printoptions():
    """The current print options, as a new dict."""
    return _current.asdict()


def set_printoptions(**kw):
    """
    Change the default print options.

    >>> set_printoptions(precision=3)
    >>> get_printoptions()['precision']
    3
    >>> reset_printoptions()
    """
    _current.update(**kw)


def reset_printoptions():
    """Restore the print options to ``defaults``."""
    global _current
    _current = params()


@contextmanager
def printoptions(**kw):
    """
    Temporarily change print options inside a ``with`` block.

    >>> with printoptions(precision=2):
    ...     get_printoptions()['precision']
    2
    >>> get_printoptions()['precision']
    6
    """
    saved = _current.asdict()
    set_printoptions(**kw)
    try:
        yield get_printoptions()
    finally:
        _current.update(**saved)


def resolve_options(**overrides):
    """
    Current print options with any non-None ``overrides`` applied.

    Overrides are checked the same way ``set_printoptions`` checks them.
    """
    given = dict((k, v) for k, v in overrides.items() if v is not None)
    return merge(_current.asdict(), validate(given))
