from .arrayprint import format_array

__all__ = ['array_repr']


def array_repr(a):
    body = format_array(a)
    pre = 'ndarray('
    post = ',\n' + ' '*len(pre) + "dtype='" + str(a.dtype) + "'" + ')'

    # For a multi-line, start it on the next line so things align properly
    if '\n' in body:
        pre += '\n'

    return pre + body + post
