"""
ndbuf: N-dimensional strided arrays over flat fixed-width numeric buffers.
"""

from .error import (NdbufException, InvalidShape, UnsupportedKind,
                    RankMismatch, IndexOutOfBounds, ArrayWriteError)
from .dtypes import DTypes
from .utils import for_each_index, iter_indices, validate_shape, calculate_size
from .ndarray import Ndarray
from .constructors import empty, zeros, ones, full, eye, identity, astype
from ._printing import format_array, print_array, to_nested
from .params import (get_printoptions, set_printoptions, reset_printoptions,
                     printoptions)

__version__ = '0.1.0'
