from .arrayprint import format_array, format_number, print_array, walk
from .as_py import to_nested
from .array_repr import array_repr
