"""
Filtering module for reading a line and selecting one of its fields.
"""

from .line_reader import read_line, read_stdin
from .field_splitter import split_by_delimiter, get_field, select_field

__all__ = [
    'read_line',
    'read_stdin',
    'split_by_delimiter',
    'get_field',
    'select_field'
]
