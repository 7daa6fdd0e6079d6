# utils package

"""
Utilities module for colors, errors and logging.
"""

from .logging import setup_logging
from .colors import Color, ColorString, paint, match_color
from .errors import (
    PipelineError,
    InputReadError,
    FieldNotFoundError,
    InvalidColorError,
    OutputWriteError
)

__all__ = [
    'setup_logging',
    'Color',
    'ColorString',
    'paint',
    'match_color',
    'PipelineError',
    'InputReadError',
    'FieldNotFoundError',
    'InvalidColorError',
    'OutputWriteError'
]
