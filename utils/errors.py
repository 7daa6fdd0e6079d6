"""
Error types raised by the field filter pipeline.
"""

from typing import Optional

class PipelineError(Exception):
    """Base class for every failure that ends a filter run."""

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage

class InputReadError(PipelineError):
    """Reading the input line failed."""

class FieldNotFoundError(PipelineError, IndexError):
    """The requested field index does not exist in the split line."""

    def __init__(self, index: int, field_count: int, stage: Optional[str] = None):
        super().__init__(f"No field found at index {index}", stage)
        self.index = index
        self.field_count = field_count

class InvalidColorError(PipelineError, ValueError):
    """The color token is not one of the recognized letters."""

    def __init__(self, token: str, stage: Optional[str] = None):
        super().__init__(f"Invalid color option '{token}'", stage)
        self.token = token

class OutputWriteError(PipelineError):
    """Writing the colorized field failed."""
