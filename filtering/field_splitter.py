import logging
from typing import List, Sequence

from utils.errors import FieldNotFoundError

logger = logging.getLogger(__name__)

def split_by_delimiter(text: str, delimiter: str) -> List[str]:
    """
    Split text on every exact occurrence of a literal delimiter.
    
    Empty segments are kept, and a delimiter that never occurs gives the
    whole text as the only segment. An empty delimiter matches between every
    character and at both ends.
    
    Args:
        text: Text to split
        delimiter: Literal delimiter
        
    Returns:
        Segments in the order they appear in the text
    """
    if delimiter:
        fields = text.split(delimiter)
    else:
        fields = ["", *text, ""]
    logger.debug(f"Split input into {len(fields)} fields on {delimiter!r}")
    return fields

def get_field(fields: Sequence[str], index: int) -> str:
    """
    Select one field by zero-based index.
    
    Raises:
        FieldNotFoundError: If no field exists at the index
    """
    # Negative indexes would silently count from the end
    if index < 0 or index >= len(fields):
        raise FieldNotFoundError(index, len(fields))
    return fields[index]

def select_field(text: str, delimiter: str, index: int) -> str:
    """Split text on the delimiter and return the field at index."""
    return get_field(split_by_delimiter(text, delimiter), index)
