import logging
import sys
from typing import TextIO

from utils.errors import InputReadError

logger = logging.getLogger(__name__)

# Unicode White_Space only, the \x1c-\x1f separators are not stripped
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

def read_line(stream: TextIO) -> str:
    """
    Read exactly one line from a text stream.
    
    The line terminator and any trailing whitespace are removed. Reaching the
    end of the stream before any data is read gives an empty string, the same
    as a blank line does.
    
    Args:
        stream: Open text stream to read from. It is neither closed nor rewound.
        
    Returns:
        The line without trailing whitespace
        
    Raises:
        InputReadError: If the stream cannot be read
    """
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # ValueError covers reads from a closed or detached stream
        raise InputReadError(f"Failed to read input line: {e}") from e
    
    logger.debug(f"Read {len(line)} characters from input")
    return line.rstrip(WHITESPACE)

def read_stdin() -> str:
    """Read one line from standard input."""
    return read_line(sys.stdin)
