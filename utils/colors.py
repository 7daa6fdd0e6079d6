"""
Color utilities for terminal output.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidColorError

class Colors:
    """ANSI color codes for terminal output."""
    
    # 8-color foreground
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    
    # Reset
    RESET = '\033[0m'

class Color(Enum):
    """The four colors a field can be painted in."""

    RED = Colors.RED
    GREEN = Colors.GREEN
    BLUE = Colors.BLUE
    YELLOW = Colors.YELLOW

# Color tokens accepted on the command line
COLOR_TOKENS = {
    'r': Color.RED,
    'g': Color.GREEN,
    'b': Color.BLUE,
    'y': Color.YELLOW,
}

def colorize(text: str, color: str) -> str:
    """Apply color to text."""
    return f"{color}{text}{Colors.RESET}"

def red(text: str) -> str:
    """Format text in red."""
    return colorize(text, Colors.RED)

def green(text: str) -> str:
    """Format text in green."""
    return colorize(text, Colors.GREEN)

def yellow(text: str) -> str:
    """Format text in yellow."""
    return colorize(text, Colors.YELLOW)

def blue(text: str) -> str:
    """Format text in blue."""
    return colorize(text, Colors.BLUE)

def reset(text: str) -> str:
    """Wrap text in a reset pair, neutralizing any styling before it."""
    return colorize(text, Colors.RESET)

def paint(text: str, color: Color) -> str:
    """
    Render text in one of the four colors.
    
    Text that is already framed by the same color is returned as is,
    so painting twice never stacks reset suffixes.
    
    Args:
        text: Text to render
        color: Color to render it in
        
    Returns:
        The text wrapped in the color's escape code and a reset code
    """
    code = color.value
    if text.startswith(code) and text.endswith(Colors.RESET):
        return text
    return colorize(text, code)

def match_color(token: str) -> Color:
    """
    Map a command line color token to a Color.
    
    Args:
        token: One of 'r', 'g', 'b' or 'y'
        
    Returns:
        The matching Color
        
    Raises:
        InvalidColorError: If the token is not recognized
    """
    try:
        return COLOR_TOKENS[token]
    except KeyError:
        raise InvalidColorError(token) from None

@dataclass
class ColorString:
    """A piece of text together with its color and rendered form."""

    color: Color
    string: str
    colorised: str = ''

    def paint(self) -> str:
        self.colorised = paint(self.string, self.color)
        return self.colorised

    def reset(self) -> str:
        self.colorised = reset(self.string)
        return self.colorised
