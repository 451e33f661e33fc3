# style/__init__.py

from .color import Color, ColorParseError, BLACK
from .css import CSS_KEYS
from .definitions import Line, LINE_DECORATIONS, Style, DEFAULT_STYLE

__all__ = [
    'Color', 'ColorParseError', 'BLACK', 'CSS_KEYS',
    'Line', 'LINE_DECORATIONS', 'Style', 'DEFAULT_STYLE',
]
