# __init__.py

from .logger import Logger
from .style import Color, ColorParseError, BLACK, Line, Style, DEFAULT_STYLE
from .text import (
    StyledText, Literal, Concat, Linked, Annotated,
    literal, empty, concat, concat_all, join,
    typefaces, monospace, link, height_px, color_of,
    bold, italic, line_decoration, apply_style, plain_text,
)
from .render import render, TerminalRenderer, to_rich_text

__all__ = [
    "StyledText", "Literal", "Concat", "Linked", "Annotated",
    "literal", "empty", "concat", "concat_all", "join",
    "typefaces", "monospace", "link", "height_px", "color_of",
    "bold", "italic", "line_decoration", "apply_style", "plain_text",
    "Color", "ColorParseError", "BLACK", "Line", "Style", "DEFAULT_STYLE",
    "render", "TerminalRenderer", "to_rich_text", "Logger",
]
