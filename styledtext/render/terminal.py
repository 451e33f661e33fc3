# render/terminal.py

import re
from io import StringIO
from typing import Dict, List, Optional
from rich.style import Style
from rich.text import Text
from rich.console import Console

from ..logger import Logger
from ..style import css
from ..style.color import Color
from ..text import Annotated, Concat, Linked, Literal, StyledText

logger = Logger(__name__)

RGBA = re.compile(r'rgba\((\d+), (\d+), (\d+), (\d+(?:\.\d+)?)\)')

# (key, value) -> rich style for annotations with a terminal equivalent
DECLARATION_STYLES: Dict[tuple, Style] = {
    (css.FONT_WEIGHT, 'bold'): Style(bold=True),
    (css.FONT_STYLE, 'italic'): Style(italic=True),
    (css.TEXT_DECORATION, 'underline'): Style(underline=True),
    (css.TEXT_DECORATION, 'overline'): Style(overline=True),
    (css.TEXT_DECORATION, 'line-through'): Style(strike=True),
}

def declaration_style(key: str, value: str) -> Style:
    """Rich style for one annotation. Font family and size map to nothing."""
    if key == css.COLOR:
        match = RGBA.fullmatch(value)
        if not match:
            logger.warning(f"Ignoring unrecognised color value: {value}")
            return Style.null()
        r, g, b, a = match.groups()
        return Style(color=Color(int(r), int(g), int(b), float(a)).to_rich())
    return DECLARATION_STYLES.get((key, value), Style.null())

def to_rich_text(t: StyledText) -> Text:
    """
    Convert a tree to rich Text. Each literal gets the combined style of the
    annotations above it, inner annotations overriding outer ones. As with
    HTML rendering, the outermost link wins.
    """
    text = Text(end="")
    stack: List[tuple] = [(t, None, Style.null())]
    while stack:
        node, href, style = stack.pop()
        if isinstance(node, Literal):
            if node.value:
                text.append(node.value, style=style + Style(link=href) if href is not None else style)
        elif isinstance(node, Concat):
            stack.append((node.right, href, style))
            stack.append((node.left, href, style))
        elif isinstance(node, Linked):
            stack.append((node.child, href if href is not None else node.href, style))
        elif isinstance(node, Annotated):
            stack.append((node.child, href, style + declaration_style(node.key, node.value)))
        else:
            raise TypeError(f"Not a styled text node: {node!r}")
    return text

class TerminalRenderer:
    """
    Renders styled text to an ANSI string for terminal display.

    Args:
        width: Console width used for wrapping.
        color_system: Rich color system ("truecolor", "256", "standard").
    """
    def __init__(self, width: int = 80, color_system: Optional[str] = "truecolor"):
        self.width = width
        self.color_system = color_system

    def render(self, t: StyledText) -> str:
        """Return the ANSI-styled rendering of t."""
        console = Console(
            width=self.width,
            color_system=self.color_system,
            force_terminal=True,
            file=StringIO(),
            highlight=False
        )
        with console.capture() as capture:
            console.print(to_rich_text(t), end="")
        output = capture.get()
        logger.debug(f"Rendered {len(output)} chars of ANSI output")
        return output
