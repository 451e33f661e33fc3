# style/definitions.py

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from .color import Color, BLACK

class Line(Enum):
    """Kinds of line decoration."""
    UNDER = 'under'
    OVER = 'over'
    THROUGH = 'through'

# CSS text-decoration value for each line kind
LINE_DECORATIONS: Dict[Line, str] = {
    Line.UNDER: 'underline',
    Line.OVER: 'overline',
    Line.THROUGH: 'line-through',
}

@dataclass(frozen=True)
class Style:
    """
    Bundle of text styling options applied in one go with apply_style.

    Attributes:
        typefaces: Preferred font names, most preferred first.
        height: Font size in pixels, or None to inherit.
        color: Text color.
        bold: Heavy font weight.
        italic: Slanted font style.
        line: Line decoration, or None for plain text.
    """
    typefaces: Tuple[str, ...] = ()
    height: Optional[float] = None
    color: Color = BLACK
    bold: bool = False
    italic: bool = False
    line: Optional[Line] = None

DEFAULT_STYLE = Style()

def to_line(kind) -> Line:
    """
    Coerce a Line, its name ("under"), or its CSS value ("underline").

    Raises:
        ValueError: If kind names no line decoration.
    """
    if isinstance(kind, Line):
        return kind
    if isinstance(kind, str):
        name = kind.lower()
        for line, css in LINE_DECORATIONS.items():
            if name in (line.value, css):
                return line
    raise ValueError(f"Unknown line decoration: {kind!r}")
