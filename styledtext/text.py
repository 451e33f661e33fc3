# text.py

from functools import reduce
from dataclasses import dataclass
from typing import Iterable, List, Union

from .style import css
from .style.color import Color
from .style.definitions import LINE_DECORATIONS, Line, Style, to_line

class StyledText:
    """
    Immutable tree of text and styling operations.

    Build values with the combinators in this module rather than the node
    classes directly. `a + b` concatenates, lifting plain strings.
    """
    __slots__ = ()

    def __add__(self, other: Union['StyledText', str]) -> 'StyledText':
        if isinstance(other, str):
            other = literal(other)
        if not isinstance(other, StyledText):
            return NotImplemented
        return concat(self, other)

    def __radd__(self, other: str) -> 'StyledText':
        if isinstance(other, str):
            return concat(literal(other), self)
        return NotImplemented

@dataclass(frozen=True)
class Literal(StyledText):
    """Raw, unstyled text."""
    value: str

@dataclass(frozen=True)
class Concat(StyledText):
    """Left followed by right."""
    left: StyledText
    right: StyledText

@dataclass(frozen=True)
class Linked(StyledText):
    """Hyperlink around a subtree."""
    href: str
    child: StyledText

@dataclass(frozen=True)
class Annotated(StyledText):
    """One CSS property applied to a subtree."""
    key: str
    value: str
    child: StyledText

# Construction

def literal(s: str) -> StyledText:
    return Literal(s)

def empty() -> StyledText:
    return literal("")

def concat(a: StyledText, b: StyledText) -> StyledText:
    return Concat(a, b)

def concat_all(items: Iterable[StyledText]) -> StyledText:
    """Concatenate in order. No items gives empty()."""
    return reduce(lambda acc, t: concat(t, acc), reversed(list(items)), empty())

def join(separator: StyledText, items: Iterable[StyledText]) -> StyledText:
    """
    Concatenate items with separator between each adjacent pair.

    An empty list gives empty() and a single item is returned as is.
    """
    items = list(items)
    if not items:
        return empty()
    *init, last = items
    return reduce(lambda acc, t: concat(t, concat(separator, acc)), reversed(init), last)

# Styling

def typefaces(faces: List[str], t: StyledText) -> StyledText:
    """
    Prefer the given fonts, first to last. Names are quoted but not escaped.

    An empty list leaves t untouched.
    """
    if not faces:
        return t
    return Annotated(css.FONT_FAMILY, ', '.join(f"'{face}'" for face in faces), t)

def monospace(t: StyledText) -> StyledText:
    return Annotated(css.FONT_FAMILY, 'monospace', t)

def link(href: str, t: StyledText) -> StyledText:
    return Linked(href, t)

def height_px(px: Union[int, float], t: StyledText) -> StyledText:
    return Annotated(css.FONT_SIZE, f"{css.format_number(px)}px", t)

def color_of(c: Color, t: StyledText) -> StyledText:
    return Annotated(css.COLOR, c.to_css(), t)

def bold(t: StyledText) -> StyledText:
    return Annotated(css.FONT_WEIGHT, 'bold', t)

def italic(t: StyledText) -> StyledText:
    return Annotated(css.FONT_STYLE, 'italic', t)

def line_decoration(kind: Union[Line, str], t: StyledText) -> StyledText:
    """Under, over or through line. Raises ValueError for unknown kinds."""
    return Annotated(css.TEXT_DECORATION, LINE_DECORATIONS[to_line(kind)], t)

def apply_style(style: Style, t: StyledText) -> StyledText:
    """
    Apply every option of a Style. Later options become the outer nodes:
    color, typefaces, bold, italic, line, height.
    """
    t = color_of(style.color, t)
    t = typefaces(list(style.typefaces), t)
    if style.bold:
        t = bold(t)
    if style.italic:
        t = italic(t)
    if style.line is not None:
        t = line_decoration(style.line, t)
    if style.height is not None:
        t = height_px(style.height, t)
    return t

# Inspection

def plain_text(t: StyledText) -> str:
    """The raw text of a tree with styling and links dropped."""
    parts, stack = [], [t]
    while stack:
        node = stack.pop()
        if isinstance(node, Literal):
            parts.append(node.value)
        elif isinstance(node, Concat):
            stack.extend((node.right, node.left))
        elif isinstance(node, (Linked, Annotated)):
            stack.append(node.child)
        else:
            raise TypeError(f"Not a styled text node: {node!r}")
    return ''.join(parts)

def count_nodes(t: StyledText) -> int:
    """Number of nodes in a tree."""
    total, stack = 0, [t]
    while stack:
        node = stack.pop()
        total += 1
        if isinstance(node, Concat):
            stack.extend((node.left, node.right))
        elif isinstance(node, (Linked, Annotated)):
            stack.append(node.child)
        elif not isinstance(node, Literal):
            raise TypeError(f"Not a styled text node: {node!r}")
    return total
