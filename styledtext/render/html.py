# render/html.py

import re
from typing import List, Optional

from ..logger import Logger
from ..style.css import declaration
from ..text import Annotated, Concat, Linked, Literal, StyledText, count_nodes

logger = Logger(__name__)

# Replaced in this order
ENTITIES = [('"', '&#34;'), ("'", '&#39;'), ('<', '&#60;'), ('>', '&#62;')]
LINE_BREAK = re.compile(r'\r\n|\r|\n')

def escape(s: str) -> str:
    """
    Escape reserved characters, then turn line breaks into <br> and spaces
    into &nbsp;.
    """
    for char, entity in ENTITIES:
        s = s.replace(char, entity)
    return '<br>'.join(line.replace(' ', '&nbsp;') for line in LINE_BREAK.split(s))

def wrap(href: Optional[str], styles: str, inner: str) -> str:
    """Surround inner with a link (innermost) and a styled span (outermost)."""
    if href is not None:
        # href is inserted verbatim
        inner = f'<a href="{href}">{inner}</a>'
    if styles:
        inner = f'<span style="{styles}">{inner}</span>'
    return inner

def render(t: StyledText) -> str:
    """
    Render a styled text tree to an HTML fragment.

    Annotations and links accumulate down single-child chains. At a Concat
    both sides are rendered with no context and the accumulated context
    wraps their combined output once. The first link bound on the way down
    wins over links nested inside it.
    """
    # Work stack of ('visit', node) and ('join', href, styles) tasks; rendered
    # fragments are pushed onto out. Equivalent to the recursive definition
    # without its depth limit.
    tasks: List[tuple] = [('visit', t)]
    out: List[str] = []
    while tasks:
        task = tasks.pop()
        if task[0] == 'join':
            _, href, styles = task
            right = out.pop()
            left = out.pop()
            out.append(wrap(href, styles, left + right))
            continue

        node, href, styles = task[1], None, ''
        while isinstance(node, (Linked, Annotated)):
            if isinstance(node, Linked):
                if href is None:
                    href = node.href
            else:
                styles += declaration(node.key, node.value)
            node = node.child

        if isinstance(node, Literal):
            out.append(wrap(href, styles, escape(node.value)))
        elif isinstance(node, Concat):
            tasks.append(('join', href, styles))
            tasks.append(('visit', node.right))
            tasks.append(('visit', node.left))
        else:
            raise TypeError(f"Not a styled text node: {node!r}")

    html = out.pop()
    if logger.is_debug():
        logger.debug(f"Rendered {count_nodes(t)} nodes to {len(html)} chars of HTML")
    return html
