# render/__init__.py

from .html import render, escape, wrap
from .terminal import TerminalRenderer, to_rich_text

__all__ = ['render', 'escape', 'wrap', 'TerminalRenderer', 'to_rich_text']
