# style/css.py

from decimal import Decimal
from typing import Union

FONT_FAMILY = 'font-family'
FONT_SIZE = 'font-size'
COLOR = 'color'
FONT_WEIGHT = 'font-weight'
FONT_STYLE = 'font-style'
TEXT_DECORATION = 'text-decoration'

CSS_KEYS = frozenset({FONT_FAMILY, FONT_SIZE, COLOR, FONT_WEIGHT, FONT_STYLE, TEXT_DECORATION})

def format_number(value: Union[int, float]) -> str:
    """
    Render a number as a plain decimal, the way it reads in CSS:
    12.0 -> '12', 0.5 -> '0.5', 1e-05 -> '0.00001'.
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), 'f')
    return str(value)

def declaration(key: str, value: str) -> str:
    """Single CSS declaration, e.g. 'color:red;'."""
    return f"{key}:{value};"
