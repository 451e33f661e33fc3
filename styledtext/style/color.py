# style/color.py

from dataclasses import dataclass
from rich.color import Color as RichColor, ColorParseError as RichColorParseError
from .css import format_number

class ColorParseError(ValueError):
    """Raised when a color string cannot be understood."""

@dataclass(frozen=True)
class Color:
    """
    An sRGB color with alpha. Channels are integers in [0, 255] and alpha is
    a fraction in [0, 1].
    """
    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self):
        for name in ('red', 'green', 'blue'):
            channel = getattr(self, name)
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise ValueError(f"Color channel '{name}' must be an integer: {channel!r}")
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel '{name}' out of range: {channel}")
        if not 0 <= self.alpha <= 1:
            raise ValueError(f"Color alpha out of range: {self.alpha}")

    @classmethod
    def parse(cls, text: str, alpha: float = 1.0) -> 'Color':
        """
        Build a color from anything rich understands ("red", "#ff0000",
        "rgb(255,0,0)", "color(196)").

        Raises:
            ColorParseError: If the string is not a known color.
        """
        try:
            triplet = RichColor.parse(text).get_truecolor()
        except RichColorParseError as e:
            raise ColorParseError(str(e)) from e
        return cls(triplet.red, triplet.green, triplet.blue, alpha)

    def to_css(self) -> str:
        """Render as a CSS rgba() value."""
        channels = (self.red, self.green, self.blue, self.alpha)
        return f"rgba({', '.join(format_number(c) for c in channels)})"

    def to_rich(self) -> RichColor:
        """Truecolor rich color. Alpha has no terminal equivalent and is dropped."""
        return RichColor.from_rgb(self.red, self.green, self.blue)

BLACK = Color(0, 0, 0)
