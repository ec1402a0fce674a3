"""Hex color decoding for the manifest's BackgroundColor attribute."""
import string
from typing import NamedTuple

from appxmanifest.errors import InvalidColorError

_HEX_DIGITS = frozenset(string.hexdigits)


class Color(NamedTuple):
    a: int = 255
    r: int = 255
    g: int = 255
    b: int = 255

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        """Alpha last, the order Pillow and Tk expect."""
        return (self.r, self.g, self.b, self.a)

    def to_hex(self, alpha: bool = False) -> str:
        channels = (self.a, *self.rgb) if alpha else self.rgb
        return '#' + ''.join('{:02X}'.format(c) for c in channels)


def _byte(pair: str) -> int:
    # int(..., 16) would also accept signs, whitespace and underscores
    if len(pair) != 2 or not _HEX_DIGITS.issuperset(pair):
        raise ValueError(f'{pair!r} is not a hexadecimal byte')
    return int(pair, 16)


def parse_color(hex_value: str) -> Color:
    """Decode ``RRGGBB`` or ``AARRGGBB``, with or without a leading ``#``.

    Six digits give an opaque color. Any other length raises
    :class:`InvalidColorError`; a non-hex digit raises :class:`ValueError`.
    """
    digits = hex_value[1:] if hex_value.startswith('#') else hex_value
    if len(digits) not in (6, 8):
        raise InvalidColorError(hex_value)

    a = 255
    start = 0
    if len(digits) == 8:
        a = _byte(digits[0:2])
        start = 2

    r = _byte(digits[start:start + 2])
    g = _byte(digits[start + 2:start + 4])
    b = _byte(digits[start + 4:start + 6])
    return Color(a, r, g, b)
