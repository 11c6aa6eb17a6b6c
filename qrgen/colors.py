"""Hex color parsing and contrast helpers."""

import string

from qrgen.errors import FormatError

Color = tuple[int, int, int, int]


def parse_color(spec: str) -> Color:
    """Parse an ``RRGGBB`` hex string into an opaque RGBA tuple.

    Raises:
        FormatError: If ``spec`` is not exactly six hex digits.
    """
    if len(spec) != 6:
        raise FormatError(f"invalid color '{spec}': expected 6 hex digits (RRGGBB)")
    if any(ch not in string.hexdigits for ch in spec):
        raise FormatError(f"invalid color '{spec}': not a hex value")
    return int(spec[0:2], 16), int(spec[2:4], 16), int(spec[4:6], 16), 255


def negative_color(pixel) -> Color:
    """Photographic negative of ``pixel``, always fully opaque."""
    r, g, b = pixel[:3]
    return 255 - r, 255 - g, 255 - b, 255
