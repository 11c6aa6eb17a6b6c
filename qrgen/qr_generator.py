"""Generate QR code rasters with either python-qrcode or segno."""

import io

import qrcode
import segno
from qrcode.exceptions import DataOverflowError
from PIL import Image

from qrgen import DEFAULT_LEVEL, LEVEL_NAMES, QUIET_ZONE
from qrgen.colors import Color
from qrgen.errors import EncodeError

BACKENDS = ("qrcode", "segno")

_QRCODE_LEVELS = (
    qrcode.constants.ERROR_CORRECT_L,
    qrcode.constants.ERROR_CORRECT_M,
    qrcode.constants.ERROR_CORRECT_Q,
    qrcode.constants.ERROR_CORRECT_H,
)


def generate_qr_code(
    content: str,
    size: int,
    level: int = DEFAULT_LEVEL,
    back_color: Color = (255, 255, 255, 255),
    fill_color: Color = (0, 0, 0, 255),
    backend: str = "qrcode",
) -> Image.Image:
    """Encode ``content`` into a square RGBA QR image.

    The symbol is rendered at one pixel per module with a quiet zone of
    ``QUIET_ZONE`` modules, then scaled with nearest-neighbour sampling to
    exactly ``size`` pixels. A ``size`` smaller than the symbol itself is
    raised to the symbol size so that no module is dropped.

    Args:
        content: The text or URL to encode.
        size: Requested width and height in pixels.
        level: Error correction level, 0 (L) to 3 (H).
        back_color: RGBA color for light modules and the quiet zone.
        fill_color: RGBA color for dark modules.
        backend: ``"qrcode"`` or ``"segno"``.

    Returns:
        PIL Image in RGBA mode.

    Raises:
        EncodeError: If the content is empty or does not fit in a QR symbol.
        ValueError: If ``level`` or ``backend`` is unknown.
    """
    if not 0 <= level < len(LEVEL_NAMES):
        raise ValueError(f"Unknown error correction level {level}. Choose from 0 to 3.")
    if not content:
        raise EncodeError("QR data cannot be empty.")

    if backend == "qrcode":
        symbol = _render_qrcode(content, level, back_color, fill_color)
    elif backend == "segno":
        symbol = _render_segno(content, level, back_color, fill_color)
    else:
        raise ValueError(f"Unknown backend '{backend}'. Choose from: {', '.join(BACKENDS)}")

    symbol = symbol.convert("RGBA")
    if size > symbol.width:
        symbol = symbol.resize((size, size), Image.NEAREST)
    return symbol


def _render_qrcode(content: str, level: int, back_color: Color, fill_color: Color) -> Image.Image:
    qr = qrcode.QRCode(
        error_correction=_QRCODE_LEVELS[level],
        box_size=1,
        border=QUIET_ZONE,
    )
    qr.add_data(content)
    # qrcode 8 reports an overflow as an invalid version (ValueError)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        raise EncodeError(f"QR data too long ({len(content)} chars) for level {LEVEL_NAMES[level]}: {e}") from e

    qr_image = qr.make_image(fill_color=fill_color[:3], back_color=back_color[:3])
    return qr_image.get_image()


def _render_segno(content: str, level: int, back_color: Color, fill_color: Color) -> Image.Image:
    try:
        qr = segno.make(content, error=LEVEL_NAMES[level].lower(), micro=False, boost_error=False)
    except segno.DataOverflowError as e:
        raise EncodeError(f"QR data too long ({len(content)} chars) for level {LEVEL_NAMES[level]}: {e}") from e

    buf = io.BytesIO()
    qr.save(buf, kind="png", scale=1, border=QUIET_ZONE, dark=fill_color[:3], light=back_color[:3])
    buf.seek(0)
    with Image.open(buf) as img:
        img.load()
        return img.copy()
