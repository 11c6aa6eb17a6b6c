"""Encode, composite and label a QR code in one pass."""

from dataclasses import dataclass

from PIL import Image

from qrgen import DEFAULT_LEVEL, DEFAULT_MARK_SHIFT
from qrgen.colors import Color
from qrgen.image_utils import add_label, load_background, paint_code
from qrgen.qr_generator import generate_qr_code


@dataclass
class RenderParams:
    """Parameters for one QR image."""

    content: str
    size: int
    level: int = DEFAULT_LEVEL
    background_path: str | None = None
    xshift: int = 0
    yshift: int = 0
    mark: str = ""
    mark_shift: int = DEFAULT_MARK_SHIFT
    back_color: Color = (255, 255, 255, 255)
    fill_color: Color = (0, 0, 0, 255)
    backend: str = "qrcode"


def render(params: RenderParams) -> Image.Image:
    """Build the final RGBA image described by ``params``.

    Without a background the QR image itself is the canvas.
    """
    code = generate_qr_code(
        params.content,
        size=params.size,
        level=params.level,
        back_color=params.back_color,
        fill_color=params.fill_color,
        backend=params.backend,
    )

    if params.background_path:
        canvas = load_background(params.background_path)
        paint_code(canvas, code, params.xshift, params.yshift)
    else:
        canvas = code

    if params.mark:
        add_label(canvas, params.mark, params.mark_shift)
    return canvas
