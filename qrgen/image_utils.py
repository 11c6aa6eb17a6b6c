"""Image processing utilities: background loading, compositing, labels and PNG output."""

import io
import os
import sys
from enum import Enum

from PIL import Image, ImageDraw, ImageFont

from qrgen import DEFAULT_MARK_SHIFT
from qrgen.colors import negative_color
from qrgen.errors import ImageIOError, SizeError


class VerifyResult(Enum):
    """Result of QR scannability verification."""
    SCANNABLE = "scannable"
    NOT_SCANNABLE = "not_scannable"
    SKIPPED = "skipped"  # pyzbar not installed


def load_background(path: str) -> Image.Image:
    """Load a PNG background into a fresh RGBA canvas.

    Args:
        path: Path to the background PNG.

    Returns:
        A mutable RGBA copy of the decoded image.

    Raises:
        ImageIOError: If the file doesn't exist or is not a valid PNG.
    """
    if not os.path.exists(path):
        raise ImageIOError(f"Background image not found: {path}")

    try:
        with Image.open(path, formats=["PNG"]) as img:
            img.load()
            return img.convert("RGBA")
    except (OSError, SyntaxError) as e:
        raise ImageIOError(f"Could not open background '{path}': {e}") from e


def placement(bg_size: tuple[int, int], fg_size: tuple[int, int], xshift: int = 0, yshift: int = 0) -> tuple[int, int]:
    """Top-left corner that centers ``fg_size`` inside ``bg_size``, then shifts it."""
    bw, bh = bg_size
    fw, fh = fg_size
    return (bw - fw) // 2 + xshift, (bh - fh) // 2 + yshift


def paint_code(canvas: Image.Image, code: Image.Image, xshift: int = 0, yshift: int = 0) -> tuple[int, int]:
    """Composite ``code`` over ``canvas`` in place, centered and shifted.

    Uses source-over alpha compositing. Whatever part of the code lands
    outside the canvas is clipped.

    Returns:
        The (x, y) placement origin on the canvas.

    Raises:
        SizeError: If the code is wider or taller than the canvas.
    """
    if code.width > canvas.width or code.height > canvas.height:
        raise SizeError(
            f"QR code larger than background "
            f"({code.width}x{code.height} > {canvas.width}x{canvas.height})"
        )

    x, y = placement(canvas.size, code.size, xshift, yshift)

    # alpha_composite rejects negative destinations, so clip the source instead
    src_x, src_y = max(0, -x), max(0, -y)
    dst_x, dst_y = max(0, x), max(0, y)
    if src_x < code.width and src_y < code.height and dst_x < canvas.width and dst_y < canvas.height:
        canvas.alpha_composite(code.convert("RGBA"), dest=(dst_x, dst_y), source=(src_x, src_y))
    return x, y


def add_label(canvas: Image.Image, label: str, shift: int = DEFAULT_MARK_SHIFT) -> tuple[int, int, int, int]:
    """Draw ``label`` near the bottom-left corner in a contrasting color.

    The text baseline starts ``shift`` pixels in from the left edge and up
    from the bottom edge. The ink is the negative of the pixel at that
    anchor; an anchor outside the canvas counts as transparent black.

    Returns:
        The RGBA color the label was drawn with.
    """
    x = shift
    y = canvas.height - shift
    if 0 <= x < canvas.width and 0 <= y < canvas.height:
        pixel = canvas.getpixel((x, y))
    else:
        pixel = (0, 0, 0, 0)
    color = negative_color(pixel)
    if not label:
        return color

    font = ImageFont.load_default_imagefont()
    # the bitmap font only covers Latin-1
    label = label.encode("latin-1", "replace").decode("latin-1")
    draw = ImageDraw.Draw(canvas)
    draw.fontmode = "1"
    draw.text((x, y - _baseline(font)), label, fill=color, font=font)
    return color


def _baseline(font: ImageFont.ImageFont) -> int:
    """Rows from the top of a glyph cell down to the baseline."""
    cell = Image.new("1", font.getbbox("H")[2:])
    ImageDraw.Draw(cell).text((0, 0), "H", fill=1, font=font)
    return cell.getbbox()[3]


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes in memory."""
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def write_output(data: bytes, output_path: str = "-") -> str:
    """Write PNG bytes to stdout (``"-"`` or empty path) or to a file.

    Returns:
        ``"<stdout>"`` or the path written to.

    Raises:
        ImageIOError: If the destination cannot be written.
    """
    try:
        if not output_path or output_path == "-":
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
            return "<stdout>"

        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        with open(output_path, "wb") as f:
            f.write(data)
        return output_path
    except OSError as e:
        raise ImageIOError(f"Could not write output '{output_path}': {e}") from e


def verify_qr_scannable(image: Image.Image) -> tuple[VerifyResult, str | None]:
    """Attempt to decode a QR code from the final image.

    Uses pyzbar if available, otherwise returns SKIPPED.

    Returns:
        Tuple of (VerifyResult, decoded_data: str | None).
    """
    try:
        from pyzbar.pyzbar import decode as pyzbar_decode
    except ImportError:
        return VerifyResult.SKIPPED, None

    results = pyzbar_decode(image.convert("RGB"))
    if results:
        decoded = results[0].data.decode("utf-8", errors="replace")
        return VerifyResult.SCANNABLE, decoded
    return VerifyResult.NOT_SCANNABLE, None
