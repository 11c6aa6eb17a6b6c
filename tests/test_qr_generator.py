"""Tests for QR code generation."""

import pytest

from qrgen import QUIET_ZONE
from qrgen.errors import EncodeError
from qrgen.qr_generator import BACKENDS, generate_qr_code

# "hello" fits a version 1 symbol (21 modules) at every level
SYMBOL_SIDE = 21 + 2 * QUIET_ZONE


@pytest.mark.parametrize("backend", BACKENDS)
class TestGenerateQrCode:
    """Tests for generate_qr_code with each backend."""

    def test_exact_requested_size(self, backend):
        img = generate_qr_code("hello", size=100, level=1, backend=backend)
        assert img.size == (100, 100)
        assert img.mode == "RGBA"

    def test_size_below_symbol_uses_symbol_size(self, backend):
        """Test that a too-small size is raised to one pixel per module."""
        img = generate_qr_code("hello", size=10, level=1, backend=backend)
        assert img.size == (SYMBOL_SIDE, SYMBOL_SIDE)

    def test_quiet_zone_and_finder_pattern(self, backend):
        """Test the corner is background and the finder pattern starts after the quiet zone."""
        img = generate_qr_code("hello", size=1, backend=backend)
        assert img.getpixel((0, 0)) == (255, 255, 255, 255)
        assert img.getpixel((QUIET_ZONE, QUIET_ZONE)) == (0, 0, 0, 255)

    def test_custom_colors(self, backend):
        img = generate_qr_code(
            "hello",
            size=58,
            back_color=(250, 240, 10, 255),
            fill_color=(200, 0, 0, 255),
            backend=backend,
        )
        colors = {color for _, color in img.getcolors()}
        assert colors == {(250, 240, 10, 255), (200, 0, 0, 255)}

    @pytest.mark.parametrize("level", [0, 1, 2, 3])
    def test_all_levels(self, backend, level):
        img = generate_qr_code("https://example.com", size=200, level=level, backend=backend)
        assert img.size == (200, 200)

    def test_empty_content_rejected(self, backend):
        with pytest.raises(EncodeError):
            generate_qr_code("", size=100, backend=backend)

    def test_oversized_content_rejected(self, backend):
        with pytest.raises(EncodeError):
            generate_qr_code("x" * 5000, size=100, level=3, backend=backend)


class TestGenerateQrCodeArguments:
    """Tests for argument checking in generate_qr_code."""

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            generate_qr_code("hello", size=100, backend="zxing")

    @pytest.mark.parametrize("level", [-1, 4])
    def test_unknown_level(self, level):
        with pytest.raises(ValueError, match="error correction level"):
            generate_qr_code("hello", size=100, level=level)
