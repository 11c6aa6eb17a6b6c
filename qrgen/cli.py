"""CLI entry point for QR Code Generator."""

import argparse
import sys
import traceback

from qrgen import DEFAULT_LEVEL, DEFAULT_MARK_SHIFT, LEVEL_NAMES, BuildInfo
from qrgen.errors import ValidationError


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad input as ValidationError instead of exiting."""

    def __init__(self, *args, build: BuildInfo, **kwargs):
        super().__init__(*args, **kwargs)
        self.build = build

    def format_help(self) -> str:
        text = super().format_help()
        if text.startswith("usage: "):
            text = "USAGE: " + text[len("usage: "):]
        return f"{self.build.banner()}\n\n{text}"

    def error(self, message: str):
        raise ValidationError(message)


def create_parser(build: BuildInfo | None = None) -> argparse.ArgumentParser:
    build = build or BuildInfo.current()
    parser = _ArgumentParser(
        prog="qrgen",
        usage="%(prog)s [options] <code-content>",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        build=build,
        epilog="""
NOTE: result will be written to STDOUT unless -o is given.

Examples:
  # Plain QR code
  qrgen -size 200 "https://example.com" > code.png

  # Centered on a poster, nudged right, with a label
  qrgen -size 300 -bg poster.png -xshift 40 -mark "v2" "https://example.com" > out.png

  # Custom module colors, highest error correction
  qrgen -size 256 -level 3 -fgcolor 1a237e -bgcolor fafafa -o code.png "hello"
        """,
    )

    parser.add_argument(
        "-version", "--version", action="version", version=build.banner()
    )

    # Required
    parser.add_argument(
        "-size", "--size",
        type=int,
        default=0,
        help="size of QR code in pixels (required, > 0)",
    )
    parser.add_argument(
        "content",
        nargs="*",
        help="text or URL to encode (exactly one)",
    )

    # Optional — QR symbol
    parser.add_argument(
        "-level", "--level",
        type=int,
        default=DEFAULT_LEVEL,
        help="error tolerance level (0~3). Default: %(default)s",
    )
    parser.add_argument(
        "-bgcolor", "--bgcolor",
        default="ffffff",
        help="background color for QR code (RRGGBB). Default: %(default)s",
    )
    parser.add_argument(
        "-fgcolor", "--fgcolor",
        default="000000",
        help="foreground color for QR code (RRGGBB). Default: %(default)s",
    )
    parser.add_argument(
        "-backend", "--backend",
        default="qrcode",
        choices=["qrcode", "segno"],
        help="QR encoding library. Default: %(default)s",
    )

    # Optional — composition
    parser.add_argument(
        "-bg", "--bg",
        default="",
        help="background image (PNG)",
    )
    parser.add_argument(
        "-xshift", "--xshift",
        type=int,
        default=0,
        help="x-shift away from center",
    )
    parser.add_argument(
        "-yshift", "--yshift",
        type=int,
        default=0,
        help="y-shift away from center",
    )
    parser.add_argument(
        "-mark", "--mark",
        default="",
        help="mark text (always appear at bottom-left corner)",
    )
    parser.add_argument(
        "-mshift", "--mshift",
        type=int,
        default=DEFAULT_MARK_SHIFT,
        help="shift of label against bottom-left corner. Default: %(default)s",
    )

    # Output
    parser.add_argument(
        "-o", "-output", "--output",
        default="-",
        help="output PNG path, '-' for STDOUT. Default: %(default)s",
    )

    # Flags
    parser.add_argument(
        "-verify", "--verify",
        action="store_true",
        help="decode the result with pyzbar and report on STDERR",
    )
    parser.add_argument(
        "-debug", "--debug",
        action="store_true",
        help="show stack trace on error",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Reject flag values that make generation impossible.

    Raises:
        ValidationError: On a bad level, size or positional argument count.
    """
    if not 0 <= args.level < len(LEVEL_NAMES):
        allowed = ", ".join(f"{i} (Level-{name})" for i, name in enumerate(LEVEL_NAMES))
        raise ValidationError(
            "invalid error tolerance level (-level)\n"
            f"allowed: {allowed}"
        )
    if args.size <= 0:
        raise ValidationError("size of code invalid or not specified (-size)")
    if len(args.content) != 1:
        raise ValidationError(show_usage=True)


def _debug(enabled: bool, message: str) -> None:
    if enabled:
        print(f"  {message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()

    try:
        args = parser.parse_args(argv)
        validate_args(args)
    except ValidationError as e:
        if e.show_usage:
            parser.print_help()
        else:
            print(e)
        return 1

    # Lazy imports for faster --help
    from qrgen.colors import parse_color
    from qrgen.image_utils import encode_png, verify_qr_scannable, write_output, VerifyResult
    from qrgen.pipeline import RenderParams, render

    try:
        params = RenderParams(
            content=args.content[0],
            size=args.size,
            level=args.level,
            background_path=args.bg or None,
            xshift=args.xshift,
            yshift=args.yshift,
            mark=args.mark,
            mark_shift=args.mshift,
            back_color=parse_color(args.bgcolor),
            fill_color=parse_color(args.fgcolor),
            backend=args.backend,
        )
        _debug(args.debug, f"Encoding {len(params.content)} chars at Level-{LEVEL_NAMES[params.level]} via {params.backend}")

        image = render(params)
        data = encode_png(image)
        _debug(args.debug, f"Rendered {image.width}x{image.height} image ({len(data)} bytes)")

        if args.verify:
            result, decoded = verify_qr_scannable(image)
            if result == VerifyResult.SCANNABLE:
                print(f"  ✓ QR code is SCANNABLE! Decoded: {decoded}", file=sys.stderr)
            elif result == VerifyResult.SKIPPED:
                print("  ⊘ Verification skipped (pyzbar not installed)", file=sys.stderr)
                print("    Install with: pip install pyzbar", file=sys.stderr)
            else:
                print("  ⚠️  WARNING: QR code may not be scannable.", file=sys.stderr)
                print(f"     Try a higher -level (current: {params.level}) or a larger -size.", file=sys.stderr)

        destination = write_output(data, args.output)
        _debug(args.debug, f"Written to {destination}")
        return 0

    except Exception as e:
        print(f"ERROR: {e}")
        if args.debug:
            print("".join(traceback.format_exception(e)).rstrip())
        return 2


if __name__ == "__main__":
    sys.exit(main())
