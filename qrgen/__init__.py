"""QR Code Generator — QR codes composited onto PNG backgrounds."""

import os
from dataclasses import dataclass

__version__ = "1.2.0"
__build__ = "dev"  # replaced by the release build

# Shared constants
DEFAULT_LEVEL = 1  # Level-M
DEFAULT_MARK_SHIFT = 5  # label inset from the bottom-left corner, in pixels
QUIET_ZONE = 4  # border around the symbol, in modules
LEVEL_NAMES = ("L", "M", "Q", "H")


@dataclass(frozen=True)
class BuildInfo:
    """Version details shown in the usage banner."""

    version: str
    build: str

    @classmethod
    def current(cls) -> "BuildInfo":
        return cls(__version__, os.environ.get("QRGEN_BUILD") or __build__)

    def banner(self) -> str:
        return f"QR Code Generator V{self.version}.{self.build}"
