"""Exceptions raised while building a QR image."""


class QRGenError(Exception):
    """Base class for every failure the generator reports."""


class ValidationError(QRGenError):
    """Invalid command-line input, detected before any work starts."""

    def __init__(self, message: str = "", show_usage: bool = False):
        super().__init__(message)
        self.show_usage = show_usage


class FormatError(QRGenError):
    """A color spec that is not six hex digits."""


class SizeError(QRGenError):
    """The QR code does not fit on the background."""


class ImageIOError(QRGenError):
    """An image could not be opened, decoded or written."""


class EncodeError(QRGenError):
    """The QR library refused the payload."""
