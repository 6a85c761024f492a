class AsciiCreatorError(Exception):
    """Base class for every error raised by asciicreator."""


class ImageLoadError(AsciiCreatorError):
    """The source image is missing, unreadable or not a decodable format."""


class InvalidSelector(AsciiCreatorError, ValueError):
    """A palette selector outside the known palettes."""


class InvalidPalette(AsciiCreatorError, ValueError):
    """A custom palette that can't be used for quantization."""


class IoWriteError(AsciiCreatorError, OSError):
    """The destination file couldn't be created or written."""
