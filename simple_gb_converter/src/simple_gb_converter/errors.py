"""Exceptions and warnings raised by the Game Boy tile converter."""


class ConversionError(Exception):
    """Custom exception for conversion errors."""


class TileRangeError(ConversionError, IndexError):
    """Raised when a tile, grid or tilemap value falls outside the supported range."""


class ImageValidationError(ConversionError):
    """Raised when the input image cannot be exported as 4-color tiles."""


class ExportError(ConversionError):
    """Raised when an output file cannot be written."""


class VramBudgetWarning(UserWarning):
    """Issued when the unique tiles will not fit in video memory at once."""
