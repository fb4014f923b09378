"""Exceptions raised by the export pipeline."""


class ExportError(Exception):
    """Base class for export failures."""


class MalformedInputError(ExportError, ValueError):
    """
    Input data that cannot be exported or parsed.

    Raised when a quad generator reports more quads than the scratch buffer
    holds, when block data has the wrong shape, or when a file being read
    back does not follow the expected layout.
    """
