"""
Error taxonomy for the paired capture pipeline
"""


class PairshotError(Exception):
    """Base class for errors that abort a comparison run."""

    pass


class ConfigurationError(PairshotError):
    """Raised when the run configuration is incomplete or invalid."""

    pass


class InputError(PairshotError):
    """Raised when the input page list is missing or unreadable."""

    pass


class CompositeError(PairshotError):
    """Raised when a comparison image cannot be decoded, encoded or written."""

    pass


class ProgressStoreError(PairshotError):
    """Raised when the record log cannot be read at startup or appended to."""

    pass
