"""
Exception hierarchy for colstats.

All exceptions inherit from ColStatsError to allow catching any
library-specific error. Module-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Malformed data is not an error: unparseable cells become missing
      values and degenerate statistics return 0
"""


class ColStatsError(Exception):
    """Base exception for all colstats errors."""
    pass


class ValidationError(ColStatsError):
    """
    Input validation failed.

    Raised when caller-provided arguments fail validation checks
    (non-numeric arrays, unknown options, malformed delimiters).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sequence that must be one-dimensional is not.
    """
    pass


class IngestionError(ColStatsError):
    """
    Reading a source file failed.

    Never escapes read_file(): the reader converts it into the
    last-error string of the returned IngestSolution.

    Attributes:
        path: Path of the file that could not be read
        reason: Underlying cause as text
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        reason: str | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.reason = reason


class IngestionWarning(UserWarning):
    """Issued when a source file could not be read or held no lines."""
    pass
