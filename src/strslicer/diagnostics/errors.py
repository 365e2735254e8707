"""Slicer exception hierarchy with structured diagnostics.

Scanning never raises: a delimiter that is not found is reported as
absence (None or False). These exceptions are reserved for misuse of
the slicer, such as jumping outside the source.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["SlicerError", "SlicerPositionError"]


class SlicerError(Exception):
    """Base exception for all slicer errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SlicerError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SlicerPositionError(SlicerError):
    """Requested position is out of bounds or behind the cursor.

    The slicer position is left unchanged.
    """
