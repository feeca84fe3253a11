"""Error kinds raised by sharevote.

Every error derives from ``ReconstructionError`` and carries a ``kind``
naming it, so callers can report errors without matching on classes.
"""

from __future__ import annotations


class ReconstructionError(Exception):
    """Base class for every sharevote failure."""

    kind = "ReconstructionError"


class MalformedNumberError(ReconstructionError, ValueError):
    """A decimal string is not of the form ``-?[0-9]+``."""

    kind = "MalformedNumber"


class InvalidBaseError(ReconstructionError, ValueError):
    """Base outside [2, 36]."""

    kind = "InvalidBase"


class InvalidDigitError(ReconstructionError, ValueError):
    """Digit outside the alphabet, or digit value >= base."""

    kind = "InvalidDigit"


class DegeneratePointsError(ReconstructionError, ValueError):
    """Interpolation input repeats an x coordinate."""

    kind = "DegeneratePoints"


class DuplicateShareError(ReconstructionError, ValueError):
    """Solver input repeats a share identifier."""

    kind = "DuplicateShare"


class InvalidThresholdError(ReconstructionError, ValueError):
    """Threshold k outside [1, n]."""

    kind = "InvalidThreshold"


class ShareFileError(ReconstructionError):
    """A share file could not be read or does not match the schema."""

    kind = "ShareFile"
