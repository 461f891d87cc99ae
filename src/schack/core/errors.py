"""Exception hierarchy for the board adapter."""

from __future__ import annotations


class SchackError(Exception):
    """Base class for all Schack errors."""


class InvalidCoordinate(SchackError, ValueError):
    """A (column, row) pair lies outside the 8×8 board."""


class InvalidNotation(SchackError, ValueError):
    """A file-rank string is not one of ``A1`` … ``H8``."""


class BoardFormatError(SchackError, ValueError):
    """The engine's board serialization does not hold 8 full rows."""
