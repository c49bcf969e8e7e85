"""Exceptions raised by the colour task core."""

from __future__ import annotations


class ColourTaskError(Exception):
    """Base class for task state errors."""


class InvalidOption(ColourTaskError):
    """Raised when an option id does not exist or is already consumed."""


class InvalidTransition(ColourTaskError):
    """Raised when an operation is attempted outside its permitted phase."""
