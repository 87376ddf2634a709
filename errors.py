"""Exceptions raised by the Pisti core."""

from __future__ import annotations


class PistiError(Exception):
    """Base class for every error raised by cards, hands, decks and players."""


class ValidationError(PistiError, ValueError):
    """An argument was missing or had an invalid value."""


class GameStateError(PistiError):
    """The operation is not allowed in the object's current state."""


class OutOfRangeError(PistiError, IndexError):
    """An index or count fell outside the valid range."""


__all__ = ["GameStateError", "OutOfRangeError", "PistiError", "ValidationError"]
