"""Custom exception hierarchy for smartcrop."""

from __future__ import annotations


class SmartcropError(Exception):
    """Base exception for all smartcrop errors."""


class InvalidImageError(SmartcropError):
    """Raised when the input pixel buffer is missing, empty or in an unsupported layout."""


class InvalidConfigurationError(SmartcropError):
    """Raised when crop options or boost areas are invalid."""


class NoCandidateError(SmartcropError):
    """Raised when candidate generation yields no crop rectangles."""
