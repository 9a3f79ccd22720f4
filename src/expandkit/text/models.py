"""Shared types for text block handling."""

from enum import Enum


class NewLineMode(str, Enum):
    """How a leading or trailing new line is treated during normalization."""

    FORCE = "force"  # Exactly one new line is present
    SUPPRESS = "suppress"  # No new line is present
    PRESERVE = "preserve"  # One new line if there was any, none otherwise


class FormatError(ValueError):
    """Exception raised when a text block does not have the expected layout."""

    pass
