"""Macro syntax definitions and patterns."""

import re
from typing import Pattern

# {name} - name made of letters, digits, underscores and dots
MACRO_PATTERN: Pattern = re.compile(r"\{(?P<name>[\w.]+)\}")

MACRO_NAME_PATTERN: Pattern = re.compile(r"[\w.]+")

# Prevents circular expansion while still allowing quite deep nesting
MAX_EXPANSION_DEPTH = 1024


def is_valid_macro_name(name: str) -> bool:
    """
    Check if a macro name is valid.

    Valid names are non-empty and contain only letters, digits,
    underscores and dots. Surrounding whitespace is not allowed.

    Args:
        name: The macro name to validate

    Returns:
        True if valid, False otherwise
    """
    return bool(name) and MACRO_NAME_PATTERN.fullmatch(name) is not None


def format_macro(name: str) -> str:
    """Return macro syntax for given name (e.g. "version" -> "{version}")."""
    if not is_valid_macro_name(name):
        raise ValueError(f"Invalid macro name: {name!r}")
    return "{" + name + "}"
