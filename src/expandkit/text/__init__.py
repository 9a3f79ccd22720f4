"""Line and indentation utilities for text blocks.

This module provides pure functions to split text into lines, discover and
remove common indentation, indent blocks and normalize leading/trailing
new lines.
"""

from .models import NewLineMode, FormatError
from .indent import (
    extract_line,
    extract_lines,
    is_empty_line,
    find_indent,
    deindent_line,
    deindent_block,
    indent_block,
    reindent_block,
    tabs_to_spaces_line,
    tabs_to_spaces,
    starts_with_new_line,
    ends_with_new_line,
    force_new_line,
    normalize_new_line,
    normalize_text,
    scan_for_line_start,
    scan_for_line_end,
)

__all__ = [
    "NewLineMode",
    "FormatError",
    "extract_line",
    "extract_lines",
    "is_empty_line",
    "find_indent",
    "deindent_line",
    "deindent_block",
    "indent_block",
    "reindent_block",
    "tabs_to_spaces_line",
    "tabs_to_spaces",
    "starts_with_new_line",
    "ends_with_new_line",
    "force_new_line",
    "normalize_new_line",
    "normalize_text",
    "scan_for_line_start",
    "scan_for_line_end",
]
