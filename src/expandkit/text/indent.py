"""Line extraction, indentation and new line normalization for text blocks."""

import re
from typing import Iterator, Optional, Pattern

from .models import FormatError, NewLineMode

# A line with its terminator (\n or \r\n), or the unterminated last line
RAW_LINE_PATTERN: Pattern = re.compile(r"[^\n]*\n|[^\n]+")

INDENT_PATTERN: Pattern = re.compile(r"[ \t]*")

STARTS_WITH_NEW_LINE_PATTERN: Pattern = re.compile(r"[ \t]*\r?\n")
ENDS_WITH_NEW_LINE_PATTERN: Pattern = re.compile(r"\r?\n[ \t]*\Z")

# Leading blank lines, body, trailing spaces and blank lines. Matches any string.
TRIMMED_TEXT_PATTERN: Pattern = re.compile(
    r"(?P<head>(?:[ \t]*\r?\n)+)?(?P<body>.*?)[ \t]*(?P<tail>(?:\r?\n[ \t]*)+)?\Z",
    re.DOTALL,
)


def extract_line(block: str, start_index: int) -> Optional[str]:
    """
    Extract a single line starting at given index.

    Args:
        block: The block of text
        start_index: Index of the first character of the line

    Returns:
        Text up to and including the line terminator (or end of text),
        None if there is nothing left at start_index
    """
    match = RAW_LINE_PATTERN.match(block, start_index)
    return match.group(0) if match else None


def extract_lines(block: str) -> Iterator[str]:
    """
    Enumerate lines in a block of text.

    Each line keeps its terminator (\\n or \\r\\n), only the last one may
    come without it. Empty text yields no lines.
    """
    for match in RAW_LINE_PATTERN.finditer(block):
        yield match.group(0)


def is_empty_line(line: str) -> bool:
    """Check if the line is empty. Whitespace-only lines are considered empty."""
    return not line or line.isspace()


def find_indent(block: str) -> str:
    """
    Find the common indentation of a block of text.

    Args:
        block: The block of text

    Returns:
        The shortest leading whitespace among all non-blank lines,
        empty string if there are no such lines
    """
    result: Optional[str] = None

    for line in extract_lines(block):
        if is_empty_line(line):
            continue

        found = INDENT_PATTERN.match(line).group(0)
        if result is None or len(found) < len(result):
            result = found

    return result or ""


def deindent_line(indent: str, line: str, strict: bool = False) -> str:
    """
    Remove indentation from a single line.

    Args:
        indent: The indent to remove
        line: The line
        strict: Raise error if a non-blank line does not start with indent

    Returns:
        Line without the indent (or untouched line if it was not indented)

    Raises:
        FormatError: If strict and the line is not properly indented
    """
    if line.startswith(indent):
        return line[len(indent):]

    if strict and not is_empty_line(line):
        raise FormatError(f"Line is not properly indented: {line!r}")

    return line


def deindent_block(indent: Optional[str], block: str, strict: bool = False) -> str:
    """
    Remove indentation from every line of a block.

    Args:
        indent: The indent to remove, or None to use the block's own indent
        block: The block of text
        strict: Raise error if any non-blank line is not properly indented

    Returns:
        Deindented block
    """
    if indent is None:
        indent = find_indent(block)

    return "".join(deindent_line(indent, line, strict) for line in extract_lines(block))


def indent_block(indent: str, block: str) -> str:
    """
    Indent every non-blank line of a block.

    Blank lines are kept as they are, except for a blank last line without
    a terminator which is dropped.
    """
    if not indent:
        return block

    result = []
    for line in extract_lines(block):
        if is_empty_line(line):
            if line.endswith("\n"):
                result.append(line)
        else:
            result.append(indent + line)

    return "".join(result)


def reindent_block(indent: str, block: str, strict: bool = False) -> str:
    """Deindent the block completely, then indent it with given indent."""
    return indent_block(indent, deindent_block(find_indent(block), block, strict))


def tabs_to_spaces_line(line: str, tab_size: int) -> str:
    """
    Convert tabs to spaces in a single line.

    Each tab advances to the next column which is a multiple of tab_size.

    Raises:
        ValueError: If tab_size is not positive
    """
    if tab_size < 1:
        raise ValueError(f"Tab size must be positive, got {tab_size}")

    result = []
    column = 0

    for char in line:
        if char != "\t":
            result.append(char)
            column += 1
        else:
            target = (column + tab_size) // tab_size * tab_size
            result.append(" " * (target - column))
            column = target

    return "".join(result)


def tabs_to_spaces(block: str, tab_size: int) -> str:
    """Convert tabs to spaces in a block of text, line by line."""
    if tab_size < 1:
        raise ValueError(f"Tab size must be positive, got {tab_size}")
    return "".join(tabs_to_spaces_line(line, tab_size) for line in extract_lines(block))


def starts_with_new_line(line: str, trim_spaces: bool) -> bool:
    """Check if line starts with \\n or \\r\\n, optionally skipping spaces and tabs."""
    if trim_spaces:
        return STARTS_WITH_NEW_LINE_PATTERN.match(line) is not None
    return line.startswith(("\r\n", "\n"))


def ends_with_new_line(line: str, trim_spaces: bool) -> bool:
    """Check if line ends with \\n, optionally ignoring trailing spaces and tabs."""
    if trim_spaces:
        return ENDS_WITH_NEW_LINE_PATTERN.search(line) is not None
    return line.endswith("\n")


def force_new_line(
    text: str, head: bool = False, tail: bool = True, new_line: str = "\n"
) -> str:
    """
    Add a new line at the beginning and/or end of text, if not already there.

    Args:
        text: The text
        head: Enforce new line before the first line
        tail: Enforce new line after the last line
        new_line: New line sequence to add

    Returns:
        Text with new lines added
    """
    if not text:
        return new_line if head or tail else text

    head = head and not starts_with_new_line(text, True)
    tail = tail and not ends_with_new_line(text, True)

    return f"{new_line if head else ''}{text}{new_line if tail else ''}"


def _conditional_new_line(mode: NewLineMode, group: Optional[str]) -> str:
    if mode == NewLineMode.FORCE:
        return "\n"
    if mode == NewLineMode.SUPPRESS:
        return ""
    return "\n" if group is not None else ""


def normalize_new_line(
    text: str,
    head: NewLineMode = NewLineMode.PRESERVE,
    tail: NewLineMode = NewLineMode.PRESERVE,
) -> str:
    """
    Trim blank lines around text and put back at most one new line on each side.

    Args:
        text: The text
        head: What to do with the new line before the first non-blank line
        tail: What to do with the new line after the last non-blank line

    Returns:
        Text with normalized new lines

    Raises:
        FormatError: If the text cannot be trimmed
    """
    match = TRIMMED_TEXT_PATTERN.match(text)
    if match is None:
        raise FormatError(f"Text {text!r} cannot be trimmed")

    return (
        _conditional_new_line(head, match.group("head"))
        + match.group("body")
        + _conditional_new_line(tail, match.group("tail"))
    )


def normalize_text(text: str) -> str:
    """Trim new lines around the text and remove its common indentation."""
    return deindent_block(
        None, normalize_new_line(text, NewLineMode.SUPPRESS, NewLineMode.SUPPRESS)
    )


def scan_for_line_start(text: str, index: int) -> int:
    """
    Scan backwards for the start of the line containing given index.

    Returns:
        Index of the character following the nearest \\n at or before index,
        0 if there is none
    """
    if index < 0:
        return 0
    return text.rfind("\n", 0, index + 1) + 1


def scan_for_line_end(text: str, index: int) -> int:
    """
    Scan forward for the end of the line containing given index.

    Returns:
        Index of the last character before the next \\n (or end of text)
    """
    index = max(index, 0)
    end = text.find("\n", index)
    if end < 0:
        end = max(index, len(text))
    return end - 1
