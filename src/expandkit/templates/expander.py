"""Recursive {macro} expansion with indentation-preserving substitution.

Unlike str.format, expansion works on user supplied strings, leaves unknown
macros untouched and expands macros found in substituted values as well.
Multi-line values are reindented to match the column of the macro they
replace.
"""

import logging
from typing import Any, Iterator, Optional

from ..text import (
    NewLineMode,
    extract_lines,
    find_indent,
    is_empty_line,
    normalize_new_line,
    scan_for_line_start,
)
from .models import ExpansionResult
from .resolvers import Resolver, resolve_source
from .syntax import MACRO_PATTERN, MAX_EXPANSION_DEPTH, format_macro

logger = logging.getLogger(__name__)


def fix_indent(text: str, template: str, index: int) -> str:
    """
    Align a substituted value with the macro it replaces.

    Args:
        text: The (already expanded) value
        template: The template containing the macro
        index: Position of the macro in the template

    Returns:
        Value with blank lines trimmed and continuation lines indented
    """
    text = normalize_new_line(text, NewLineMode.SUPPRESS, NewLineMode.SUPPRESS)
    if "\n" not in text:
        return text

    head_index = scan_for_line_start(template, index)
    head = template[head_index:index]
    indent = head if is_empty_line(head) else find_indent(head)

    result = []
    for number, line in enumerate(extract_lines(text)):
        if number:
            result.append(indent)
        result.append(line)

    return "".join(result)


class _Expansion:
    """Expansion of a single text at a given depth."""

    def __init__(self, text: str, depth: int):
        self.text = text
        self.depth = depth
        self._matches: Iterator = (
            MACRO_PATTERN.finditer(text) if depth < MAX_EXPANSION_DEPTH else iter(())
        )
        self._parts: Optional[list[str]] = None
        self._position = 0
        self._pending = None

        if depth >= MAX_EXPANSION_DEPTH:
            logger.debug(f"Maximum expansion depth reached, leaving {text!r} as is")

    def next_value(self, resolver: Resolver) -> Optional[str]:
        """Advance to the next resolved macro and return its value as text.

        Unresolved macros are copied verbatim on the way. Returns None when
        there are no more macros.
        """
        for match in self._matches:
            if self._parts is None:
                self._parts = []

            self._parts.append(self.text[self._position:match.start()])
            value = resolver(match.group("name"))

            if value is None:
                # not resolved, insert verbatim
                self._parts.append(format_macro(match.group("name")))
                self._position = match.end()
                continue

            self._pending = match
            return str(value)

        return None

    def accept(self, expanded: str):
        """Insert the expanded value of the pending macro."""
        match = self._pending
        self._parts.append(fix_indent(expanded, self.text, match.start()))
        self._position = match.end()
        self._pending = None

    def finish(self) -> str:
        if self._parts is None:
            # no macros found
            return self.text

        self._parts.append(self.text[self._position:])
        return "".join(self._parts)


def expand_with(template: str, resolver: Resolver) -> str:
    """
    Expand macros in a template using a resolver function.

    Values are expanded with the same resolver before being inserted. Nesting
    is limited to MAX_EXPANSION_DEPTH levels, deeper values are inserted
    as they are, so self-referencing macros always terminate.

    Args:
        template: The template
        resolver: Function returning the value for a macro name, or None

    Returns:
        Expanded string (the template itself if it contains no macros)
    """
    # Nested expansions are kept on an explicit stack, so nesting depth is
    # not limited by the interpreter's recursion limit.
    stack = [_Expansion(template, 0)]

    while True:
        current = stack[-1]
        value = current.next_value(resolver)

        if value is not None:
            stack.append(_Expansion(value, current.depth + 1))
            continue

        output = current.finish()
        stack.pop()

        if not stack:
            return output

        stack[-1].accept(output)


def expand(template: str, source: Any, ignore_case: bool = False) -> str:
    """
    Expand macros in a template.

    Args:
        template: The template
        source: Resolver function, mapping, settings section, regex match
            or any object whose attributes supply the values
        ignore_case: Ignore case of attribute names (objects only)

    Returns:
        Expanded string
    """
    return expand_with(template, resolve_source(source, ignore_case))


class TemplateExpander:
    """Expander bound to a data source."""

    def __init__(self, source: Any, ignore_case: bool = False):
        """
        Initialize the expander.

        Args:
            source: Anything accepted by resolve_source
            ignore_case: Ignore case of attribute names (objects only)
        """
        self.resolver = resolve_source(source, ignore_case)

    def expand(self, template: str) -> str:
        """Expand macros in a template."""
        return expand_with(template, self.resolver)

    def expand_with_report(self, template: str) -> ExpansionResult:
        """
        Expand macros in a template and report which names were resolved.

        Names are collected at every nesting level. Unresolved names are not
        an error, they are only reported.
        """
        resolved: dict[str, None] = {}
        unresolved: dict[str, None] = {}

        def tracking_resolver(name: str) -> Optional[Any]:
            value = self.resolver(name)
            if value is None:
                unresolved.setdefault(name, None)
            else:
                resolved.setdefault(name, None)
            return value

        expanded = expand_with(template, tracking_resolver)

        if unresolved:
            logger.debug(f"Unresolved macros left verbatim: {sorted(unresolved)}")

        return ExpansionResult(
            original=template,
            expanded=expanded,
            resolved=list(resolved),
            unresolved=list(unresolved),
        )
