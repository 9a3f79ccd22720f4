"""Template expansion with {macro} placeholders.

This module provides functionality to find {name} macros in arbitrary text,
resolve them from dictionaries, objects, regex matches or settings files,
and expand them recursively keeping multi-line values properly indented.
"""

from .models import Macro, ExpansionResult
from .syntax import MACRO_PATTERN, MAX_EXPANSION_DEPTH, is_valid_macro_name, format_macro
from .parser import MacroParser
from .resolvers import (
    Resolver,
    resolve_many,
    resolve_mapping,
    resolve_section,
    resolve_attribute,
    resolve_match,
    resolve_source,
)
from .expander import expand, expand_with, TemplateExpander

__all__ = [
    "Macro",
    "ExpansionResult",
    "MACRO_PATTERN",
    "MAX_EXPANSION_DEPTH",
    "is_valid_macro_name",
    "format_macro",
    "MacroParser",
    "Resolver",
    "resolve_many",
    "resolve_mapping",
    "resolve_section",
    "resolve_attribute",
    "resolve_match",
    "resolve_source",
    "expand",
    "expand_with",
    "TemplateExpander",
]
