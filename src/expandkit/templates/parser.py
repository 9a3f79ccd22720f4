"""Parser for extracting macros from templates."""

import logging

from .models import Macro
from .syntax import MACRO_PATTERN

logger = logging.getLogger(__name__)


class MacroParser:
    """Scan templates for {name} macros."""

    def extract_macros(self, template: str) -> list[Macro]:
        """
        Extract all macros from a template.

        Braces which do not form a valid macro (empty, unmatched or containing
        other characters) are plain text and are not reported.

        Args:
            template: The template string to scan

        Returns:
            List of Macro objects in order of appearance
        """
        macros = []

        for match in MACRO_PATTERN.finditer(template):
            macro = Macro(
                name=match.group("name"),
                syntax=match.group(0),
                start_pos=match.start(),
                end_pos=match.end(),
            )
            macros.append(macro)
            logger.debug(f"Found macro: {macro.syntax} at {macro.start_pos}")

        return macros

    def find_names(self, template: str) -> list[str]:
        """Return unique macro names in order of first appearance."""
        names: dict[str, None] = {}
        for macro in self.extract_macros(template):
            names.setdefault(macro.name, None)
        return list(names)
